"""Keycloak OIDC provider for authorization code exchange."""

import logging

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from resmgmt.application.ports import ProviderIdentity
from resmgmt.domain.exceptions import IdentityExchangeFailed

logger = logging.getLogger(__name__)


class KeycloakProvider:
    """Keycloak OIDC - exchanges an authorization code and reads user info."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    async def exchange_code(self, code: str, redirect_uri: str) -> ProviderIdentity:
        """Exchange the code for tokens, then resolve the subject via userinfo."""
        if not code:
            raise IdentityExchangeFailed("Authorization code is required")
        try:
            tokens = await self._keycloak.a_token(
                grant_type="authorization_code",
                code=code,
                redirect_uri=redirect_uri,
            )
            info = await self._keycloak.a_userinfo(tokens["access_token"])
        except (KeycloakError, KeyError) as e:
            logger.warning("Authorization code exchange failed: %s", e)
            raise IdentityExchangeFailed("Authorization code exchange failed") from e

        return ProviderIdentity(
            subject=info.get("sub", ""),
            email=info.get("email") or "",
            name=info.get("name") or info.get("preferred_username") or "",
        )
