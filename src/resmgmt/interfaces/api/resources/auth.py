"""Auth API resources."""

from uuid import UUID

import falcon.asgi

from resmgmt.application.use_cases.auth.login import LoginUseCase
from resmgmt.domain.exceptions import ValidationError
from resmgmt.interfaces.api.middleware.auth import require_claim
from resmgmt.interfaces.api.resources.serializers import (
    claim_to_media,
    read_object,
    user_to_media,
)


class LoginResource:
    """POST /v1/auth/login - exchange an authorization code for a token."""

    def __init__(self, login: LoginUseCase, default_redirect_uri: str) -> None:
        self._login = login
        self._default_redirect_uri = default_redirect_uri

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = await read_object(req)
        code = body.get("code")
        if not isinstance(code, str) or not code.strip():
            raise ValidationError("Missing required field: code")
        organization_id = body.get("organization_id")
        try:
            organization_id = UUID(str(organization_id)) if organization_id else None
        except (TypeError, ValueError):
            raise ValidationError("Invalid organization_id") from None

        result = await self._login.execute(
            code,
            body.get("redirect_uri") or self._default_redirect_uri,
            organization_id=organization_id,
        )
        resp.media = {
            "token": result.token,
            "claim": claim_to_media(result.claim),
            "user": user_to_media(result.user),
        }
        resp.status = falcon.HTTP_200


class MeResource:
    """GET /v1/auth/me - the verified claim of the caller."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = claim_to_media(require_claim(req))
        resp.status = falcon.HTTP_200
