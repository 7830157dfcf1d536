"""JWT token service - HS256 signed identity claims."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt

from resmgmt.domain.exceptions import (
    ExpiredToken,
    InvalidSignature,
    MalformedToken,
    SigningError,
    ValidationError,
)
from resmgmt.domain.value_objects import CapabilitySet, IdentityClaim, Role

logger = logging.getLogger(__name__)

MIN_SECRET_LENGTH = 32
WEAK_SECRETS = frozenset(
    {
        "secret",
        "password",
        "your_jwt_secret_key_here",
        "your-secret-key",
        "jwt-secret",
        "default",
        "changeme",
    }
)
REQUIRED_CLAIMS = ["user_id", "organization_id", "email", "role", "permissions", "exp", "iat", "iss"]


class JwtTokenService:
    """Issues and verifies identity tokens.

    - Tokens are stateless; there is no revocation
    - ``exp`` is compared against the caller-supplied ``now``
    """

    def __init__(
        self,
        secret: str,
        issuer: str = "resource-mgmt",
        ttl: timedelta = timedelta(hours=24),
        algorithm: str = "HS256",
    ) -> None:
        self._secret = secret
        self._issuer = issuer
        self._ttl = ttl
        self._algorithm = algorithm

    def _signing_key(self) -> str:
        if not self._secret:
            raise SigningError("JWT secret is not configured")
        if len(self._secret) < MIN_SECRET_LENGTH:
            raise SigningError(f"JWT secret must be at least {MIN_SECRET_LENGTH} characters")
        if self._secret.lower() in WEAK_SECRETS:
            raise SigningError("JWT secret is a known default value")
        return self._secret

    def issue(
        self,
        user_id: UUID,
        organization_id: UUID,
        email: str,
        role: Role,
        permissions: CapabilitySet,
        now: datetime,
    ) -> str:
        """Sign a token for the user that expires ``ttl`` after ``now``."""
        payload = {
            "user_id": str(user_id),
            "organization_id": str(organization_id),
            "email": email,
            "role": str(role),
            "permissions": permissions.to_mapping(),
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
            "iss": self._issuer,
        }
        return jwt.encode(payload, self._signing_key(), algorithm=self._algorithm)

    def verify(self, token: str, now: datetime) -> IdentityClaim:
        """Verify signature, issuer and expiry, and rebuild the claim.

        Raises:
            InvalidSignature: bad signature, unsigned or other-algorithm token
            ExpiredToken: ``exp`` at or before ``now``
            MalformedToken: anything else wrong with the token or its claims
        """
        key = self._signing_key()
        try:
            payload = jwt.decode(
                token,
                key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                options={"verify_exp": False, "verify_iat": False, "require": REQUIRED_CLAIMS},
            )
        except (jwt.InvalidSignatureError, jwt.InvalidAlgorithmError) as e:
            raise InvalidSignature("Invalid token signature") from e
        except jwt.InvalidTokenError as e:
            raise MalformedToken(f"Malformed token: {e}") from e

        exp = payload["exp"]
        if not isinstance(exp, (int, float)) or isinstance(exp, bool):
            raise MalformedToken("Malformed token: exp must be numeric")
        if exp <= now.timestamp():
            raise ExpiredToken("Token has expired")
        return self._claim_from_payload(payload, exp)

    @staticmethod
    def _claim_from_payload(payload: dict[str, Any], exp: float) -> IdentityClaim:
        permissions = payload["permissions"]
        if not isinstance(permissions, dict) or not isinstance(payload["email"], str):
            raise MalformedToken("Malformed token: ill-typed claims")
        try:
            return IdentityClaim(
                user_id=UUID(str(payload["user_id"])),
                organization_id=UUID(str(payload["organization_id"])),
                email=payload["email"],
                role=Role(payload["role"]),
                permissions=CapabilitySet.from_mapping(permissions),
                expires_at=datetime.fromtimestamp(exp, UTC),
            )
        except (ValueError, ValidationError) as e:
            raise MalformedToken(f"Malformed token: {e}") from e
