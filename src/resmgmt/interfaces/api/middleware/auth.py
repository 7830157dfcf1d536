"""Auth middleware - verifies the bearer token into an identity claim."""

import logging
from datetime import UTC, datetime

import falcon.asgi

from resmgmt.application.ports import TokenService
from resmgmt.domain.exceptions import AuthenticationError, SigningError

logger = logging.getLogger(__name__)


class AuthMiddleware:
    """Middleware that verifies the bearer token and sets req.context.claim.

    Requests without a valid token get ``claim = None``; resources that need
    a caller answer 401 with ``req.context.auth_error``.
    """

    def __init__(self, token_service: TokenService) -> None:
        self._token_service = token_service

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.claim = None
        req.context.auth_error = "Missing bearer token"

        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer "):
            return
        try:
            req.context.claim = self._token_service.verify(auth[7:], datetime.now(UTC))
        except SigningError:
            raise
        except AuthenticationError as e:
            logger.info("Rejected token on %s %s: %s", req.method, req.path, e)
            req.context.auth_error = str(e)


def require_claim(req: falcon.asgi.Request):
    """Claim of the caller, or AuthenticationError (401) when there is none."""
    claim = getattr(req.context, "claim", None)
    if claim is None:
        raise AuthenticationError(getattr(req.context, "auth_error", "Unauthorized"))
    return claim
