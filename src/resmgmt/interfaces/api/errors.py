"""Error handlers - map domain errors to HTTP responses."""

import logging

import falcon
import falcon.asgi

from resmgmt.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFound,
    PermissionDenied,
    ResMgmtError,
    SigningError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: list[tuple[type[ResMgmtError], str]] = [
    (ValidationError, falcon.HTTP_400),
    (AuthenticationError, falcon.HTTP_401),
    (PermissionDenied, falcon.HTTP_403),
    (NotFound, falcon.HTTP_404),
    (ConflictError, falcon.HTTP_409),
]


def status_for(error: ResMgmtError) -> str | None:
    """HTTP status for a domain error, or None when it must stay opaque."""
    if isinstance(error, SigningError):
        return None
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return None


async def handle_domain_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: ResMgmtError, params: dict
) -> None:
    status = status_for(ex)
    if status is None:
        logger.error("Internal error on %s %s: %s", req.method, req.path, ex, exc_info=ex)
        resp.status = falcon.HTTP_500
        resp.media = {"error": "Internal server error"}
        return
    resp.status = status
    resp.media = {"error": str(ex)}


async def handle_unexpected_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict
) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error"}
