"""Domain exceptions."""


class ResMgmtError(Exception):
    """Base exception for resmgmt."""

    pass


class ValidationError(ResMgmtError):
    """Validation failed for input data."""

    pass


class InvalidRole(ValidationError):
    """Role identifier is not one of the known roles."""

    pass


class NotFound(ResMgmtError):
    """Requested resource was not found (or lies outside the caller's organization)."""

    def __init__(self, kind: str, identifier: str = "") -> None:
        self.kind = kind
        self.identifier = identifier
        message = f"{kind} not found" if not identifier else f"{kind} not found: {identifier}"
        super().__init__(message)


class ConflictError(ResMgmtError):
    """Concurrent modification detected; the operation may be retried."""

    pass


class PermissionDenied(ResMgmtError):
    """User does not have the capability for the requested action."""

    pass


class AuthenticationError(ResMgmtError):
    """Base for token and identity failures."""

    pass


class SigningError(AuthenticationError):
    """Signing key is unavailable or too weak."""

    pass


class ExpiredToken(AuthenticationError):
    """Token expiry has passed."""

    pass


class InvalidSignature(AuthenticationError):
    """Token signature does not match or token is unsigned."""

    pass


class MalformedToken(AuthenticationError):
    """Token could not be decoded into a complete identity claim."""

    pass


class IdentityExchangeFailed(AuthenticationError):
    """Identity provider rejected the authorization code."""

    pass


class InternalError(ResMgmtError):
    """Storage or unexpected failure. Message is safe to show to callers."""

    pass
