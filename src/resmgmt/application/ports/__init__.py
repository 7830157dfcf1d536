"""Application ports - interfaces for external adapters."""

from resmgmt.application.ports.identity_provider import IdentityProvider, ProviderIdentity
from resmgmt.application.ports.permission_checker import PermissionChecker
from resmgmt.application.ports.token_service import TokenService
from resmgmt.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "IdentityProvider",
    "PermissionChecker",
    "ProviderIdentity",
    "TokenService",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
