"""Authentication and user administration DTOs."""

from dataclasses import dataclass

from resmgmt.domain.entities import User
from resmgmt.domain.value_objects import CapabilitySet, IdentityClaim


@dataclass
class AuthResult:
    """Issued token with the claim it carries."""

    token: str
    claim: IdentityClaim
    user: User


@dataclass
class UserPermissionsOutput:
    """User after a role change, with the permissions now in effect."""

    user: User
    effective_permissions: CapabilitySet
