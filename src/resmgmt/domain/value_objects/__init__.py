"""Domain value objects."""

from resmgmt.domain.value_objects.capability import Capability
from resmgmt.domain.value_objects.capability_set import CapabilitySet, PermissionOverride
from resmgmt.domain.value_objects.identity_claim import IdentityClaim
from resmgmt.domain.value_objects.lifecycle_state import LifecycleState
from resmgmt.domain.value_objects.role import Role

__all__ = [
    "Capability",
    "CapabilitySet",
    "IdentityClaim",
    "LifecycleState",
    "PermissionOverride",
    "Role",
]
