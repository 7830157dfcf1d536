"""Identity claim carried by a signed token."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from resmgmt.domain.value_objects.capability_set import CapabilitySet
from resmgmt.domain.value_objects.role import Role


@dataclass(frozen=True)
class IdentityClaim:
    """Verified user/organization/role/permission facts for one request."""

    user_id: UUID
    organization_id: UUID
    email: str
    role: Role
    permissions: CapabilitySet
    expires_at: datetime
