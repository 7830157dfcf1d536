"""User entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from resmgmt.domain.value_objects import PermissionOverride, Role


@dataclass
class User:
    """User - member of one organization with a role and optional permission override."""

    id: UUID
    organization_id: UUID
    email: str
    name: str
    role: Role
    created_at: datetime
    updated_at: datetime
    permissions_override: PermissionOverride | None = None
