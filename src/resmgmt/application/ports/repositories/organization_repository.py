"""Organization repository port."""

from typing import Protocol
from uuid import UUID

from resmgmt.domain.entities import Organization


class OrganizationRepository(Protocol):
    """Port for organization lookups."""

    async def get_by_id(self, organization_id: UUID) -> Organization | None: ...
