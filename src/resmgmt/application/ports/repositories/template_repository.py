"""Template repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from resmgmt.domain.entities import Template


class TemplateRepository(Protocol):
    """Port for template version persistence.

    Every lookup except ``get_by_id`` without ``organization_id`` is confined
    to one organization.
    """

    async def get_by_id(
        self,
        template_id: UUID,
        *,
        organization_id: UUID | None = None,
        include_deleted: bool = False,
    ) -> Template | None: ...

    async def get_latest(self, lineage_id: UUID, organization_id: UUID) -> Template | None: ...

    async def get_by_version(
        self, lineage_id: UUID, version: int, organization_id: UUID
    ) -> Template | None: ...

    async def list_lineage(self, lineage_id: UUID, organization_id: UUID) -> list[Template]: ...

    async def list_categories(self, organization_id: UUID) -> list[str]: ...

    async def create(self, template: Template) -> Template: ...

    async def swap_latest(self, current: Template, successor: Template) -> Template:
        """Insert ``successor`` and clear ``current``'s latest flag atomically.

        Raises ConflictError if ``current`` is no longer the latest row at its
        version when the swap is attempted.
        """
        ...

    async def soft_delete(self, template_id: UUID, organization_id: UUID, now: datetime) -> None: ...

    async def soft_delete_lineage(
        self, lineage_id: UUID, organization_id: UUID, now: datetime
    ) -> int: ...
