"""Template read use cases."""

from uuid import UUID

from resmgmt.application.services.organization_scope import OrganizationScopeGuard
from resmgmt.application.use_cases.template.lineage import resolve_lineage_id
from resmgmt.domain.entities import Template
from resmgmt.domain.exceptions import NotFound
from resmgmt.domain.value_objects import IdentityClaim


class GetLatestTemplateUseCase:
    """Get the latest active version of a lineage."""

    def __init__(
        self,
        unit_of_work_factory: type,
        scope_guard: OrganizationScopeGuard | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._scope_guard = scope_guard or OrganizationScopeGuard()

    async def execute(self, claim: IdentityClaim, template_id: UUID) -> Template:
        async with self._uow_factory() as uow:
            lineage_id = await resolve_lineage_id(uow, self._scope_guard, claim, template_id)
            latest = await uow.templates.get_latest(
                lineage_id, self._scope_guard.scope_filter(claim)
            )
            if latest is None:
                raise NotFound("Latest template version", str(lineage_id))
            return latest


class GetTemplateVersionUseCase:
    """Point-in-time lookup of one version of a lineage."""

    def __init__(
        self,
        unit_of_work_factory: type,
        scope_guard: OrganizationScopeGuard | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._scope_guard = scope_guard or OrganizationScopeGuard()

    async def execute(self, claim: IdentityClaim, template_id: UUID, version: int) -> Template:
        """Get version ``version`` of the lineage containing ``template_id``."""
        async with self._uow_factory() as uow:
            lineage_id = await resolve_lineage_id(uow, self._scope_guard, claim, template_id)
            row = await uow.templates.get_by_version(
                lineage_id, version, self._scope_guard.scope_filter(claim)
            )
            if row is None:
                raise NotFound("Template version", f"{lineage_id}/{version}")
            return row


class ListTemplateVersionsUseCase:
    """List the active versions of a lineage, newest first."""

    def __init__(
        self,
        unit_of_work_factory: type,
        scope_guard: OrganizationScopeGuard | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._scope_guard = scope_guard or OrganizationScopeGuard()

    async def execute(self, claim: IdentityClaim, template_id: UUID) -> list[Template]:
        async with self._uow_factory() as uow:
            lineage_id = await resolve_lineage_id(uow, self._scope_guard, claim, template_id)
            rows = await uow.templates.list_lineage(
                lineage_id, self._scope_guard.scope_filter(claim)
            )
        return sorted(rows, key=lambda row: row.version, reverse=True)
