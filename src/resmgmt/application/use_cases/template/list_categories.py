"""List template categories use case."""

from resmgmt.application.services.organization_scope import OrganizationScopeGuard
from resmgmt.domain.value_objects import IdentityClaim


class ListTemplateCategoriesUseCase:
    """Distinct categories of the organization's active latest templates."""

    def __init__(
        self,
        unit_of_work_factory: type,
        scope_guard: OrganizationScopeGuard | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._scope_guard = scope_guard or OrganizationScopeGuard()

    async def execute(self, claim: IdentityClaim) -> list[str]:
        async with self._uow_factory() as uow:
            categories = await uow.templates.list_categories(
                self._scope_guard.scope_filter(claim)
            )
        return sorted({c for c in categories if c})
