"""Lineage lookup shared by template use cases."""

from uuid import UUID

from resmgmt.application.ports import UnitOfWork
from resmgmt.application.services.organization_scope import OrganizationScopeGuard
from resmgmt.domain.value_objects import IdentityClaim


async def resolve_lineage_id(
    uow: UnitOfWork,
    scope_guard: OrganizationScopeGuard,
    claim: IdentityClaim,
    template_id: UUID,
) -> UUID:
    """Lineage of ``template_id``, which may be any version row (or the root id)."""
    row = await uow.templates.get_by_id(
        template_id, organization_id=scope_guard.scope_filter(claim)
    )
    return scope_guard.confine(row, claim, "Template", template_id).lineage_id
