"""Delete template use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from resmgmt.application.ports import PermissionChecker
from resmgmt.application.services.organization_scope import OrganizationScopeGuard
from resmgmt.domain.exceptions import PermissionDenied
from resmgmt.domain.value_objects import Capability, IdentityClaim

logger = logging.getLogger(__name__)


class DeleteTemplateUseCase:
    """Soft delete one template version, or a whole lineage.

    Deleting a single row leaves sibling flags untouched, so removing the
    latest row leaves the lineage without a latest version.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        scope_guard: OrganizationScopeGuard | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._scope_guard = scope_guard or OrganizationScopeGuard()

    async def execute(
        self,
        claim: IdentityClaim,
        template_id: UUID,
        whole_lineage: bool = False,
    ) -> int:
        """Delete and return the number of rows marked deleted."""
        if not self._permission_checker.check(claim, Capability.DELETE_TEMPLATES):
            raise PermissionDenied("User cannot delete templates")

        organization_id = self._scope_guard.scope_filter(claim)
        now = datetime.now(UTC)
        async with self._uow_factory() as uow:
            row = await uow.templates.get_by_id(template_id, organization_id=organization_id)
            row = self._scope_guard.confine(row, claim, "Template", template_id)
            if whole_lineage:
                deleted = await uow.templates.soft_delete_lineage(
                    row.lineage_id, organization_id, now
                )
            else:
                await uow.templates.soft_delete(row.id, organization_id, now)
                deleted = 1

        if row.is_latest_version and not whole_lineage:
            logger.warning("Deleted latest version of lineage %s; no latest remains", row.lineage_id)
        logger.info("Deleted %s template row(s) from lineage %s", deleted, row.lineage_id)
        return deleted
