"""Duplicate template use case."""

import logging
from copy import deepcopy
from datetime import UTC, datetime
from uuid import UUID

from resmgmt.application.ports import PermissionChecker
from resmgmt.application.services.organization_scope import OrganizationScopeGuard
from resmgmt.domain.entities import Template
from resmgmt.domain.exceptions import PermissionDenied
from resmgmt.domain.value_objects import Capability, IdentityClaim

logger = logging.getLogger(__name__)

COPY_SUFFIX = " (Copy)"


class DuplicateTemplateUseCase:
    """Copy one template version into a brand-new lineage in the caller's organization."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        scope_guard: OrganizationScopeGuard | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._scope_guard = scope_guard or OrganizationScopeGuard()

    async def execute(self, claim: IdentityClaim, source_id: UUID) -> Template:
        """Duplicate ``source_id`` (any version).

        The source must belong to the caller's organization or be shared;
        history is not copied.
        """
        if not self._permission_checker.check(claim, Capability.CREATE_TEMPLATES):
            raise PermissionDenied("User cannot create templates")

        async with self._uow_factory() as uow:
            source = await uow.templates.get_by_id(source_id)
            if source is None or not source.is_shared:
                source = self._scope_guard.confine(source, claim, "Template", source_id)

            duplicate = Template.new_lineage(
                organization_id=self._scope_guard.scope_filter(claim),
                created_by=claim.user_id,
                name=source.name + COPY_SUFFIX,
                fields_schema=deepcopy(source.fields_schema),
                now=datetime.now(UTC),
                description=source.description,
                category=source.category,
            )
            await uow.templates.create(duplicate)

        logger.info(
            "Duplicated template %s into %s for organization %s",
            source_id,
            duplicate.id,
            duplicate.organization_id,
        )
        return duplicate
