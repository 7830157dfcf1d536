"""Publish new template version use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from resmgmt.application.dto.template_dto import TemplateUpdateInput
from resmgmt.application.ports import PermissionChecker
from resmgmt.application.services.organization_scope import OrganizationScopeGuard
from resmgmt.application.use_cases.template.lineage import resolve_lineage_id
from resmgmt.domain.entities import Template
from resmgmt.domain.exceptions import (
    ConflictError,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from resmgmt.domain.services.template_schema import validate_fields_schema
from resmgmt.domain.value_objects import Capability, IdentityClaim

logger = logging.getLogger(__name__)


class PublishTemplateVersionUseCase:
    """Append version N+1 to a lineage and make it the latest.

    The swap is a compare-and-swap on the lineage's latest row: if another
    writer advanced the lineage after the latest row was read, the repository
    raises ConflictError and nothing is written. Callers may retry from a
    fresh read.
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
        updates: TemplateUpdateInput | None = None,
        notes: str | None = None,
    ) -> Template:
        """Publish a new version of the lineage containing ``template_id``."""
        if not self._permission_checker.check(claim, Capability.EDIT_TEMPLATES):
            raise PermissionDenied("User cannot edit templates")

        updates = updates or TemplateUpdateInput()
        name = updates.name.strip() if updates.name is not None else None
        if name is not None and not name:
            raise ValidationError("Template name cannot be empty")
        fields_schema = (
            validate_fields_schema(updates.fields_schema)
            if updates.fields_schema is not None
            else None
        )

        organization_id = self._scope_guard.scope_filter(claim)
        async with self._uow_factory() as uow:
            lineage_id = await resolve_lineage_id(uow, self._scope_guard, claim, template_id)
            current = await uow.templates.get_latest(lineage_id, organization_id)
            if current is None:
                raise NotFound("Latest template version", str(lineage_id))

            successor = current.successor(
                datetime.now(UTC),
                notes=(notes or "").strip() or None,
                name=name,
                description=updates.description,
                category=updates.category.strip() if updates.category is not None else None,
                fields_schema=fields_schema,
                is_active=updates.is_active,
                is_shared=updates.is_shared,
                created_by=claim.user_id,
            )
            try:
                await uow.templates.swap_latest(current, successor)
            except ConflictError:
                logger.warning(
                    "Concurrent publish on lineage %s at version %s", lineage_id, current.version
                )
                raise

        logger.info("Published version %s of lineage %s", successor.version, lineage_id)
        return successor
