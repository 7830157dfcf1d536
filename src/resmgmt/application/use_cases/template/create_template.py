"""Create template use case."""

import logging
from datetime import UTC, datetime

from resmgmt.application.dto.template_dto import TemplateCreateInput
from resmgmt.application.ports import PermissionChecker
from resmgmt.application.services.organization_scope import OrganizationScopeGuard
from resmgmt.domain.entities import Template
from resmgmt.domain.exceptions import PermissionDenied, ValidationError
from resmgmt.domain.services.template_schema import validate_fields_schema
from resmgmt.domain.value_objects import Capability, IdentityClaim

logger = logging.getLogger(__name__)


class CreateTemplateUseCase:
    """Start a new template lineage at version 1."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        scope_guard: OrganizationScopeGuard | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._scope_guard = scope_guard or OrganizationScopeGuard()

    async def execute(self, claim: IdentityClaim, input_data: TemplateCreateInput) -> Template:
        """Create root version owned by the caller's organization."""
        if not self._permission_checker.check(claim, Capability.CREATE_TEMPLATES):
            raise PermissionDenied("User cannot create templates")

        name = (input_data.name or "").strip()
        if not name:
            raise ValidationError("Template name is required")
        schema = validate_fields_schema(input_data.fields_schema)

        template = Template.new_lineage(
            organization_id=self._scope_guard.scope_filter(claim),
            created_by=claim.user_id,
            name=name,
            fields_schema=schema,
            now=datetime.now(UTC),
            description=input_data.description or "",
            category=(input_data.category or "").strip(),
            is_shared=input_data.is_shared,
        )
        async with self._uow_factory() as uow:
            await uow.templates.create(template)

        logger.info(
            "Created template %s in organization %s", template.id, template.organization_id
        )
        return template
