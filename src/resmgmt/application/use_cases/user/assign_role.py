"""Assign role use case."""

import logging
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from resmgmt.application.dto.auth_dto import UserPermissionsOutput
from resmgmt.application.ports import PermissionChecker
from resmgmt.application.services.organization_scope import OrganizationScopeGuard
from resmgmt.domain.exceptions import PermissionDenied, ValidationError
from resmgmt.domain.services import role_authority
from resmgmt.domain.services.permission_resolver import effective_permissions
from resmgmt.domain.value_objects import Capability, IdentityClaim, PermissionOverride, Role

logger = logging.getLogger(__name__)


class AssignRoleUseCase:
    """Assign a role, and optionally a permission override, to a user of the same organization."""

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
        user_id: UUID,
        role: str | Role | None,
        permissions_override: dict[str, Any] | None = None,
    ) -> UserPermissionsOutput:
        """Actor cannot grant a role above their own, nor capabilities they do not hold.

        An empty override clears it. The actor's own role is never changed here, and
        the organization always keeps at least one administrator.
        """
        if not self._permission_checker.check(claim, Capability.MANAGE_USERS):
            raise PermissionDenied("User cannot manage users")
        if user_id == claim.user_id:
            raise ValidationError("Cannot change your own role")

        new_role = role_authority.normalize(role)
        if not role_authority.has_at_least_privilege(claim.role, new_role):
            raise PermissionDenied(f"Cannot assign role {new_role} above own role {claim.role}")
        override = PermissionOverride.from_mapping(permissions_override)
        withheld = [
            c.value
            for c in Capability
            if getattr(override, c.field_name) is True and not claim.permissions.allows(c)
        ]
        if withheld:
            raise PermissionDenied(
                f"Cannot grant capabilities the actor does not hold: {', '.join(withheld)}"
            )

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id, self._scope_guard.scope_filter(claim))
            user = self._scope_guard.confine(user, claim, "User", user_id)
            if (
                user.role == Role.ADMIN
                and new_role != Role.ADMIN
                and await uow.users.count_admins(user.organization_id) <= 1
            ):
                raise ValidationError("Cannot remove the last administrator")
            user = replace(
                user,
                role=new_role,
                permissions_override=None if override.is_empty else override,
                updated_at=datetime.now(UTC),
            )
            await uow.users.update(user)

        logger.info("User %s assigned role %s to user %s", claim.user_id, new_role, user.id)
        return UserPermissionsOutput(
            user=user,
            effective_permissions=effective_permissions(user.role, user.permissions_override),
        )
