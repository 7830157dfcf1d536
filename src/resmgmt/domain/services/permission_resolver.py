"""Role default capabilities and effective permission resolution."""

from resmgmt.domain.value_objects import (
    Capability,
    CapabilitySet,
    PermissionOverride,
    Role,
)

ROLE_DEFAULTS: dict[Role, CapabilitySet] = {
    Role.ADMIN: CapabilitySet(
        create_inspections=True,
        view_own_inspections=True,
        view_all_inspections=True,
        edit_inspections=True,
        delete_inspections=True,
        create_templates=True,
        edit_templates=True,
        delete_templates=True,
        manage_users=True,
        view_reports=True,
        export_reports=True,
        upload_files=True,
        manage_notifications=True,
    ),
    Role.SUPERVISOR: CapabilitySet(
        create_inspections=True,
        view_own_inspections=True,
        view_all_inspections=True,
        edit_inspections=True,
        delete_inspections=False,
        create_templates=True,
        edit_templates=True,
        delete_templates=False,
        manage_users=False,
        view_reports=True,
        export_reports=True,
        upload_files=True,
        manage_notifications=False,
    ),
    Role.INSPECTOR: CapabilitySet(
        create_inspections=True,
        view_own_inspections=True,
        view_all_inspections=False,
        edit_inspections=True,
        delete_inspections=False,
        create_templates=False,
        edit_templates=False,
        delete_templates=False,
        manage_users=False,
        view_reports=False,
        export_reports=False,
        upload_files=True,
        manage_notifications=False,
    ),
    Role.VIEWER: CapabilitySet(
        create_inspections=False,
        view_own_inspections=True,
        view_all_inspections=False,
        edit_inspections=False,
        delete_inspections=False,
        create_templates=False,
        edit_templates=False,
        delete_templates=False,
        manage_users=False,
        view_reports=False,
        export_reports=False,
        upload_files=False,
        manage_notifications=False,
    ),
}


def defaults_for(role: str | Role | None) -> CapabilitySet:
    """Default capabilities for ``role``; unknown roles get the inspector table."""
    try:
        return ROLE_DEFAULTS[Role(role)]
    except ValueError:
        return ROLE_DEFAULTS[Role.INSPECTOR]


def effective_permissions(
    role: str | Role | None, stored_override: PermissionOverride | None
) -> CapabilitySet:
    """Resolve the capabilities a user actually has.

    A non-empty override replaces the role defaults entirely: capabilities it
    does not mention resolve to False rather than to the role default.
    """
    if stored_override is not None and not stored_override.is_empty:
        return stored_override.as_capability_set()
    return defaults_for(role)


def is_authorized(permissions: CapabilitySet, capability: Capability) -> bool:
    """True iff ``capability`` is explicitly granted."""
    return permissions.allows(capability)
