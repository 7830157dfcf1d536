"""Unit tests for effective permission resolution."""

import pytest

from resmgmt.domain.services.permission_resolver import (
    ROLE_DEFAULTS,
    defaults_for,
    effective_permissions,
    is_authorized,
)
from resmgmt.domain.value_objects import Capability, PermissionOverride, Role


def test_every_role_has_complete_table() -> None:
    """Each role default covers all 13 capabilities."""
    assert set(ROLE_DEFAULTS) == set(Role)
    for table in ROLE_DEFAULTS.values():
        assert len(table.to_mapping()) == len(Capability) == 13


def test_admin_defaults_allow_everything() -> None:
    table = defaults_for(Role.ADMIN)
    assert all(table.allows(c) for c in Capability)


def test_supervisor_defaults() -> None:
    table = defaults_for("supervisor")
    assert table.create_templates and table.edit_templates
    assert not table.delete_templates
    assert not table.manage_users
    assert table.export_reports


def test_inspector_defaults() -> None:
    table = defaults_for("inspector")
    assert table.create_inspections and table.upload_files
    assert not table.create_templates
    assert not table.view_all_inspections


def test_viewer_defaults_only_view_own() -> None:
    table = defaults_for("viewer")
    allowed = [c for c in Capability if table.allows(c)]
    assert allowed == [Capability.VIEW_OWN_INSPECTIONS]


@pytest.mark.parametrize("role", ["", "unknown", "ADMIN"])
def test_unknown_role_falls_back_to_inspector(role: str) -> None:
    assert defaults_for(role) == defaults_for(Role.INSPECTOR)


def test_no_override_uses_role_defaults() -> None:
    assert effective_permissions(Role.SUPERVISOR, None) == defaults_for(Role.SUPERVISOR)


def test_empty_override_uses_role_defaults() -> None:
    """An override with no fields present does not replace the defaults."""
    assert effective_permissions(Role.ADMIN, PermissionOverride()) == defaults_for(Role.ADMIN)


def test_override_replaces_defaults_wholesale() -> None:
    """Override with only manage_users leaves an admin without edit_templates."""
    override = PermissionOverride(manage_users=True)
    effective = effective_permissions(Role.ADMIN, override)

    assert effective.manage_users is True
    assert effective.edit_templates is False
    assert [c for c in Capability if effective.allows(c)] == [Capability.MANAGE_USERS]


def test_override_explicit_false_denies() -> None:
    override = PermissionOverride(create_templates=False, view_reports=True)
    effective = effective_permissions(Role.SUPERVISOR, override)
    assert not is_authorized(effective, Capability.CREATE_TEMPLATES)
    assert is_authorized(effective, Capability.VIEW_REPORTS)


def test_effective_permissions_is_pure() -> None:
    """Same inputs give equal results and leave inputs unchanged."""
    override = PermissionOverride(edit_templates=True)
    first = effective_permissions(Role.VIEWER, override)
    second = effective_permissions(Role.VIEWER, override)
    assert first == second
    assert override.to_mapping() == {"can_edit_templates": True}


def test_admin_without_capability_is_denied() -> None:
    """No admin bypass in the capability check."""
    effective = effective_permissions(Role.ADMIN, PermissionOverride(view_reports=True))
    assert not is_authorized(effective, Capability.DELETE_TEMPLATES)
