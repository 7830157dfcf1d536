"""Unit tests for capability records."""

import pytest

from resmgmt.domain.exceptions import ValidationError
from resmgmt.domain.value_objects import Capability, CapabilitySet, PermissionOverride


def test_capability_wire_keys() -> None:
    assert Capability.CREATE_TEMPLATES.value == "can_create_templates"
    assert Capability.CREATE_TEMPLATES.field_name == "create_templates"


def test_capability_set_from_mapping_missing_keys_false() -> None:
    caps = CapabilitySet.from_mapping({"can_view_reports": True})
    assert caps.view_reports is True
    assert caps.manage_users is False


def test_capability_set_rejects_non_bool() -> None:
    with pytest.raises(ValidationError, match="can_view_reports"):
        CapabilitySet.from_mapping({"can_view_reports": "yes"})


def test_capability_set_to_mapping_has_every_key() -> None:
    caps = CapabilitySet.from_mapping({})
    assert set(caps.to_mapping()) == {c.value for c in Capability}


def test_override_from_mapping_keeps_absent_apart_from_false() -> None:
    override = PermissionOverride.from_mapping({"can_edit_templates": False})
    assert override.edit_templates is False
    assert override.create_templates is None
    assert not override.is_empty
    assert override.to_mapping() == {"can_edit_templates": False}


@pytest.mark.parametrize("mapping", [None, {}])
def test_override_from_empty_mapping_is_empty(mapping) -> None:
    assert PermissionOverride.from_mapping(mapping).is_empty


def test_override_rejects_unknown_key() -> None:
    with pytest.raises(ValidationError, match="Unknown capability"):
        PermissionOverride.from_mapping({"can_fly": True})


def test_override_rejects_non_bool_value() -> None:
    with pytest.raises(ValidationError):
        PermissionOverride.from_mapping({"can_manage_users": 1})


def test_override_as_capability_set_absent_is_false() -> None:
    caps = PermissionOverride(manage_users=True).as_capability_set()
    assert caps.manage_users is True
    assert caps.create_inspections is False
