"""Capability records: the resolved set and the stored per-user override."""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from resmgmt.domain.exceptions import ValidationError
from resmgmt.domain.value_objects.capability import Capability


@dataclass(frozen=True)
class CapabilitySet:
    """Complete capability record - every capability is explicitly true or false."""

    create_inspections: bool
    view_own_inspections: bool
    view_all_inspections: bool
    edit_inspections: bool
    delete_inspections: bool
    create_templates: bool
    edit_templates: bool
    delete_templates: bool
    manage_users: bool
    view_reports: bool
    export_reports: bool
    upload_files: bool
    manage_notifications: bool

    def allows(self, capability: Capability) -> bool:
        return getattr(self, capability.field_name) is True

    def to_mapping(self) -> dict[str, bool]:
        """Serialize with wire keys (can_*)."""
        return {c.value: getattr(self, c.field_name) for c in Capability}

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "CapabilitySet":
        """Build from wire keys. Missing keys are false; non-boolean values are rejected."""
        values: dict[str, bool] = {}
        for c in Capability:
            value = mapping.get(c.value, False)
            if not isinstance(value, bool):
                raise ValidationError(f"Capability {c.value} must be a boolean")
            values[c.field_name] = value
        return cls(**values)


@dataclass(frozen=True)
class PermissionOverride:
    """Stored per-user override. None means the capability is absent from the override.

    Absent and false are kept apart here so the stored record round-trips
    exactly; resolution still treats absent as false.
    """

    create_inspections: bool | None = None
    view_own_inspections: bool | None = None
    view_all_inspections: bool | None = None
    edit_inspections: bool | None = None
    delete_inspections: bool | None = None
    create_templates: bool | None = None
    edit_templates: bool | None = None
    delete_templates: bool | None = None
    manage_users: bool | None = None
    view_reports: bool | None = None
    export_reports: bool | None = None
    upload_files: bool | None = None
    manage_notifications: bool | None = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_mapping(self) -> dict[str, bool]:
        """Serialize only the capabilities present in the override."""
        return {
            c.value: getattr(self, c.field_name)
            for c in Capability
            if getattr(self, c.field_name) is not None
        }

    def as_capability_set(self) -> CapabilitySet:
        return CapabilitySet(
            **{c.field_name: getattr(self, c.field_name) is True for c in Capability}
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> "PermissionOverride":
        """Parse a stored override. Unknown keys and non-boolean values are rejected."""
        if not mapping:
            return cls()
        known = {c.value: c for c in Capability}
        values: dict[str, bool] = {}
        for key, value in mapping.items():
            capability = known.get(key)
            if capability is None:
                raise ValidationError(f"Unknown capability: {key}")
            if not isinstance(value, bool):
                raise ValidationError(f"Capability {key} must be a boolean")
            values[capability.field_name] = value
        return cls(**values)
