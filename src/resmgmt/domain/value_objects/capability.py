"""Named capabilities controlling access to actions."""

from enum import StrEnum


class Capability(StrEnum):
    """Capability flags. Values are the keys used in tokens and stored overrides."""

    CREATE_INSPECTIONS = "can_create_inspections"
    VIEW_OWN_INSPECTIONS = "can_view_own_inspections"
    VIEW_ALL_INSPECTIONS = "can_view_all_inspections"
    EDIT_INSPECTIONS = "can_edit_inspections"
    DELETE_INSPECTIONS = "can_delete_inspections"
    CREATE_TEMPLATES = "can_create_templates"
    EDIT_TEMPLATES = "can_edit_templates"
    DELETE_TEMPLATES = "can_delete_templates"
    MANAGE_USERS = "can_manage_users"
    VIEW_REPORTS = "can_view_reports"
    EXPORT_REPORTS = "can_export_reports"
    UPLOAD_FILES = "can_upload_files"
    MANAGE_NOTIFICATIONS = "can_manage_notifications"

    @property
    def field_name(self) -> str:
        """Attribute name on CapabilitySet / PermissionOverride."""
        return self.name.lower()
