"""Entity lifecycle state."""

from enum import StrEnum


class LifecycleState(StrEnum):
    """Soft-delete state; deletion time is kept separately as metadata."""

    ACTIVE = "active"
    DELETED = "deleted"
