"""Roles, ordered by privilege."""

from enum import StrEnum


class Role(StrEnum):
    """User role within an organization."""

    VIEWER = "viewer"
    INSPECTOR = "inspector"
    SUPERVISOR = "supervisor"
    ADMIN = "admin"
