"""Role validation, normalization and privilege ordering."""

from resmgmt.domain.exceptions import InvalidRole
from resmgmt.domain.value_objects import Role

DEFAULT_ROLE = Role.INSPECTOR

ROLE_HIERARCHY: dict[Role, int] = {
    Role.VIEWER: 0,
    Role.INSPECTOR: 1,
    Role.SUPERVISOR: 2,
    Role.ADMIN: 3,
}


def validate(role: str | Role | None) -> Role:
    """Return the Role for a non-empty known identifier, else raise InvalidRole."""
    if not role:
        raise InvalidRole("Role cannot be empty")
    try:
        return Role(role)
    except ValueError:
        raise InvalidRole(
            "Invalid role: must be one of admin, supervisor, inspector, or viewer"
        ) from None


def normalize(role: str | Role | None) -> Role:
    """Empty input defaults to inspector; anything else must validate."""
    if not role:
        return DEFAULT_ROLE
    return validate(role)


def hierarchy_rank(role: str | Role) -> int:
    """Privilege rank: viewer=0 ... admin=3."""
    return ROLE_HIERARCHY[validate(role)]


def has_at_least_privilege(role: str | Role | None, other: str | Role | None) -> bool:
    """True iff both roles are valid and ``role`` ranks at or above ``other``.

    Invalid input on either side yields False.
    """
    try:
        return hierarchy_rank(role) >= hierarchy_rank(other)
    except InvalidRole:
        return False
