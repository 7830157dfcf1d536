"""Unit tests for role validation and hierarchy."""

import pytest

from resmgmt.domain.exceptions import InvalidRole
from resmgmt.domain.services import role_authority
from resmgmt.domain.value_objects import Role


@pytest.mark.parametrize("value", ["admin", "supervisor", "inspector", "viewer"])
def test_validate_accepts_known_roles(value: str) -> None:
    assert role_authority.validate(value) == Role(value)


@pytest.mark.parametrize("value", ["", None])
def test_validate_rejects_empty(value) -> None:
    """Empty role is rejected with its own message."""
    with pytest.raises(InvalidRole, match="cannot be empty"):
        role_authority.validate(value)


@pytest.mark.parametrize("value", ["superadmin", "Admin", "owner"])
def test_validate_rejects_unknown(value: str) -> None:
    with pytest.raises(InvalidRole, match="must be one of"):
        role_authority.validate(value)


def test_normalize_defaults_to_inspector() -> None:
    """Empty input normalizes to inspector."""
    assert role_authority.normalize("") == Role.INSPECTOR
    assert role_authority.normalize(None) == Role.INSPECTOR


def test_normalize_rejects_unknown() -> None:
    with pytest.raises(InvalidRole):
        role_authority.normalize("root")


def test_hierarchy_ranks() -> None:
    """viewer < inspector < supervisor < admin."""
    ranks = [role_authority.hierarchy_rank(r) for r in ("viewer", "inspector", "supervisor", "admin")]
    assert ranks == [0, 1, 2, 3]


@pytest.mark.parametrize(
    ("role", "other", "expected"),
    [
        ("admin", "admin", True),
        ("admin", "viewer", True),
        ("supervisor", "inspector", True),
        ("inspector", "supervisor", False),
        ("viewer", "inspector", False),
        ("bogus", "viewer", False),
        ("admin", "bogus", False),
        ("", "viewer", False),
    ],
)
def test_has_at_least_privilege(role: str, other: str, expected: bool) -> None:
    """Invalid input on either side yields False."""
    assert role_authority.has_at_least_privilege(role, other) is expected
