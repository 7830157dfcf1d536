"""Pytest fixtures for resmgmt tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from resmgmt.domain.entities import Organization, Template, User
from resmgmt.domain.exceptions import ConflictError
from resmgmt.domain.services.permission_resolver import defaults_for
from resmgmt.domain.value_objects import (
    CapabilitySet,
    IdentityClaim,
    LifecycleState,
    Role,
)

TEST_JWT_SECRET = "k3y-for-tests-only-0123456789abcdefghij"


# --- Fake repositories ---


class FakeTemplateRepository:
    """In-memory template repository with an atomic latest swap.

    With ``yield_on_read`` set, ``get_latest`` gives up control to the event
    loop before returning, so concurrent publishers can both observe the
    same latest row.
    """

    def __init__(self) -> None:
        self._by_id: dict[UUID, Template] = {}
        self.yield_on_read = False

    def add(self, template: Template) -> Template:
        self._by_id[template.id] = template
        return template

    def rows(self, lineage_id: UUID, include_deleted: bool = False) -> list[Template]:
        return sorted(
            (
                t
                for t in self._by_id.values()
                if t.lineage_id == lineage_id and (include_deleted or not t.is_deleted)
            ),
            key=lambda t: t.version,
        )

    async def get_by_id(
        self,
        template_id: UUID,
        *,
        organization_id: UUID | None = None,
        include_deleted: bool = False,
    ) -> Template | None:
        t = self._by_id.get(template_id)
        if not t or (not include_deleted and t.is_deleted):
            return None
        if organization_id is not None and t.organization_id != organization_id:
            return None
        return t

    async def get_latest(self, lineage_id: UUID, organization_id: UUID) -> Template | None:
        latest = next(
            (
                t
                for t in self.rows(lineage_id)
                if t.is_latest_version and t.organization_id == organization_id
            ),
            None,
        )
        if self.yield_on_read:
            await asyncio.sleep(0)
        return latest

    async def get_by_version(
        self, lineage_id: UUID, version: int, organization_id: UUID
    ) -> Template | None:
        for t in self.rows(lineage_id):
            if t.version == version and t.organization_id == organization_id:
                return t
        return None

    async def list_lineage(self, lineage_id: UUID, organization_id: UUID) -> list[Template]:
        rows = [t for t in self.rows(lineage_id) if t.organization_id == organization_id]
        return list(reversed(rows))

    async def list_categories(self, organization_id: UUID) -> list[str]:
        return sorted(
            {
                t.category
                for t in self._by_id.values()
                if t.organization_id == organization_id
                and t.is_latest_version
                and t.is_active
                and not t.is_deleted
                and t.category
            }
        )

    async def create(self, template: Template) -> Template:
        if template.id in self._by_id:
            raise ConflictError(f"Template {template.id} already exists")
        return self.add(template)

    async def swap_latest(self, current: Template, successor: Template) -> Template:
        stored = self._by_id.get(current.id)
        if (
            stored is None
            or stored.is_deleted
            or not stored.is_latest_version
            or stored.version != current.version
        ):
            raise ConflictError(f"Lineage {current.lineage_id} advanced")
        if any(t.version == successor.version for t in self.rows(current.lineage_id, True)):
            raise ConflictError(f"Lineage {current.lineage_id} already has that version")
        self._by_id[stored.id] = replace(stored, is_latest_version=False)
        return self.add(successor)

    async def soft_delete(self, template_id: UUID, organization_id: UUID, now: datetime) -> None:
        t = self._by_id.get(template_id)
        if t and t.organization_id == organization_id and not t.is_deleted:
            self._by_id[template_id] = replace(
                t, state=LifecycleState.DELETED, deleted_at=now, updated_at=now
            )

    async def soft_delete_lineage(
        self, lineage_id: UUID, organization_id: UUID, now: datetime
    ) -> int:
        count = 0
        for t in self.rows(lineage_id):
            if t.organization_id == organization_id:
                await self.soft_delete(t.id, organization_id, now)
                count += 1
        return count


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, User] = {}

    def add(self, user: User) -> User:
        self._by_id[user.id] = user
        return user

    async def get_by_id(self, user_id: UUID, organization_id: UUID) -> User | None:
        user = self._by_id.get(user_id)
        if not user or user.organization_id != organization_id:
            return None
        return user

    async def get_by_email(self, email: str) -> User | None:
        return next(
            (u for u in self._by_id.values() if u.email.lower() == email.lower()),
            None,
        )

    async def create(self, user: User) -> User:
        return self.add(user)

    async def update(self, user: User) -> None:
        self._by_id[user.id] = user

    async def count_admins(self, organization_id: UUID) -> int:
        return sum(
            1
            for u in self._by_id.values()
            if u.organization_id == organization_id and u.role == Role.ADMIN
        )


class FakeOrganizationRepository:
    """In-memory organization repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Organization] = {}

    def add(self, organization: Organization) -> Organization:
        self._by_id[organization.id] = organization
        return organization

    async def get_by_id(self, organization_id: UUID) -> Organization | None:
        return self._by_id.get(organization_id)


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.templates = FakeTemplateRepository()
        self.users = FakeUserRepository()
        self.organizations = FakeOrganizationRepository()
        self.commits = 0
        self.rollbacks = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


def shared_uow_factory(uow: FakeUnitOfWork) -> Callable:
    """Factory yielding the same FakeUnitOfWork on every call, committing like the real one."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        try:
            yield uow
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise

    return _factory


def make_claim(
    organization_id: UUID,
    role: Role = Role.ADMIN,
    permissions: CapabilitySet | None = None,
    user_id: UUID | None = None,
) -> IdentityClaim:
    """Claim as the token verifier would produce it."""
    return IdentityClaim(
        user_id=user_id or uuid4(),
        organization_id=organization_id,
        email="user@example.com",
        role=role,
        permissions=permissions or defaults_for(role),
        expires_at=datetime.now(UTC) + timedelta(hours=1),
    )


def inspection_schema(*field_names: str) -> dict:
    """Minimal valid template schema with one section."""
    names = field_names or ("notes",)
    return {
        "sections": [
            {
                "name": "General",
                "fields": [{"name": n, "type": "text"} for n in names],
            }
        ]
    }


# --- Fixtures ---


@pytest.fixture
def org_id() -> UUID:
    return uuid4()


@pytest.fixture
def other_org_id() -> UUID:
    return uuid4()


@pytest.fixture
def fake_uow(org_id: UUID, other_org_id: UUID) -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork with two organizations."""
    uow = FakeUnitOfWork()
    now = datetime.now(UTC)
    uow.organizations.add(Organization(id=org_id, name="Acme", created_at=now))
    uow.organizations.add(Organization(id=other_org_id, name="Globex", created_at=now))
    return uow


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager over the test's FakeUnitOfWork."""
    return shared_uow_factory(fake_uow)


@pytest.fixture
def admin_claim(org_id: UUID) -> IdentityClaim:
    return make_claim(org_id, Role.ADMIN)


@pytest.fixture
def mock_permission_checker():
    """Mock for PermissionChecker - allows everything by default."""
    from unittest.mock import Mock

    mock = Mock()
    mock.check.return_value = True
    return mock
