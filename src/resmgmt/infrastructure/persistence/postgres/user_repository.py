"""PostgreSQL user repository implementation."""

import logging
from uuid import UUID

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from resmgmt.domain.entities import User
from resmgmt.domain.exceptions import InternalError, ValidationError
from resmgmt.domain.services import role_authority
from resmgmt.domain.value_objects import PermissionOverride, Role

_COLUMNS = "id, organization_id, email, name, role, permissions_override, created_at, updated_at"

logger = logging.getLogger(__name__)


def _row_to_user(r: tuple) -> User:
    """Stored rows that no longer parse are a storage fault, not bad input."""
    try:
        role = role_authority.normalize(r[4])
        override = PermissionOverride.from_mapping(r[5])
    except ValidationError as e:
        logger.error("Invalid stored user row %s: %s", r[0], e)
        raise InternalError("Stored user record is invalid") from e
    return User(
        id=r[0],
        organization_id=r[1],
        email=r[2],
        name=r[3] or "",
        role=role,
        permissions_override=None if override.is_empty else override,
        created_at=r[6],
        updated_at=r[7],
    )


def _override_param(user: User) -> Jsonb | None:
    if user.permissions_override is None or user.permissions_override.is_empty:
        return None
    return Jsonb(user.permissions_override.to_mapping())


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: UUID, organization_id: UUID) -> User | None:
        """Get user by id within an organization."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = %s AND organization_id = %s",
            (user_id, organization_id),
        )
        r = await cur.fetchone()
        return _row_to_user(r) if r else None

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email (case-insensitive)."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE lower(email) = lower(%s)",
            (email,),
        )
        r = await cur.fetchone()
        return _row_to_user(r) if r else None

    async def create(self, user: User) -> User:
        await self._conn.execute(
            f"INSERT INTO app_user ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                user.id,
                user.organization_id,
                user.email,
                user.name,
                user.role.value,
                _override_param(user),
                user.created_at,
                user.updated_at,
            ),
        )
        return user

    async def update(self, user: User) -> None:
        """Update role, override and name."""
        await self._conn.execute(
            "UPDATE app_user SET name = %s, role = %s, permissions_override = %s, updated_at = %s "
            "WHERE id = %s AND organization_id = %s",
            (
                user.name,
                user.role.value,
                _override_param(user),
                user.updated_at,
                user.id,
                user.organization_id,
            ),
        )

    async def count_admins(self, organization_id: UUID) -> int:
        """Number of administrators in an organization."""
        cur = await self._conn.execute(
            "SELECT count(*) FROM app_user WHERE organization_id = %s AND role = %s",
            (organization_id, Role.ADMIN.value),
        )
        r = await cur.fetchone()
        return r[0]
