"""PostgreSQL Unit of Work implementation."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from resmgmt.domain.exceptions import InternalError
from resmgmt.infrastructure.persistence.postgres.organization_repository import (
    PostgresOrganizationRepository,
)
from resmgmt.infrastructure.persistence.postgres.template_repository import (
    PostgresTemplateRepository,
)
from resmgmt.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)

logger = logging.getLogger(__name__)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._templates = PostgresTemplateRepository(self._conn)
        self._users = PostgresUserRepository(self._conn)
        self._organizations = PostgresOrganizationRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def templates(self) -> PostgresTemplateRepository:
        return self._templates

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    @property
    def organizations(self) -> PostgresOrganizationRepository:
        return self._organizations

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Commits on success, rolls back on any exception. Driver errors leave as
    InternalError.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            async with PostgresUnitOfWork(pool) as uow:
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except psycopg.Error as e:
            logger.exception("Database error in unit of work: %s", type(e).__name__)
            raise InternalError("Storage operation failed") from e

    return factory
