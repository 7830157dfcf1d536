"""PostgreSQL organization repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from resmgmt.domain.entities import Organization


class PostgresOrganizationRepository:
    """Organization repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, organization_id: UUID) -> Organization | None:
        cur = await self._conn.execute(
            "SELECT id, name, created_at FROM organization WHERE id = %s",
            (organization_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Organization(id=r[0], name=r[1], created_at=r[2])
