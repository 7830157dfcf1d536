"""PostgreSQL template repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation
from psycopg.types.json import Jsonb

from resmgmt.domain.entities import Template
from resmgmt.domain.exceptions import ConflictError
from resmgmt.domain.value_objects import LifecycleState

_COLUMNS = (
    "id, organization_id, lineage_id, name, description, category, fields_schema, "
    "version, parent_template_id, is_latest_version, version_notes, is_active, "
    "is_shared, created_by, created_at, updated_at, state, deleted_at"
)


def _row_to_template(r: tuple) -> Template:
    return Template(
        id=r[0],
        organization_id=r[1],
        lineage_id=r[2],
        name=r[3],
        description=r[4] or "",
        category=r[5] or "",
        fields_schema=r[6],
        version=r[7],
        parent_template_id=r[8],
        is_latest_version=r[9],
        version_notes=r[10] or "",
        is_active=r[11],
        is_shared=r[12],
        created_by=r[13],
        created_at=r[14],
        updated_at=r[15],
        state=LifecycleState(r[16]),
        deleted_at=r[17],
    )


class PostgresTemplateRepository:
    """Template repository implementation.

    Latest-pointer integrity is backed by a partial unique index on
    ``lineage_id`` over active latest rows and a unique index on
    ``(lineage_id, version)``.
    """

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(
        self,
        template_id: UUID,
        *,
        organization_id: UUID | None = None,
        include_deleted: bool = False,
    ) -> Template | None:
        """Get template row by id, optionally confined to an organization."""
        query = f"SELECT {_COLUMNS} FROM template WHERE id = %s"
        params: list = [template_id]
        if organization_id is not None:
            query += " AND organization_id = %s"
            params.append(organization_id)
        if not include_deleted:
            query += " AND state = 'active'"
        cur = await self._conn.execute(query, params)
        r = await cur.fetchone()
        return _row_to_template(r) if r else None

    async def get_latest(self, lineage_id: UUID, organization_id: UUID) -> Template | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM template "
            "WHERE lineage_id = %s AND organization_id = %s "
            "AND is_latest_version AND state = 'active'",
            (lineage_id, organization_id),
        )
        r = await cur.fetchone()
        return _row_to_template(r) if r else None

    async def get_by_version(
        self, lineage_id: UUID, version: int, organization_id: UUID
    ) -> Template | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM template "
            "WHERE lineage_id = %s AND version = %s AND organization_id = %s "
            "AND state = 'active'",
            (lineage_id, version, organization_id),
        )
        r = await cur.fetchone()
        return _row_to_template(r) if r else None

    async def list_lineage(self, lineage_id: UUID, organization_id: UUID) -> list[Template]:
        """List active rows of a lineage, newest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM template "
            "WHERE lineage_id = %s AND organization_id = %s AND state = 'active' "
            "ORDER BY version DESC",
            (lineage_id, organization_id),
        )
        rows = await cur.fetchall()
        return [_row_to_template(r) for r in rows]

    async def list_categories(self, organization_id: UUID) -> list[str]:
        cur = await self._conn.execute(
            "SELECT DISTINCT category FROM template "
            "WHERE organization_id = %s AND is_latest_version AND is_active "
            "AND state = 'active' AND category IS NOT NULL AND category <> '' "
            "ORDER BY category",
            (organization_id,),
        )
        rows = await cur.fetchall()
        return [r[0] for r in rows]

    async def create(self, template: Template) -> Template:
        """Insert a template row."""
        try:
            await self._insert(template)
        except UniqueViolation as e:
            raise ConflictError(f"Template {template.id} conflicts with an existing row") from e
        return template

    async def swap_latest(self, current: Template, successor: Template) -> Template:
        """Clear ``current``'s latest flag if still latest at its version, then insert ``successor``."""
        cur = await self._conn.execute(
            "UPDATE template SET is_latest_version = false, updated_at = %s "
            "WHERE id = %s AND version = %s AND is_latest_version AND state = 'active'",
            (successor.created_at, current.id, current.version),
        )
        if cur.rowcount != 1:
            raise ConflictError(
                f"Template lineage {current.lineage_id} advanced past version {current.version}"
            )
        try:
            await self._insert(successor)
        except UniqueViolation as e:
            raise ConflictError(
                f"Template lineage {current.lineage_id} already has version {successor.version}"
            ) from e
        return successor

    async def soft_delete(self, template_id: UUID, organization_id: UUID, now: datetime) -> None:
        await self._conn.execute(
            "UPDATE template SET state = 'deleted', deleted_at = %s, updated_at = %s "
            "WHERE id = %s AND organization_id = %s AND state = 'active'",
            (now, now, template_id, organization_id),
        )

    async def soft_delete_lineage(
        self, lineage_id: UUID, organization_id: UUID, now: datetime
    ) -> int:
        cur = await self._conn.execute(
            "UPDATE template SET state = 'deleted', deleted_at = %s, updated_at = %s "
            "WHERE lineage_id = %s AND organization_id = %s AND state = 'active'",
            (now, now, lineage_id, organization_id),
        )
        return cur.rowcount

    async def _insert(self, t: Template) -> None:
        await self._conn.execute(
            f"INSERT INTO template ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                t.id,
                t.organization_id,
                t.lineage_id,
                t.name,
                t.description,
                t.category,
                Jsonb(t.fields_schema),
                t.version,
                t.parent_template_id,
                t.is_latest_version,
                t.version_notes,
                t.is_active,
                t.is_shared,
                t.created_by,
                t.created_at,
                t.updated_at,
                t.state.value,
                t.deleted_at,
            ),
        )
