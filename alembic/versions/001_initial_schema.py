"""Initial schema - organization, app_user, template.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "organization",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "app_user",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "organization_id",
            sa.UUID(),
            sa.ForeignKey("organization.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False, server_default=""),
        sa.Column("role", sa.String(20), nullable=False, server_default="inspector"),
        sa.Column("permissions_override", postgresql.JSONB(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "role IN ('viewer', 'inspector', 'supervisor', 'admin')", name="ck_app_user_role"
        ),
    )
    op.execute("CREATE UNIQUE INDEX ix_app_user_email ON app_user (lower(email))")
    op.create_index("ix_app_user_organization", "app_user", ["organization_id"])

    op.create_table(
        "template",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "organization_id",
            sa.UUID(),
            sa.ForeignKey("organization.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("lineage_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("category", sa.String(100), nullable=False, server_default=""),
        sa.Column("fields_schema", postgresql.JSONB(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("parent_template_id", sa.UUID(), sa.ForeignKey("template.id"), nullable=True),
        sa.Column("is_latest_version", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("version_notes", sa.Text(), nullable=False, server_default=""),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_shared", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_by", sa.UUID(), sa.ForeignKey("app_user.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("state", sa.String(20), nullable=False, server_default="active"),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("version >= 1", name="ck_template_version_positive"),
        sa.CheckConstraint("state IN ('active', 'deleted')", name="ck_template_state"),
    )
    op.create_index(
        "ix_template_lineage_version", "template", ["lineage_id", "version"], unique=True
    )
    op.create_index(
        "ix_template_lineage_latest",
        "template",
        ["lineage_id"],
        unique=True,
        postgresql_where=sa.text("is_latest_version AND state = 'active'"),
    )
    op.create_index(
        "ix_template_organization_category",
        "template",
        ["organization_id", "category"],
        postgresql_where=sa.text("is_latest_version AND state = 'active'"),
    )


def downgrade() -> None:
    op.drop_table("template")
    op.drop_table("app_user")
    op.drop_table("organization")
