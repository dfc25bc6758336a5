"""Create pages and plugin_definitions tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "pages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("version", sa.String(length=32), nullable=False),
        sa.Column("meta", sa.JSON(), nullable=False),
        sa.Column("root", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="unique_page_slug"),
    )
    op.create_index("ix_pages_id", "pages", ["id"], unique=False)
    op.create_index("ix_pages_slug", "pages", ["slug"], unique=False)

    op.create_table(
        "plugin_definitions",
        sa.Column("id", sa.String(length=100), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default="1"),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_plugin_definitions_active", "plugin_definitions", ["active"], unique=False)


def downgrade() -> None:
    op.drop_index("idx_plugin_definitions_active", table_name="plugin_definitions")
    op.drop_table("plugin_definitions")
    op.drop_index("ix_pages_slug", table_name="pages")
    op.drop_index("ix_pages_id", table_name="pages")
    op.drop_table("pages")
