"""Create todos table

Revision ID: 9d83b5c2e610
Revises: 4c1f0e7a9b21
Create Date: 2025-11-21 06:47:52.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "9d83b5c2e610"
down_revision: str | None = "4c1f0e7a9b21"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

priority_enum = sa.Enum("low", "medium", "high", name="priority")


def upgrade() -> None:
    op.create_table(
        "todos",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("title", sa.String(255), nullable=False, index=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "completed", sa.Boolean(), nullable=False, server_default=sa.false(), index=True
        ),
        sa.Column(
            "category_id",
            sa.Integer(),
            sa.ForeignKey("categories.id", onupdate="CASCADE", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        sa.Column("priority", priority_enum, nullable=False, server_default="medium", index=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
            onupdate=sa.func.now(),
        ),
    )
    op.create_index("ix_todos_created_at", "todos", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_todos_created_at", table_name="todos")
    op.drop_table("todos")
    priority_enum.drop(op.get_bind(), checkfirst=True)
