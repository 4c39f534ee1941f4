"""Create categories table

Revision ID: 4c1f0e7a9b21
Revises:
Create Date: 2025-11-21 06:47:36.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4c1f0e7a9b21"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# Starter categories every fresh install gets
DEFAULT_CATEGORIES = [
    {"name": "Work", "color": "#3B82F6"},
    {"name": "Personal", "color": "#10B981"},
    {"name": "Shopping", "color": "#F59E0B"},
    {"name": "Health", "color": "#EF4444"},
]


def upgrade() -> None:
    categories = op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("color", sa.String(7), nullable=False, server_default="#3B82F6"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )

    op.bulk_insert(categories, DEFAULT_CATEGORIES)


def downgrade() -> None:
    op.drop_table("categories")
