"""create Games table

Revision ID: 0001
Revises:
Create Date: 2026-10-19 10:00:00.000000
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Games",
        sa.Column("Id", sa.String(length=64), nullable=False),
        sa.Column("Board", sa.String(length=9), nullable=False, comment="9 cells, row-major, space for empty"),
        sa.Column("CurrentPlayer", sa.String(length=1), nullable=False),
        sa.Column("Status", sa.String(length=16), nullable=False, comment="Active | Won | Draw"),
        sa.Column("ETag", sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint("Id"),
    )
    op.create_index(op.f("ix_Games_Status"), "Games", ["Status"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_Games_Status"), table_name="Games")
    op.drop_table("Games")
