"""Location table — one row per chat user.

Revision ID: 001
Revises: None
Create Date: 2026-10-18
"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # The unique user_id is what PostgREST's on_conflict upsert targets.
    op.create_table(
        "location",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Text, nullable=False, unique=True),
        sa.Column("location", JSONB, nullable=False),
        sa.Column("user_name", sa.Text, nullable=False),
    )


def downgrade() -> None:
    op.drop_table("location")
