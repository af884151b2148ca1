"""add password_hash and admin to users

Revision ID: 8c4f2a6e0b1d
Revises: 5e7a9c1b3d2f
Create Date: 2026-09-30 09:15:52.066113

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "8c4f2a6e0b1d"
down_revision: str | None = "5e7a9c1b3d2f"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # Batch mode so the same revision runs on SQLite
    with op.batch_alter_table("users") as batch_op:
        batch_op.add_column(
            sa.Column("password_hash", sa.String(length=255), server_default="", nullable=False)
        )
        batch_op.add_column(
            sa.Column("admin", sa.Boolean(), server_default=sa.false(), nullable=False)
        )

    # Rows that predate passwords keep an empty hash, which never verifies
    with op.batch_alter_table("users") as batch_op:
        batch_op.alter_column("password_hash", server_default=None)


def downgrade() -> None:
    with op.batch_alter_table("users") as batch_op:
        batch_op.drop_column("admin")
        batch_op.drop_column("password_hash")
