"""create microposts

Revision ID: 3d9b7f5a1c8e
Revises: 8c4f2a6e0b1d
Create Date: 2026-10-03 14:27:08.530917

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3d9b7f5a1c8e"
down_revision: str | None = "8c4f2a6e0b1d"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "microposts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("content", sa.String(length=140), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_microposts_id"), "microposts", ["id"], unique=False)
    op.create_index(op.f("ix_microposts_user_id"), "microposts", ["user_id"], unique=False)
    op.create_index(
        "ix_microposts_user_id_created_at", "microposts", ["user_id", "created_at"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_microposts_user_id_created_at", table_name="microposts")
    op.drop_index(op.f("ix_microposts_user_id"), table_name="microposts")
    op.drop_index(op.f("ix_microposts_id"), table_name="microposts")
    op.drop_table("microposts")
