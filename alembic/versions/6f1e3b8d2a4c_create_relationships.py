"""create relationships

Revision ID: 6f1e3b8d2a4c
Revises: 3d9b7f5a1c8e
Create Date: 2026-10-07 20:51:44.187392

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "6f1e3b8d2a4c"
down_revision: str | None = "3d9b7f5a1c8e"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "relationships",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("follower_id", sa.Integer(), nullable=False),
        sa.Column("followed_id", sa.Integer(), nullable=False),
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
        sa.ForeignKeyConstraint(["followed_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["follower_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_relationships_id"), "relationships", ["id"], unique=False)
    op.create_index(
        op.f("ix_relationships_follower_id"), "relationships", ["follower_id"], unique=False
    )
    op.create_index(
        op.f("ix_relationships_followed_id"), "relationships", ["followed_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_relationships_followed_id"), table_name="relationships")
    op.drop_index(op.f("ix_relationships_follower_id"), table_name="relationships")
    op.drop_index(op.f("ix_relationships_id"), table_name="relationships")
    op.drop_table("relationships")
