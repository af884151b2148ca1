"""add email uniqueness index

Revision ID: 5e7a9c1b3d2f
Revises: 1a2b3c4d5e6f
Create Date: 2026-09-28 19:40:37.902655

"""

from collections.abc import Sequence

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5e7a9c1b3d2f"
down_revision: str | None = "1a2b3c4d5e6f"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # Existing addresses are folded to lowercase first; the application stores
    # them lowercased, so this index is what rejects case-only duplicates.
    op.execute("UPDATE users SET email = LOWER(email)")
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index(op.f("ix_users_email"), table_name="users")
