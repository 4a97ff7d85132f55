"""Create log_entry table for page visit logging

Revision ID: 3f9c1a7b2d40
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f9c1a7b2d40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "log_entry",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
        sa.Column("project", sa.String(length=50), nullable=True),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    # Visit counts and pruning both filter on timestamp
    op.create_index(op.f("ix_log_entry_timestamp"), "log_entry", ["timestamp"], unique=False)


def downgrade():
    op.drop_index(op.f("ix_log_entry_timestamp"), table_name="log_entry")
    op.drop_table("log_entry")
