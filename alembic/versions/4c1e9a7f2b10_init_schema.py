"""init_schema

Revision ID: 4c1e9a7f2b10
Revises: 
Create Date: 2026-10-17 10:02:11.418230

"""
from alembic import op
import sqlalchemy as sa


revision = '4c1e9a7f2b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index("ix_user_email", "user", ["email"], unique=True)

    op.create_table(
        "task",
        sa.Column("task_id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("priority", sa.String(), nullable=False),
        sa.Column("estimated_time", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("start_date", sa.DateTime(), nullable=True),
        sa.Column("due_date", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["owner_id"], ["user.user_id"]),
        sa.PrimaryKeyConstraint("task_id"),
        sa.UniqueConstraint("owner_id", "name", name="uq_task_owner_name"),
    )
    op.create_index("ix_task_owner_id", "task", ["owner_id"])


def downgrade() -> None:
    op.drop_index("ix_task_owner_id", table_name="task")
    op.drop_table("task")
    op.drop_index("ix_user_email", table_name="user")
    op.drop_table("user")
