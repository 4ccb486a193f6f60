"""Create booking, intake, blog and category tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates admin_users, slots, intake_submissions, blog_posts and
       categories with their UNIQUE constraints and lookup indexes.

Rollback: downgrade() drops all five tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "admin_users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("admin", sa.String(150), nullable=False, comment="Login name"),
        sa.Column(
            "password_hash",
            sa.String(255),
            nullable=False,
            comment="werkzeug password hash (method$salt$hash)",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("admin"),
    )

    # One row per bookable interval; the unique tuple blocks duplicate slots
    op.create_table(
        "slots",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=False), nullable=False,
                  comment="Calendar day of the slot (naive)"),
        sa.Column("start_time", sa.String(10), nullable=False, comment="HH:MM"),
        sa.Column("end_time", sa.String(10), nullable=False, comment="HH:MM"),
        sa.Column("mode", sa.String(50), nullable=False, comment="e.g. online, in-person"),
        sa.Column("is_booked", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("date", "start_time", "end_time", "mode", name="uq_slots_date_time_mode"),
    )
    op.create_index("idx_slots_date", "slots", ["date"])

    op.create_table(
        "intake_submissions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.Column("date", sa.DateTime(timezone=False), nullable=False),
        sa.Column("time", sa.String(20), nullable=False),
        sa.Column("mode", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("is_submitted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=False), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    # Serves GET /api/latestdata: WHERE is_submitted = false ORDER BY created_at DESC
    op.create_index("idx_intake_pending", "intake_submissions", ["is_submitted", "created_at"])

    op.create_table(
        "blog_posts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("category", sa.String(200), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_blog_posts_category", "blog_posts", ["category"])

    op.create_table(
        "categories",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=False), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )


def downgrade() -> None:
    op.drop_table("categories")
    op.drop_index("idx_blog_posts_category", table_name="blog_posts")
    op.drop_table("blog_posts")
    op.drop_index("idx_intake_pending", table_name="intake_submissions")
    op.drop_table("intake_submissions")
    op.drop_index("idx_slots_date", table_name="slots")
    op.drop_table("slots")
    op.drop_table("admin_users")
