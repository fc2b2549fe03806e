"""password reset tokens and challenges

Revision ID: 0002_password_reset_challenges
Revises: 0001_init
Create Date: 2026-10-24
"""
from alembic import op
import sqlalchemy as sa

revision = "0002_password_reset_challenges"
down_revision = "0001_init"
branch_labels = None
depends_on = None


def _owner() -> sa.Column:
    return sa.Column("user_id", sa.Uuid(), sa.ForeignKey("user.id", ondelete="CASCADE"), nullable=False)


def upgrade() -> None:
    op.create_table(
        "password_reset_token",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner(),
        sa.Column("token_hash", sa.Text(), nullable=False, unique=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("used_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_password_reset_token_user_id", "password_reset_token", ["user_id"])

    op.create_table(
        "challenge",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(32), nullable=True),
        sa.Column("difficulty", sa.String(16), nullable=False, server_default="easy"),
        sa.Column("points", sa.Integer(), nullable=False, server_default="50"),
        sa.Column("duration_days", sa.Integer(), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        "user_challenge",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner(),
        sa.Column("challenge_id", sa.Uuid(), sa.ForeignKey("challenge.id", ondelete="CASCADE"), nullable=False),
        sa.Column("progress", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("max_progress", sa.Integer(), nullable=False, server_default="100"),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("user_id", "challenge_id", name="uq_user_challenge"),
    )
    op.create_index("ix_user_challenge_user_id", "user_challenge", ["user_id"])

    op.create_table(
        "achievement",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.Text(), nullable=True),
        sa.Column("points_awarded", sa.Integer(), nullable=False, server_default="50"),
        sa.Column("unlocked_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("user_id", "name", name="uq_achievement_user_name"),
    )
    op.create_index("ix_achievement_user_id", "achievement", ["user_id"])

    op.create_table(
        "user_stats",
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("user.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("level", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("challenges_completed", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("achievements_unlocked", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("user_stats")
    op.drop_index("ix_achievement_user_id", table_name="achievement")
    op.drop_table("achievement")
    op.drop_index("ix_user_challenge_user_id", table_name="user_challenge")
    op.drop_table("user_challenge")
    op.drop_table("challenge")
    op.drop_index("ix_password_reset_token_user_id", table_name="password_reset_token")
    op.drop_table("password_reset_token")
