"""closet core tables

Revision ID: 0001_init
Revises:
Create Date: 2026-10-17
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps(updated: bool = True) -> list:
    cols = [sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)]
    if updated:
        cols.append(sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False))
    return cols


def _owner() -> sa.Column:
    return sa.Column("user_id", sa.Uuid(), sa.ForeignKey("user.id", ondelete="CASCADE"), nullable=False)


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("username", sa.Text(), nullable=False, unique=True),
        sa.Column("email", sa.Text(), nullable=True),
        sa.Column("fullname", sa.Text(), nullable=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("preferences", sa.JSON(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "wardrobe_item",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=32), nullable=False),
        sa.Column("subcategory", sa.String(length=64), nullable=True),
        sa.Column("color", sa.String(length=64), nullable=True),
        sa.Column("brand", sa.String(length=200), nullable=True),
        sa.Column("season", sa.String(length=64), nullable=True),
        sa.Column("occasion", sa.JSON(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=True),
        sa.Column("favorite", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("purchase_date", sa.Date(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_wardrobe_item_user_id", "wardrobe_item", ["user_id"])

    # item_ids is a plain JSON list; no FK to wardrobe_item
    op.create_table(
        "outfit",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("item_ids", sa.JSON(), nullable=False),
        sa.Column("occasion", sa.Text(), nullable=True),
        sa.Column("season", sa.Text(), nullable=True),
        sa.Column("weather_conditions", sa.Text(), nullable=True),
        sa.Column("mood", sa.Text(), nullable=True),
        sa.Column("favorite", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("style_advice", sa.Text(), nullable=True),
        sa.Column("source", sa.Text(), nullable=True),
        sa.Column("share_token", sa.Text(), nullable=True, unique=True),
        *_timestamps(),
    )
    op.create_index("ix_outfit_user_id", "outfit", ["user_id"])

    op.create_table(
        "outfit_plan",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner(),
        sa.Column("outfit_id", sa.Uuid(), sa.ForeignKey("outfit.id", ondelete="CASCADE"), nullable=False),
        sa.Column("planned_date", sa.Date(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(updated=False),
    )
    op.create_index("ix_outfit_plan_user_id", "outfit_plan", ["user_id"])
    op.create_index("ix_outfit_plan_user_date", "outfit_plan", ["user_id", "planned_date"])

    op.create_table(
        "inspiration",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=True),
        sa.Column("category", sa.String(length=32), nullable=True),
        sa.Column("source", sa.Text(), nullable=True),
        *_timestamps(updated=False),
    )

    op.create_table(
        "weather_preference",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner(),
        sa.Column("weather_type", sa.String(length=32), nullable=False),
        sa.Column("preferred_categories", sa.JSON(), nullable=True),
        sa.Column("avoid_categories", sa.JSON(), nullable=True),
        *_timestamps(updated=False),
    )
    op.create_index("ix_weather_preference_user_id", "weather_preference", ["user_id"])

    op.create_table(
        "mood_preference",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner(),
        sa.Column("mood", sa.String(length=32), nullable=False),
        sa.Column("preferred_categories", sa.JSON(), nullable=True),
        sa.Column("preferred_colors", sa.JSON(), nullable=True),
        *_timestamps(updated=False),
    )
    op.create_index("ix_mood_preference_user_id", "mood_preference", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_mood_preference_user_id", table_name="mood_preference")
    op.drop_table("mood_preference")
    op.drop_index("ix_weather_preference_user_id", table_name="weather_preference")
    op.drop_table("weather_preference")
    op.drop_table("inspiration")
    op.drop_index("ix_outfit_plan_user_date", table_name="outfit_plan")
    op.drop_index("ix_outfit_plan_user_id", table_name="outfit_plan")
    op.drop_table("outfit_plan")
    op.drop_index("ix_outfit_user_id", table_name="outfit")
    op.drop_table("outfit")
    op.drop_index("ix_wardrobe_item_user_id", table_name="wardrobe_item")
    op.drop_table("wardrobe_item")
    op.drop_table("user")
