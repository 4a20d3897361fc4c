"""Create newsletter automation tables

Revision ID: 3f9a1c7e2b84
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9a1c7e2b84"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )

    op.create_table(
        "articles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("source", sa.String(length=255), nullable=False),
        sa.Column("url", sa.String(length=2000), nullable=False),
        sa.Column("published_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("selected", sa.Boolean(), nullable=False),
        sa.Column("fetched_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_articles_published_date", "articles", ["published_date"], unique=False)

    op.create_table(
        "newsletters",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("issue_number", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("frequency", sa.String(length=20), nullable=False),
        sa.Column("schedule_time", sa.String(length=5), nullable=True),
        sa.Column("approval_required", sa.Boolean(), nullable=False),
        sa.Column("approval_email", sa.String(length=255), nullable=True),
        sa.Column("approved_by", sa.String(length=255), nullable=True),
        sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("html_content", sa.Text(), nullable=True),
        sa.Column("beehiiv_id", sa.String(length=255), nullable=True),
        sa.Column("beehiiv_url", sa.String(length=2000), nullable=True),
        sa.Column("word_count", sa.Integer(), nullable=True),
        sa.Column("generated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("issue_number"),
    )
    op.create_index("idx_newsletters_status", "newsletters", ["status"], unique=False)

    op.create_table(
        "social_media_posts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("newsletter_id", sa.Integer(), nullable=False),
        sa.Column("platform", sa.String(length=50), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("hashtags", sa.JSON(), nullable=False),
        sa.Column("engagement_hook", sa.Text(), nullable=True),
        sa.Column("call_to_action", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("scheduled_for", sa.DateTime(timezone=True), nullable=False),
        sa.Column("post_url", sa.String(length=2000), nullable=True),
        sa.Column("engagement_stats", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["newsletter_id"], ["newsletters.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_social_media_posts_newsletter_id",
        "social_media_posts",
        ["newsletter_id"],
        unique=False,
    )
    op.create_index(
        "idx_social_media_posts_status_scheduled_for",
        "social_media_posts",
        ["status", "scheduled_for"],
        unique=False,
    )

    op.create_table(
        "settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("claude_api_key", sa.Text(), nullable=True),
        sa.Column("claude_model", sa.String(length=100), nullable=True),
        sa.Column("claude_temperature", sa.Float(), nullable=True),
        sa.Column("claude_max_tokens", sa.Integer(), nullable=True),
        sa.Column("beehiiv_api_key", sa.Text(), nullable=True),
        sa.Column("beehiiv_publication_id", sa.String(length=255), nullable=True),
        sa.Column("newsletter_title", sa.String(length=255), nullable=True),
        sa.Column("issue_start_number", sa.Integer(), nullable=True),
        sa.Column("default_news_source", sa.String(length=2000), nullable=True),
        sa.Column("sendgrid_api_key", sa.Text(), nullable=True),
        sa.Column("approval_email", sa.String(length=255), nullable=True),
        sa.Column("approval_required", sa.Boolean(), nullable=True),
        sa.Column("daily_schedule_enabled", sa.Boolean(), nullable=True),
        sa.Column("daily_schedule_time", sa.String(length=5), nullable=True),
        sa.Column("auto_select_articles", sa.Boolean(), nullable=True),
        sa.Column("max_daily_articles", sa.Integer(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "activity_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("details", sa.JSON(), nullable=True),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_activity_logs_timestamp", "activity_logs", ["timestamp"], unique=False)

    op.create_table(
        "schedules",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("frequency", sa.String(length=20), nullable=False),
        sa.Column("time", sa.String(length=5), nullable=False),
        sa.Column("news_source_url", sa.String(length=2000), nullable=False),
        sa.Column("max_articles", sa.Integer(), nullable=True),
        sa.Column("auto_approve", sa.Boolean(), nullable=False),
        sa.Column("enabled", sa.Boolean(), nullable=False),
        sa.Column("last_run", sa.DateTime(timezone=True), nullable=True),
        sa.Column("next_run", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_schedules_enabled_next_run",
        "schedules",
        ["enabled", "next_run"],
        unique=False,
    )

    op.create_table(
        "feed_sources",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("url", sa.String(length=2000), nullable=False),
        sa.Column("enabled", sa.Boolean(), nullable=False),
        sa.Column("refresh_interval", sa.Integer(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("last_fetched", sa.DateTime(timezone=True), nullable=True),
        sa.Column("article_count", sa.Integer(), nullable=False),
        sa.Column("error_count", sa.Integer(), nullable=False),
        sa.Column("last_error", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_feed_sources_name", "feed_sources", ["name"], unique=False)

    op.create_table(
        "data_backups",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("backup_type", sa.String(length=30), nullable=False),
        sa.Column("data", sa.JSON(), nullable=True),
        sa.Column("download_url", sa.String(length=2000), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_data_backups_created_at", "data_backups", ["created_at"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_data_backups_created_at", table_name="data_backups")
    op.drop_table("data_backups")
    op.drop_index("idx_feed_sources_name", table_name="feed_sources")
    op.drop_table("feed_sources")
    op.drop_index("idx_schedules_enabled_next_run", table_name="schedules")
    op.drop_table("schedules")
    op.drop_index("idx_activity_logs_timestamp", table_name="activity_logs")
    op.drop_table("activity_logs")
    op.drop_table("settings")
    op.drop_index("idx_social_media_posts_status_scheduled_for", table_name="social_media_posts")
    op.drop_index("idx_social_media_posts_newsletter_id", table_name="social_media_posts")
    op.drop_table("social_media_posts")
    op.drop_index("idx_newsletters_status", table_name="newsletters")
    op.drop_table("newsletters")
    op.drop_index("idx_articles_published_date", table_name="articles")
    op.drop_table("articles")
    op.drop_table("users")
