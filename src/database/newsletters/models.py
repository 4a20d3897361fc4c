"""SQLAlchemy ORM models for newsletters and their social media posts."""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.database.core import Base


class Newsletter(Base):
    """ORM model for newsletters table."""

    __tablename__ = "newsletters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    issue_number: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="draft")
    frequency: Mapped[str] = mapped_column(String(20), nullable=False, default="manual")
    schedule_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    approval_required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    approval_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    approved_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    html_content: Mapped[str | None] = mapped_column(Text, nullable=True)
    beehiiv_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    beehiiv_url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    word_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    generated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    social_media_posts: Mapped[list["SocialMediaPost"]] = relationship(
        "SocialMediaPost",
        back_populates="newsletter",
        cascade="all, delete-orphan",
    )

    __table_args__ = (Index("idx_newsletters_status", "status"),)

    def __repr__(self) -> str:
        """Return string representation of the newsletter."""
        return f"<Newsletter(id={self.id}, issue={self.issue_number}, status={self.status!r})>"


class SocialMediaPost(Base):
    """ORM model for social_media_posts table."""

    __tablename__ = "social_media_posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    newsletter_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("newsletters.id", ondelete="CASCADE"),
        nullable=False,
    )
    platform: Mapped[str] = mapped_column(String(50), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    hashtags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    engagement_hook: Mapped[str | None] = mapped_column(Text, nullable=True)
    call_to_action: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="scheduled")
    scheduled_for: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    post_url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    engagement_stats: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )

    newsletter: Mapped["Newsletter"] = relationship(
        "Newsletter",
        back_populates="social_media_posts",
    )

    __table_args__ = (
        Index("idx_social_media_posts_newsletter_id", "newsletter_id"),
        Index("idx_social_media_posts_status_scheduled_for", "status", "scheduled_for"),
    )

    def __repr__(self) -> str:
        """Return string representation of the post."""
        return f"<SocialMediaPost(id={self.id}, platform={self.platform!r}, status={self.status!r})>"
