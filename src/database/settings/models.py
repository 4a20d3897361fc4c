"""SQLAlchemy ORM model for the application settings singleton."""

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.database.core import Base

SETTINGS_ID = 1


class AppSettings(Base):
    """ORM model for settings table.

    Holds a single row (id 1) with API credentials and newsletter defaults.
    """

    __tablename__ = "settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=SETTINGS_ID)
    claude_api_key: Mapped[str | None] = mapped_column(Text, nullable=True)
    claude_model: Mapped[str | None] = mapped_column(String(100), nullable=True)
    claude_temperature: Mapped[float | None] = mapped_column(Float, nullable=True)
    claude_max_tokens: Mapped[int | None] = mapped_column(Integer, nullable=True)
    beehiiv_api_key: Mapped[str | None] = mapped_column(Text, nullable=True)
    beehiiv_publication_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    newsletter_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    issue_start_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    default_news_source: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    sendgrid_api_key: Mapped[str | None] = mapped_column(Text, nullable=True)
    approval_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    approval_required: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    daily_schedule_enabled: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    daily_schedule_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    auto_select_articles: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    max_daily_articles: Mapped[int | None] = mapped_column(Integer, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )

    def __repr__(self) -> str:
        """Return string representation of the settings."""
        return f"<AppSettings(newsletter_title={self.newsletter_title!r}, model={self.claude_model!r})>"
