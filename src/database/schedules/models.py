"""SQLAlchemy ORM models for recurring newsletter schedules."""

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.database.core import Base


class Schedule(Base):
    """ORM model for schedules table.

    next_run is derived from frequency and time and is recomputed whenever
    either of them changes.
    """

    __tablename__ = "schedules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    frequency: Mapped[str] = mapped_column(String(20), nullable=False)
    time: Mapped[str] = mapped_column(String(5), nullable=False)
    news_source_url: Mapped[str] = mapped_column(String(2000), nullable=False)
    max_articles: Mapped[int | None] = mapped_column(Integer, nullable=True, default=5)
    auto_approve: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    last_run: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    next_run: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )

    __table_args__ = (Index("idx_schedules_enabled_next_run", "enabled", "next_run"),)

    def __repr__(self) -> str:
        """Return string representation of the schedule."""
        return f"<Schedule(id={self.id}, name={self.name!r}, {self.frequency} at {self.time})>"
