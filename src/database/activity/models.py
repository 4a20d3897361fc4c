"""SQLAlchemy ORM models for the activity log."""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.database.core import Base


class ActivityLog(Base):
    """ORM model for activity_logs table."""

    __tablename__ = "activity_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    details: Mapped[Any | None] = mapped_column(JSON, nullable=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    timestamp: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=lambda: datetime.now(UTC),
    )

    __table_args__ = (Index("idx_activity_logs_timestamp", "timestamp"),)

    def __repr__(self) -> str:
        """Return string representation of the log entry."""
        return f"<ActivityLog(id={self.id}, type={self.type!r})>"
