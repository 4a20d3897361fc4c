"""SQLAlchemy ORM models for data backups."""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.database.core import Base


class DataBackup(Base):
    """ORM model for data_backups table."""

    __tablename__ = "data_backups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    backup_type: Mapped[str] = mapped_column(String(30), nullable=False, default="manual")
    data: Mapped[Any | None] = mapped_column(JSON, nullable=True)
    download_url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )

    __table_args__ = (Index("idx_data_backups_created_at", "created_at"),)

    def __repr__(self) -> str:
        """Return string representation of the backup."""
        return f"<DataBackup(id={self.id}, name={self.name!r}, type={self.backup_type!r})>"
