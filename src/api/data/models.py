"""Pydantic models for data management endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BackupRequest(BaseModel):
    """Request model for creating a backup.

    When ``data`` is omitted the backup captures a full export of the store.
    """

    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True)

    name: str = Field(..., min_length=1, description="Backup name")
    backup_type: str = Field(default="manual", description="Backup type label")
    data: Any | None = Field(default=None, description="Payload to store")
