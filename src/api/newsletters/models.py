"""Pydantic models for newsletter API endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NextIssueNumberResponse(BaseModel):
    """Response model for the next issue number."""

    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True)

    issue_number: int = Field(..., description="Issue number the next newsletter will receive")
