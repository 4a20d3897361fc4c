"""Pydantic models for article API endpoints."""

from pydantic import BaseModel, Field


class ArticleSelectionRequest(BaseModel):
    """Request model for toggling article selection."""

    selected: bool = Field(..., description="Whether the article is selected for the next issue")
