"""Activity log endpoints."""

from src.api.activity.endpoints import router

__all__ = ["router"]
