"""Schedule endpoints."""

from src.api.schedules.endpoints import router

__all__ = ["router"]
