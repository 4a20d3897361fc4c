"""Settings endpoints."""

from src.api.settings.endpoints import router

__all__ = ["router"]
