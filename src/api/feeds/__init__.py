"""Feed source endpoints."""

from src.api.feeds.endpoints import router

__all__ = ["router"]
