"""Article endpoints."""

from src.api.articles.endpoints import router

__all__ = ["router"]
