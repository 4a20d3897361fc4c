"""Social media post endpoints."""

from src.api.social.endpoints import router

__all__ = ["router"]
