"""Data management endpoints."""

from src.api.data.endpoints import router

__all__ = ["router"]
