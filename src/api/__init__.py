"""HTTP API for the newsletter dashboard."""

from src.api.app import app

__all__ = ["app"]
