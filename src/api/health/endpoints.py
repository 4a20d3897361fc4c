"""Health check endpoints."""

import logging

from fastapi import APIRouter

from src.api.dependencies import StorageDep
from src.api.health.models import HealthResponse
from src.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=HealthResponse,
    summary="Check service health",
    description="Returns the health status of the API service and the active storage backend.",
)
def health_check(storage: StorageDep) -> HealthResponse:
    """Check if the API service is healthy.

    :param storage: The active storage backend.
    :returns: Health status response.
    """
    logger.debug("Health check requested")
    backend = "memory" if isinstance(storage, MemoryStorage) else "database"
    return HealthResponse(status="healthy", version="0.1.0", storage=backend)
