"""FastAPI application configuration."""

import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.activity import router as activity_router
from src.api.articles import router as articles_router
from src.api.data import router as data_router
from src.api.dependencies import verify_token
from src.api.feeds import router as feeds_router
from src.api.health import router as health_router
from src.api.models import ErrorResponse
from src.api.newsletters import router as newsletters_router
from src.api.schedules import router as schedules_router
from src.api.settings import router as settings_router
from src.api.social import router as social_router
from src.observability.sentry import init_sentry
from src.storage.base import StorageError
from src.utils.logging import configure_logging

configure_logging()
init_sentry()

logger = logging.getLogger(__name__)

PROTECTED_ROUTERS = (
    articles_router,
    newsletters_router,
    settings_router,
    activity_router,
    schedules_router,
    social_router,
    feeds_router,
    data_router,
)


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn an unhandled storage failure into a 500 response.

    :param request: The failing request.
    :param exc: The storage error.
    :returns: JSON error response.
    """
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(detail="Storage error").model_dump(),
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    :returns: Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Newsletter Automation API",
        version="0.1.0",
        responses={
            401: {"model": ErrorResponse, "description": "Unauthorised"},
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )
    application.add_exception_handler(StorageError, storage_error_handler)

    # Register routers
    application.include_router(health_router)
    for router in PROTECTED_ROUTERS:
        application.include_router(router, dependencies=[Depends(verify_token)])

    logger.info("FastAPI application created")

    return application


# Application instance for uvicorn
app = create_app()
