"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It initializes the container, creates the FastAPI app, and includes
the API routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from umpire.main.config import get_settings
from umpire.main.container import app_lifespan, init_container
from umpire.presentation.controllers import check_router, system_router
from umpire.presentation.error_handlers import register_exception_handlers
from umpire.presentation.middleware import RequestLoggingMiddleware
from umpire.presentation.responses import JSONLineResponse
from umpire.shared import configure_logging, get_logger, update_logging_from_settings

# Configure logging with basic settings first - before configuration is loaded
configure_logging()

settings = get_settings()

update_logging_from_settings(settings)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    Delegates resource handling to the container's app_lifespan.
    """
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("Application starting up")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    init_container(settings)

    app = FastAPI(
        title=settings.umpire.title,
        description=settings.umpire.description,
        version=settings.umpire.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        default_response_class=JSONLineResponse,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware, logger=get_logger("umpire.http"))
    # Added last so it runs first: redirects before anything is logged or served.
    if settings.umpire.force_https:
        app.add_middleware(HTTPSRedirectMiddleware)

    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(check_router)

    return app


app = create_app()
