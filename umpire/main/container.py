"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager
from urllib.parse import urlsplit, urlunsplit

from dependency_injector import containers, providers

from umpire.application.use_cases.check_use_cases import EvaluateCheckUseCase
from umpire.domain.entities.check import BackendKind
from umpire.infrastructure.gateways.graphite_gateway import GraphiteGateway
from umpire.infrastructure.gateways.librato_gateway import LibratoGateway
from umpire.presentation.security import BasicAuthGuard
from umpire.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Gateways
    graphite_gateway = providers.Singleton(
        GraphiteGateway,
        base_url=config.graphite.url,
        timeout=config.graphite.timeout,
    )

    librato_gateway = providers.Singleton(
        LibratoGateway,
        base_url=config.librato.url,
        email=config.librato.email,
        api_token=config.librato.key,
        timeout=config.librato.timeout,
    )

    metric_sources = providers.Dict(
        {
            BackendKind.GRAPHITE: graphite_gateway,
            BackendKind.LIBRATO: librato_gateway,
        }
    )

    # Application (use cases)
    evaluate_check_use_case = providers.Factory(
        EvaluateCheckUseCase,
        metric_sources=metric_sources,
        logger=providers.Callable(get_logger, "umpire.checks"),
    )

    # Presentation
    basic_auth_guard = providers.Singleton(
        BasicAuthGuard,
        api_key=config.umpire.api_key,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


def _redact_url(url: str) -> str:
    parsed = urlsplit(url or "")
    if parsed.username or parsed.password:
        netloc = parsed.hostname or ""
        if parsed.port:
            netloc = f"{netloc}:{parsed.port}"
        return urlunsplit(
            (parsed.scheme, netloc, parsed.path, parsed.query, parsed.fragment)
        )
    return url


@asynccontextmanager
async def app_lifespan():
    """
    Startup and shutdown hook for the FastAPI lifespan.

    Gateways open one HTTP client per request, so there is nothing to
    connect or close; this reports the effective configuration instead.
    """
    container = get_container()

    logger.info(
        "container.backends.configured",
        graphite_url=_redact_url(container.config.graphite.url()),
        librato_url=_redact_url(container.config.librato.url()),
        librato_credentials=bool(
            container.config.librato.email() and container.config.librato.key()
        ),
    )
    if not container.basic_auth_guard().is_configured:
        logger.warning("container.auth.api_key_missing")

    try:
        logger.info("container.resources.initialized")
        yield container
    finally:
        logger.info("container.resources.shutdown")
