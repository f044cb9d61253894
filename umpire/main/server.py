"""
Server Entry Point - Main Layer

Runs the FastAPI application under uvicorn with the configured host and
port. Logging stays under structlog's control (uvicorn's own log config is
disabled).
"""

import uvicorn

from umpire.main.config import get_settings
from umpire.shared import configure_logging, get_logger, update_logging_from_settings

logger = get_logger(__name__)


def main() -> None:
    """Start the HTTP server."""
    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    logger.info(
        "server.starting",
        host=settings.umpire.host,
        port=settings.umpire.port,
        environment=settings.environment.value,
    )

    uvicorn.run(
        "umpire.main.app:app",
        host=settings.umpire.host,
        port=settings.umpire.port,
        reload=settings.umpire.reload,
        proxy_headers=True,
        forwarded_allow_ips=settings.umpire.forwarded_allow_ips,
        log_config=None,
    )


if __name__ == "__main__":
    main()
