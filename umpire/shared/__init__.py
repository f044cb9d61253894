"""
Shared module - Cross-cutting concerns

Environment and log level enums plus the structlog configuration used by
every other layer. Nothing in here may depend on Infrastructure or
Frameworks.
"""

from .consts import REQUEST_ID_HEADER, EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "REQUEST_ID_HEADER",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
