"""
Exception handlers rendering framework and unexpected errors as JSON.

Every error body has the shape {"error": "<message>"}; internal details
(tracebacks, backend URLs) are logged, never returned.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from umpire.application.dtos.check_dto import MISSING_PARAMETERS
from umpire.presentation.responses import JSONLineResponse
from umpire.shared import get_logger

logger = get_logger(__name__)

NOT_FOUND = "not found"
INTERNAL_SERVER_ERROR = "internal server error"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONLineResponse:
    # Unknown paths and unsupported methods both count as unmatched routes.
    if exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        return JSONLineResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": NOT_FOUND}
        )

    return JSONLineResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail).lower()},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONLineResponse:
    logger.info(
        "http.request.invalid", path=request.url.path, error_count=len(exc.errors())
    )
    return JSONLineResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": MISSING_PARAMETERS}
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONLineResponse:
    logger.error(
        "http.request.unhandled_error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONLineResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_SERVER_ERROR},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
