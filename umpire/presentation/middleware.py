"""
Request logging middleware.

Binds a request id into structlog's context for the lifetime of the request,
echoes it back in the response headers and logs one event per request with
its status and duration.
"""

import time
from typing import Optional
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from umpire.shared import REQUEST_ID_HEADER, get_logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Structured access log with request id propagation."""

    def __init__(
        self, app: ASGIApp, logger: Optional[structlog.stdlib.BoundLogger] = None
    ) -> None:
        super().__init__(app)
        self._logger = logger or get_logger(__name__)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            self._logger.error(
                "http.request.failed",
                method=request.method,
                path=request.url.path,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                error=str(exc),
            )
            raise
        finally:
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[REQUEST_ID_HEADER] = request_id
        self._logger.info(
            "http.request.completed",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response
