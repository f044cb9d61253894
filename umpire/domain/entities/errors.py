"""
Domain Errors

Failures a metric source can signal. The check use case turns them into
outcomes; they never reach the HTTP layer as exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MetricNotFoundError(DomainError):
    """Raised when a backend reports that a metric does not exist."""

    def __init__(self, metric: str, details: Optional[Dict[str, Any]] = None):
        self.metric = metric
        super().__init__(f"Metric {metric} not found", details)


class BackendRequestFailedError(DomainError):
    """Raised when talking to a metrics backend fails (network, timeout, bad reply)."""

    def __init__(
        self, backend: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        self.backend = backend
        super().__init__(f"{backend} request failed: {message}", details)
