"""
Domain Entities Package

Value objects for checks, samples and the errors metric sources raise.
"""

from .check import (
    AggregationKind,
    BackendKind,
    CheckOutcome,
    CheckRequest,
    OutcomeKind,
)
from .errors import BackendRequestFailedError, DomainError, MetricNotFoundError
from .time_series import MetricSample

__all__ = [
    "AggregationKind",
    "BackendKind",
    "CheckOutcome",
    "CheckRequest",
    "OutcomeKind",
    "MetricSample",
    "DomainError",
    "MetricNotFoundError",
    "BackendRequestFailedError",
]
