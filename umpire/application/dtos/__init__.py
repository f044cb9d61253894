"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
presentation layer.
"""

from .check_dto import (
    BACKEND_UNAVAILABLE,
    METRIC_NOT_FOUND,
    MISSING_PARAMETERS,
    NO_VALUES_IN_RANGE,
    CheckQueryDTO,
    CheckResponseDTO,
)
from .health_dto import HealthDTO

__all__ = [
    "CheckQueryDTO",
    "CheckResponseDTO",
    "HealthDTO",
    "MISSING_PARAMETERS",
    "METRIC_NOT_FOUND",
    "BACKEND_UNAVAILABLE",
    "NO_VALUES_IN_RANGE",
]
