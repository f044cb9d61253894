"""
Check domain entities.

Value objects describing a threshold check request and its outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class BackendKind(str, Enum):
    """Metrics backend a check reads from."""

    GRAPHITE = "graphite"
    LIBRATO = "librato"

    @classmethod
    def from_param(cls, raw: Optional[str]) -> "BackendKind":
        """Resolve a query parameter; only "librato" (exact) selects Librato."""
        if raw == cls.LIBRATO.value:
            return cls.LIBRATO
        return cls.GRAPHITE


class AggregationKind(str, Enum):
    """Function used to reduce the fetched samples to one value."""

    AVG = "avg"
    SUM = "sum"
    MIN = "min"
    MAX = "max"

    @classmethod
    def from_param(cls, raw: Optional[str]) -> "AggregationKind":
        """Resolve a query parameter, falling back to avg when unknown or absent."""
        if raw is None:
            return cls.AVG
        try:
            return cls(raw)
        except ValueError:
            return cls.AVG


@dataclass(frozen=True, slots=True)
class CheckRequest:
    """Parameters of a single threshold check."""

    metric: Optional[str]
    range_seconds: Optional[int]
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    empty_ok: bool = False
    backend: BackendKind = BackendKind.GRAPHITE
    aggregation: AggregationKind = AggregationKind.AVG

    def missing_parameters(self) -> List[str]:
        """Names of the parameters that make this request unusable."""
        missing: List[str] = []
        if not self.metric:
            missing.append("metric")
        if self.range_seconds is None or self.range_seconds <= 0:
            missing.append("range")
        if self.min_value is None and self.max_value is None:
            missing.append("min|max")
        return missing

    @property
    def is_valid(self) -> bool:
        return not self.missing_parameters()

    def is_within_bounds(self, value: float) -> bool:
        """Inclusive comparison against whichever bounds are set."""
        if self.min_value is not None and value < self.min_value:
            return False
        if self.max_value is not None and value > self.max_value:
            return False
        return True


class OutcomeKind(str, Enum):
    """Terminal states of a check evaluation."""

    PASSED = "passed"
    FAILED = "failed"
    NO_DATA = "no_data"
    NOT_FOUND = "not_found"
    BACKEND_UNAVAILABLE = "backend_unavailable"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """Result of evaluating a check; value is set whenever one was computed."""

    kind: OutcomeKind
    value: Optional[float] = None

    @classmethod
    def passed(cls, value: Optional[float] = None) -> "CheckOutcome":
        return cls(OutcomeKind.PASSED, value)

    @classmethod
    def failed(cls, value: float) -> "CheckOutcome":
        return cls(OutcomeKind.FAILED, value)

    @classmethod
    def no_data(cls) -> "CheckOutcome":
        return cls(OutcomeKind.NO_DATA)

    @classmethod
    def not_found(cls) -> "CheckOutcome":
        return cls(OutcomeKind.NOT_FOUND)

    @classmethod
    def backend_unavailable(cls) -> "CheckOutcome":
        return cls(OutcomeKind.BACKEND_UNAVAILABLE)

    @classmethod
    def invalid(cls) -> "CheckOutcome":
        return cls(OutcomeKind.INVALID)

    @property
    def has_value(self) -> bool:
        return self.value is not None
