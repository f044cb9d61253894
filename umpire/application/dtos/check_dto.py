"""
Application DTOs - Checks

Query parameters accepted by the check endpoint and the JSON body rendered
for each outcome.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from umpire.domain.entities.check import (
    AggregationKind,
    BackendKind,
    CheckOutcome,
    CheckRequest,
    OutcomeKind,
)

MISSING_PARAMETERS = "missing parameters"
METRIC_NOT_FOUND = "metric not found"
BACKEND_UNAVAILABLE = (
    "connecting to backend metrics service failed with error 'request timed out'"
)
NO_VALUES_IN_RANGE = "no values for metric in range"


class CheckQueryDTO(BaseModel):
    """Raw check parameters as received on the query string.

    Presence rules (metric, range, min or max) are left to the use case so
    that an incomplete query still yields an Invalid outcome rather than a
    validation error here. Malformed numbers do raise.
    """

    metric: Optional[str] = Field(default=None, description="Metric name or target")
    min: Optional[float] = Field(
        default=None, allow_inf_nan=False, description="Lower bound (inclusive)"
    )
    max: Optional[float] = Field(
        default=None, allow_inf_nan=False, description="Upper bound (inclusive)"
    )
    range: Optional[int] = Field(default=None, description="Window size in seconds")
    empty_ok: bool = Field(
        default=False, description="Treat an empty window as a passing check"
    )
    backend: BackendKind = Field(default=BackendKind.GRAPHITE)
    aggregate: AggregationKind = Field(default=AggregationKind.AVG)

    model_config = {"extra": "ignore"}

    @field_validator("metric", "range", mode="before")
    @classmethod
    def blank_as_missing(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("min", "max", mode="before")
    @classmethod
    def blank_bound_as_zero(cls, v: Any) -> Any:
        """A present but empty bound (`?min=`) is the bound 0."""
        if isinstance(v, str) and not v.strip():
            return 0.0
        return v

    @field_validator("empty_ok", mode="before")
    @classmethod
    def parse_flag(cls, v: Any) -> bool:
        """The flag is set by presence alone, whatever its value."""
        if isinstance(v, bool):
            return v
        return v is not None

    @field_validator("backend", mode="before")
    @classmethod
    def parse_backend(cls, v: Any) -> BackendKind:
        if isinstance(v, BackendKind):
            return v
        return BackendKind.from_param(v if isinstance(v, str) else None)

    @field_validator("aggregate", mode="before")
    @classmethod
    def parse_aggregate(cls, v: Any) -> AggregationKind:
        if isinstance(v, AggregationKind):
            return v
        return AggregationKind.from_param(v if isinstance(v, str) else None)

    def to_domain(self) -> CheckRequest:
        return CheckRequest(
            metric=self.metric,
            range_seconds=self.range,
            min_value=self.min,
            max_value=self.max,
            empty_ok=self.empty_ok,
            backend=self.backend,
            aggregation=self.aggregate,
        )


class CheckResponseDTO(BaseModel):
    """Body of a check response: either a value or an error message."""

    value: Optional[float] = Field(default=None, description="Aggregated value")
    error: Optional[str] = Field(default=None, description="Why no value is reported")

    @classmethod
    def from_outcome(cls, outcome: CheckOutcome) -> "CheckResponseDTO":
        if outcome.has_value:
            return cls(value=outcome.value)
        if outcome.kind in (OutcomeKind.PASSED, OutcomeKind.NO_DATA):
            return cls(error=NO_VALUES_IN_RANGE)
        if outcome.kind is OutcomeKind.NOT_FOUND:
            return cls(error=METRIC_NOT_FOUND)
        if outcome.kind is OutcomeKind.BACKEND_UNAVAILABLE:
            return cls(error=BACKEND_UNAVAILABLE)
        return cls(error=MISSING_PARAMETERS)

    def to_body(self) -> dict:
        return self.model_dump(exclude_none=True)

    model_config = {
        "json_schema_extra": {"examples": [{"value": 70.0}, {"error": "metric not found"}]}
    }
