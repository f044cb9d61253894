from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple

import pytest

from umpire.application.use_cases.check_use_cases import EvaluateCheckUseCase
from umpire.domain.entities.check import BackendKind, CheckRequest
from umpire.domain.entities.time_series import MetricSample
from umpire.domain.gateways.metric_source import IMetricSource


class FakeMetricSource(IMetricSource):
    """In-memory metric source recording every fetch."""

    def __init__(
        self,
        values: Optional[Iterable[float]] = None,
        error: Optional[Exception] = None,
        name: str = "fake",
    ) -> None:
        self.values = list(values or [])
        self.error = error
        self.name = name
        self.calls: List[Tuple[str, int]] = []

    async def fetch(self, metric: str, range_seconds: int) -> List[MetricSample]:
        self.calls.append((metric, range_seconds))
        if self.error is not None:
            raise self.error
        return [MetricSample(value=value) for value in self.values]


@pytest.fixture()
def make_source() -> Callable[..., FakeMetricSource]:
    return FakeMetricSource


@pytest.fixture()
def graphite_source() -> FakeMetricSource:
    return FakeMetricSource(values=[70, 90, 50], name="graphite")


@pytest.fixture()
def librato_source() -> FakeMetricSource:
    return FakeMetricSource(values=[1, 2, 3], name="librato")


@pytest.fixture()
def check_use_case(
    graphite_source: FakeMetricSource, librato_source: FakeMetricSource
) -> EvaluateCheckUseCase:
    return EvaluateCheckUseCase(
        metric_sources={
            BackendKind.GRAPHITE: graphite_source,
            BackendKind.LIBRATO: librato_source,
        }
    )


@pytest.fixture()
def cpu_check() -> CheckRequest:
    return CheckRequest(
        metric="cpu.load", range_seconds=60, min_value=0.0, max_value=80.0
    )
