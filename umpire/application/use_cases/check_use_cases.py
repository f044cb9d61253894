"""Use case evaluating a metric threshold check."""

from typing import Mapping, Optional

import structlog

from umpire.domain.entities.check import (
    BackendKind,
    CheckOutcome,
    CheckRequest,
)
from umpire.domain.entities.errors import (
    BackendRequestFailedError,
    MetricNotFoundError,
)
from umpire.domain.gateways.metric_source import IMetricSource
from umpire.domain.services.aggregators import get_aggregator
from umpire.shared import get_logger


class EvaluateCheckUseCase:
    """
    Evaluate one check: validate, fetch, aggregate and compare to bounds.

    Backend failures are converted into outcomes here and never escape as
    exceptions. Exactly one backend request is made per valid check.
    """

    def __init__(
        self,
        metric_sources: Mapping[BackendKind, IMetricSource],
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ) -> None:
        self._metric_sources = metric_sources
        self._logger = logger or get_logger(__name__)

    async def execute(self, request: CheckRequest) -> CheckOutcome:
        missing = request.missing_parameters()
        if missing:
            self._logger.info("check.invalid", missing=missing)
            return CheckOutcome.invalid()

        outcome = await self._evaluate(request)
        self._logger.info(
            "check.evaluated",
            metric=request.metric,
            backend=request.backend.value,
            aggregation=request.aggregation.value,
            range_seconds=request.range_seconds,
            min_value=request.min_value,
            max_value=request.max_value,
            outcome=outcome.kind.value,
            value=outcome.value,
        )
        return outcome

    async def _evaluate(self, request: CheckRequest) -> CheckOutcome:
        source = self._metric_sources[request.backend]
        aggregator = get_aggregator(request.aggregation)

        try:
            samples = await source.fetch(request.metric, request.range_seconds)
        except MetricNotFoundError:
            return CheckOutcome.not_found()
        except BackendRequestFailedError as e:
            self._logger.warning(
                "check.backend_unavailable",
                metric=request.metric,
                backend=request.backend.value,
                error=e.message,
            )
            return CheckOutcome.backend_unavailable()

        if not samples:
            return CheckOutcome.passed() if request.empty_ok else CheckOutcome.no_data()

        value = aggregator.aggregate([sample.value for sample in samples])
        if request.is_within_bounds(value):
            return CheckOutcome.passed(value)
        return CheckOutcome.failed(value)
