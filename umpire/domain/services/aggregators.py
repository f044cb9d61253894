"""Aggregators reducing a sequence of samples to a single value."""

import math
from abc import ABC, abstractmethod
from statistics import fmean
from typing import Dict, Sequence

from umpire.domain.entities.check import AggregationKind


class Aggregator(ABC):
    """Reduces a non-empty sequence of values to one number.

    Callers check for emptiness first; aggregating nothing is a bug.
    """

    kind: AggregationKind

    @abstractmethod
    def aggregate(self, values: Sequence[float]) -> float: ...


class AverageAggregator(Aggregator):
    kind = AggregationKind.AVG

    def aggregate(self, values: Sequence[float]) -> float:
        return fmean(values)


class SumAggregator(Aggregator):
    kind = AggregationKind.SUM

    def aggregate(self, values: Sequence[float]) -> float:
        return math.fsum(values)


class MinAggregator(Aggregator):
    kind = AggregationKind.MIN

    def aggregate(self, values: Sequence[float]) -> float:
        return float(min(values))


class MaxAggregator(Aggregator):
    kind = AggregationKind.MAX

    def aggregate(self, values: Sequence[float]) -> float:
        return float(max(values))


_AGGREGATORS: Dict[AggregationKind, Aggregator] = {
    aggregator.kind: aggregator
    for aggregator in (
        AverageAggregator(),
        SumAggregator(),
        MinAggregator(),
        MaxAggregator(),
    )
}


def get_aggregator(kind: AggregationKind) -> Aggregator:
    """Return the shared aggregator instance for kind (avg when unknown)."""
    return _AGGREGATORS.get(kind, _AGGREGATORS[AggregationKind.AVG])
