"""Domain services package."""

from .aggregators import (
    Aggregator,
    AverageAggregator,
    MaxAggregator,
    MinAggregator,
    SumAggregator,
    get_aggregator,
)

__all__ = [
    "Aggregator",
    "AverageAggregator",
    "SumAggregator",
    "MinAggregator",
    "MaxAggregator",
    "get_aggregator",
]
