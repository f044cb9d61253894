"""
Domain Gateway - Metric Source

This module defines the gateway interface for reading recent samples of a
metric from a monitoring backend.
"""

from abc import ABC, abstractmethod
from typing import List

from umpire.domain.entities.time_series import MetricSample


class IMetricSource(ABC):
    """Interface for metrics backends."""

    name: str = "metrics"

    @abstractmethod
    async def fetch(self, metric: str, range_seconds: int) -> List[MetricSample]:
        """
        Fetch the samples recorded for a metric during the last range_seconds.

        A single request is made; nothing is retried.

        Args:
            metric: Backend-specific metric name or target expression
            range_seconds: Size of the window ending now

        Returns:
            Samples in the order the backend returned them. Empty when the
            metric exists but has no values in the window.

        Raises:
            MetricNotFoundError: When the backend says the metric does not exist
            BackendRequestFailedError: On network errors, timeouts or
                unexpected responses
        """
        pass
