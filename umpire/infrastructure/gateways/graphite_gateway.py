"""
Infrastructure Gateway - Graphite Implementation

Reads recent datapoints for a target through the Graphite render API.
"""

from datetime import datetime, timezone
from typing import Any, List

import httpx

from umpire.domain.entities.errors import BackendRequestFailedError, MetricNotFoundError
from umpire.domain.entities.time_series import MetricSample
from umpire.domain.gateways.metric_source import IMetricSource
from umpire.shared import get_logger

logger = get_logger(__name__)


class GraphiteGateway(IMetricSource):
    """Metric source backed by Graphite's /render endpoint."""

    name = "graphite"

    def __init__(self, base_url: str, timeout: float = 10.0):
        """
        Initialize Graphite gateway.

        Args:
            base_url: Base URL of graphite-web (e.g., "https://graphite.example.com")
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def fetch(self, metric: str, range_seconds: int) -> List[MetricSample]:
        url = f"{self.base_url}/render/"
        params = {"target": metric, "format": "json", "from": f"-{range_seconds}s"}

        logger.debug("graphite.fetch", url=url, metric=metric, range=range_seconds)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "graphite.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                metric=metric,
            )
            raise BackendRequestFailedError(
                self.name, f"HTTP error {e.response.status_code}"
            ) from e

        except httpx.RequestError as e:
            logger.error("graphite.request_error", error=str(e), metric=metric)
            raise BackendRequestFailedError(self.name, str(e) or type(e).__name__) from e

        except ValueError as e:
            logger.error("graphite.invalid_json", error=str(e), metric=metric)
            raise BackendRequestFailedError(self.name, "invalid JSON response") from e

        return self._parse_render_response(data, metric)

    def _parse_render_response(self, data: Any, metric: str) -> List[MetricSample]:
        """Turn the first series of a render response into samples.

        An empty series list is how Graphite reports an unknown target; a
        series whose datapoints are all null is an existing metric without
        data in the window.
        """
        if not isinstance(data, list):
            raise BackendRequestFailedError(self.name, "unexpected response format")
        if not data:
            raise MetricNotFoundError(metric)

        series = data[0] if isinstance(data[0], dict) else {}
        datapoints = series.get("datapoints") or []
        samples: List[MetricSample] = []

        for datapoint in datapoints:
            try:
                raw_value, raw_timestamp = datapoint[0], datapoint[1]
            except (TypeError, IndexError):
                logger.warning("graphite.datapoint_malformed", datapoint=datapoint)
                continue

            if raw_value is None:
                continue

            try:
                value = float(raw_value)
            except (TypeError, ValueError):
                logger.warning(
                    "graphite.value_conversion_failed", value=raw_value, metric=metric
                )
                continue

            timestamp = (
                datetime.fromtimestamp(raw_timestamp, tz=timezone.utc)
                if isinstance(raw_timestamp, (int, float))
                else None
            )
            samples.append(MetricSample(value=value, timestamp=timestamp))

        logger.debug("graphite.samples_parsed", metric=metric, count=len(samples))
        return samples
