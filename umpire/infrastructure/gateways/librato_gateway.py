"""Librato metrics API gateway implementation."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional
from urllib.parse import quote

import httpx

from umpire.domain.entities.errors import BackendRequestFailedError, MetricNotFoundError
from umpire.domain.entities.time_series import MetricSample
from umpire.domain.gateways.metric_source import IMetricSource
from umpire.shared import get_logger

logger = get_logger(__name__)


class LibratoGateway(IMetricSource):
    """Metric source reading summarized measurements from Librato."""

    name = "librato"

    def __init__(
        self,
        base_url: str,
        email: Optional[str],
        api_token: Optional[str],
        timeout: float = 10.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._email = email
        self._api_token = api_token
        self._timeout = timeout
        self._clock = clock

    async def fetch(self, metric: str, range_seconds: int) -> List[MetricSample]:
        if not self._email or not self._api_token:
            logger.error("librato.credentials_missing", metric=metric)
            raise BackendRequestFailedError(self.name, "credentials not configured")

        url = f"{self._base_url}/v1/metrics/{quote(metric, safe='')}"
        params = {
            "start_time": str(int(self._clock()) - range_seconds),
            "summarize_sources": "true",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, auth=(self._email, self._api_token)
            ) as client:
                response = await client.get(url, params=params)
                if response.status_code == httpx.codes.NOT_FOUND:
                    data = None
                else:
                    response.raise_for_status()
                    data = response.json()

        except httpx.HTTPStatusError as exc:
            logger.error(
                "librato.http_error",
                metric=metric,
                status_code=exc.response.status_code,
                response_text=exc.response.text,
            )
            raise BackendRequestFailedError(
                self.name, f"HTTP error {exc.response.status_code}"
            ) from exc
        except httpx.RequestError as exc:
            logger.error("librato.request_error", metric=metric, error=str(exc))
            raise BackendRequestFailedError(
                self.name, str(exc) or type(exc).__name__
            ) from exc
        except ValueError as exc:
            logger.error("librato.invalid_json", metric=metric, error=str(exc))
            raise BackendRequestFailedError(self.name, "invalid JSON response") from exc

        if data is None:
            raise MetricNotFoundError(metric)
        return self._parse_measurements(data, metric)

    def _parse_measurements(self, data: Any, metric: str) -> List[MetricSample]:
        if not isinstance(data, dict):
            raise BackendRequestFailedError(self.name, "unexpected response format")

        measurements = data.get("measurements") or {}
        series = measurements.get("all") or []

        samples: List[MetricSample] = []
        for entry in series:
            raw_value = entry.get("value") if isinstance(entry, dict) else None
            if raw_value is None:
                continue
            try:
                value = float(raw_value)
            except (TypeError, ValueError):
                logger.warning(
                    "librato.value_conversion_failed", value=raw_value, metric=metric
                )
                continue

            measure_time = entry.get("measure_time")
            timestamp = (
                datetime.fromtimestamp(measure_time, tz=timezone.utc)
                if isinstance(measure_time, (int, float))
                else None
            )
            samples.append(MetricSample(value=value, timestamp=timestamp))

        return samples
