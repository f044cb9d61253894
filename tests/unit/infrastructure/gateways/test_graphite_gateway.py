from __future__ import annotations

from datetime import timezone

import httpx
import pytest

from umpire.domain.entities.errors import BackendRequestFailedError, MetricNotFoundError
from umpire.infrastructure.gateways.graphite_gateway import GraphiteGateway


class _StubResponse:
    def __init__(self, status_code: int, json_data=None, invalid_json: bool = False):
        self.status_code = status_code
        self._json = json_data
        self._invalid_json = invalid_json
        self.text = "error"

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value")
        return self._json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            request = httpx.Request("GET", "http://graphite")
            response = httpx.Response(self.status_code, request=request, text=self.text)
            raise httpx.HTTPStatusError("error", request=request, response=response)


class _StubAsyncClient:
    def __init__(self, response=None, error: Exception | None = None):
        self._response = response
        self._error = error
        self.requests: list = []

    async def __aenter__(self) -> "_StubAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url, params=None, **kwargs):
        self.requests.append((url, params))
        if self._error is not None:
            raise self._error
        return self._response


def _patch_client(monkeypatch, client: _StubAsyncClient) -> None:
    monkeypatch.setattr("httpx.AsyncClient", lambda timeout: client)


@pytest.mark.asyncio
async def test_fetch_parses_first_series_and_drops_nulls(monkeypatch) -> None:
    payload = [
        {
            "target": "cpu.load",
            "datapoints": [[70, 1700000000], [None, 1700000010], [50.5, 1700000020]],
        },
        {"target": "other", "datapoints": [[999, 1700000000]]},
    ]
    client = _StubAsyncClient(_StubResponse(200, payload))
    _patch_client(monkeypatch, client)

    gateway = GraphiteGateway("http://graphite/")
    samples = await gateway.fetch("cpu.load", 60)

    assert [sample.value for sample in samples] == [70.0, 50.5]
    assert samples[0].timestamp.tzinfo == timezone.utc
    assert client.requests == [
        (
            "http://graphite/render/",
            {"target": "cpu.load", "format": "json", "from": "-60s"},
        )
    ]


@pytest.mark.asyncio
async def test_fetch_unknown_target_raises_not_found(monkeypatch) -> None:
    _patch_client(monkeypatch, _StubAsyncClient(_StubResponse(200, [])))

    with pytest.raises(MetricNotFoundError):
        await GraphiteGateway("http://graphite").fetch("missing.metric", 60)


@pytest.mark.asyncio
async def test_fetch_all_null_datapoints_is_empty(monkeypatch) -> None:
    payload = [{"target": "cpu.load", "datapoints": [[None, 1], [None, 2]]}]
    _patch_client(monkeypatch, _StubAsyncClient(_StubResponse(200, payload)))

    samples = await GraphiteGateway("http://graphite").fetch("cpu.load", 60)

    assert samples == []


@pytest.mark.asyncio
async def test_fetch_skips_malformed_datapoints(monkeypatch) -> None:
    payload = [{"target": "cpu", "datapoints": [[1, 1], "junk", ["x", 2], [3]]}]
    _patch_client(monkeypatch, _StubAsyncClient(_StubResponse(200, payload)))

    samples = await GraphiteGateway("http://graphite").fetch("cpu", 60)

    assert [sample.value for sample in samples] == [1.0]


@pytest.mark.asyncio
async def test_fetch_http_error_raises_backend_failure(monkeypatch) -> None:
    _patch_client(monkeypatch, _StubAsyncClient(_StubResponse(500)))

    with pytest.raises(BackendRequestFailedError):
        await GraphiteGateway("http://graphite").fetch("cpu.load", 60)


@pytest.mark.asyncio
async def test_fetch_timeout_raises_backend_failure(monkeypatch) -> None:
    timeout = httpx.ReadTimeout(
        "timed out", request=httpx.Request("GET", "http://graphite")
    )
    _patch_client(monkeypatch, _StubAsyncClient(error=timeout))

    with pytest.raises(BackendRequestFailedError) as exc_info:
        await GraphiteGateway("http://graphite", timeout=0.5).fetch("cpu.load", 60)

    assert exc_info.value.backend == "graphite"


@pytest.mark.asyncio
async def test_fetch_invalid_json_raises_backend_failure(monkeypatch) -> None:
    _patch_client(
        monkeypatch, _StubAsyncClient(_StubResponse(200, invalid_json=True))
    )

    with pytest.raises(BackendRequestFailedError):
        await GraphiteGateway("http://graphite").fetch("cpu.load", 60)


@pytest.mark.asyncio
async def test_fetch_unexpected_shape_raises_backend_failure(monkeypatch) -> None:
    _patch_client(
        monkeypatch, _StubAsyncClient(_StubResponse(200, {"error": "nope"}))
    )

    with pytest.raises(BackendRequestFailedError):
        await GraphiteGateway("http://graphite").fetch("cpu.load", 60)
