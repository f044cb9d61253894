from __future__ import annotations

import base64

import pytest
from fastapi import HTTPException, Request
from fastapi.security import HTTPBasicCredentials

from umpire.presentation.security import (
    BasicAuthGuard,
    OptionalHTTPBasic,
    require_api_key,
)


def _credentials(password: str, username: str = "") -> HTTPBasicCredentials:
    return HTTPBasicCredentials(username=username, password=password)


def test_guard_accepts_matching_password_with_any_username() -> None:
    guard = BasicAuthGuard("s3cret")

    assert guard.is_authorized(_credentials("s3cret"))
    assert guard.is_authorized(_credentials("s3cret", username="ops"))


def test_guard_rejects_wrong_or_missing_password() -> None:
    guard = BasicAuthGuard("s3cret")

    assert not guard.is_authorized(_credentials("nope"))
    assert not guard.is_authorized(None)


@pytest.mark.parametrize("api_key", [None, ""])
def test_guard_without_api_key_rejects_everything(api_key) -> None:
    guard = BasicAuthGuard(api_key)

    assert not guard.is_configured
    assert not guard.is_authorized(_credentials(""))


@pytest.mark.asyncio
async def test_require_api_key_raises_401_with_challenge() -> None:
    with pytest.raises(HTTPException) as exc_info:
        await require_api_key(credentials=None, guard=BasicAuthGuard("s3cret"))

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "not authorized"
    assert exc_info.value.headers == {
        "WWW-Authenticate": 'Basic realm="Restricted Area"'
    }


@pytest.mark.asyncio
async def test_require_api_key_passes_valid_credentials() -> None:
    result = await require_api_key(
        credentials=_credentials("s3cret"), guard=BasicAuthGuard("s3cret")
    )

    assert result is None


def _request(authorization: str | None) -> Request:
    headers = []
    if authorization is not None:
        headers.append((b"authorization", authorization.encode("latin-1")))
    return Request(
        {"type": "http", "method": "GET", "path": "/check", "headers": headers}
    )


def _basic(raw: bytes) -> str:
    return "Basic " + base64.b64encode(raw).decode("ascii")


@pytest.mark.asyncio
async def test_basic_scheme_reads_utf8_credentials() -> None:
    scheme = OptionalHTTPBasic(auto_error=False)

    credentials = await scheme(_request(_basic("ops:pässwörd".encode("utf-8"))))

    assert credentials == HTTPBasicCredentials(username="ops", password="pässwörd")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "authorization",
    [
        None,
        "Basic !!!notb64",
        _basic(b"no-separator"),
        _basic(b"ops:\xff\xfe"),
        "Bearer abc",
        "Basic",
    ],
)
async def test_basic_scheme_treats_unreadable_headers_as_absent(authorization) -> None:
    scheme = OptionalHTTPBasic(auto_error=False)

    assert await scheme(_request(authorization)) is None
