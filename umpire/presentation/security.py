"""HTTP Basic authentication for the check endpoint."""

import base64
import binascii
import secrets
from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param

from umpire.shared import get_logger

logger = get_logger(__name__)

REALM = "Restricted Area"
NOT_AUTHORIZED = "not authorized"


class OptionalHTTPBasic(HTTPBasic):
    """Basic scheme that reports unreadable credentials as absent.

    Headers that are not valid base64, lack the ``:`` separator or are not
    UTF-8 yield None, so every rejection goes through ``require_api_key``.
    """

    async def __call__(  # type: ignore[override]
        self, request: Request
    ) -> Optional[HTTPBasicCredentials]:
        scheme, param = get_authorization_scheme_param(
            request.headers.get("Authorization")
        )
        if not param or scheme.lower() != "basic":
            return None
        try:
            decoded = base64.b64decode(param, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return None
        username, separator, password = decoded.partition(":")
        if not separator:
            return None
        return HTTPBasicCredentials(username=username, password=password)


_basic_scheme = OptionalHTTPBasic(auto_error=False, realm=REALM)


class BasicAuthGuard:
    """Accepts Basic credentials whose password is the configured API key.

    The username is ignored. Without a configured key nothing is accepted.
    """

    def __init__(self, api_key: Optional[str]) -> None:
        self._api_key = api_key or None

    @property
    def is_configured(self) -> bool:
        return self._api_key is not None

    def is_authorized(self, credentials: Optional[HTTPBasicCredentials]) -> bool:
        if self._api_key is None or credentials is None:
            return False
        return secrets.compare_digest(
            credentials.password.encode("utf-8"), self._api_key.encode("utf-8")
        )


@inject
async def require_api_key(
    credentials: Optional[HTTPBasicCredentials] = Depends(_basic_scheme),
    guard: BasicAuthGuard = Depends(Provide["basic_auth_guard"]),
) -> None:
    """FastAPI dependency rejecting requests that fail the Basic auth guard."""
    if guard.is_authorized(credentials):
        return

    logger.info("auth.rejected", credentials_provided=credentials is not None)
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=NOT_AUTHORIZED,
        headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
    )
