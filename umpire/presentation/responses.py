"""Response classes shared by every route."""

from typing import Any

from fastapi.responses import JSONResponse


class JSONLineResponse(JSONResponse):
    """Compact JSON terminated by a newline, so probes and curl print cleanly."""

    def render(self, content: Any) -> bytes:
        return super().render(content) + b"\n"
