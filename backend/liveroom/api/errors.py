"""HTTP error mapping helpers for API routes."""

from __future__ import annotations

from typing import NoReturn

from fastapi import HTTPException

from liveroom.api.http import StatusCode
from liveroom.api.http import api_error


def raise_api_error(*, code: StatusCode, desc: str, status_code: int = 200) -> NoReturn:
    """Abort the request with an envelope; status errors travel in the body."""
    raise HTTPException(status_code=status_code, detail=api_error(code=code, desc=desc))


def raise_param_error(desc: str) -> NoReturn:
    raise_api_error(code=StatusCode.PARAM_ERROR, desc=desc)


def raise_server_error(desc: str, exc: Exception | None = None) -> NoReturn:
    """Report a downstream dependency failure."""
    raise HTTPException(
        status_code=200,
        detail=api_error(code=StatusCode.SERVER_ERROR, desc=desc),
    ) from exc
