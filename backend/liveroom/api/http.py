"""Unified response envelope and HTTP exception handlers."""

from __future__ import annotations

from enum import IntEnum
import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class StatusCode(IntEnum):
    """Envelope status kinds carried in the `code` field."""

    OK = 0
    PARAM_ERROR = 1
    SERVER_ERROR = 2


def api_ok(**payload: Any) -> dict[str, Any]:
    """Build a success envelope with optional payload keys."""
    return {"code": int(StatusCode.OK), **payload}


def api_error(*, code: StatusCode, desc: str) -> dict[str, Any]:
    """Build an error envelope."""
    return {"code": int(code), "desc": desc}


def describe_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Render every failed field as `field: message`, joined by `; `."""
    parts = []
    for error in errors:
        loc = [str(item) for item in error.get("loc", ()) if item != "body"]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "invalid request"


async def handle_http_exception(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unify HTTP errors to the {code,desc} envelope."""
    if isinstance(exc.detail, dict) and {"code", "desc"} <= set(exc.detail):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail,
            headers=getattr(exc, "headers", None),
        )

    code = StatusCode.SERVER_ERROR if exc.status_code >= 500 else StatusCode.PARAM_ERROR
    return JSONResponse(
        status_code=exc.status_code,
        content=api_error(code=code, desc=str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request binding failures as PARAM_ERROR with HTTP 200."""
    desc = describe_validation_errors(list(exc.errors()))
    logger.info("rejected %s %s: %s", request.method, request.url.path, desc)
    return JSONResponse(status_code=200, content=api_error(code=StatusCode.PARAM_ERROR, desc=desc))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: log the fault and answer with a generic server error."""
    logger.exception("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=api_error(code=StatusCode.SERVER_ERROR, desc="internal server error"),
    )


__all__ = [
    "StatusCode",
    "api_error",
    "api_ok",
    "describe_validation_errors",
    "handle_http_exception",
    "handle_unexpected_error",
    "handle_validation_error",
]
