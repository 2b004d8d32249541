"""FastAPI application entrypoint."""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

import liveroom.runtime as runtime
from liveroom.api.http import handle_http_exception
from liveroom.api.http import handle_unexpected_error
from liveroom.api.http import handle_validation_error
from liveroom.api.routers import app_info
from liveroom.api.routers import rooms
from liveroom.api.routers import user
from liveroom.core.config import load_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    runtime.startup()
    logger.info("liveroom service started")
    yield
    runtime.shutdown()


app = FastAPI(title="liveroom", lifespan=lifespan)

# Middleware is fixed once the app is built; CORS origins are read here, not on startup().
app.add_middleware(
    CORSMiddleware,
    allow_origins=load_settings().cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, status_code, elapsed_ms)


app.add_exception_handler(StarletteHTTPException, handle_http_exception)
app.add_exception_handler(RequestValidationError, handle_validation_error)
app.add_exception_handler(Exception, handle_unexpected_error)

app.include_router(rooms.router)
app.include_router(user.router)
app.include_router(app_info.router)


__all__ = [
    "app",
    "lifespan",
]
