"""
Global middleware and exception handlers.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from auth.errors import AuthError, UnexpectedFailure, ValidationError

logger = logging.getLogger(__name__)


def register_middleware(app: FastAPI) -> None:
    """Attach any app-level middleware."""

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug(
            "%s %s %d — %.3fs",
            request.method, request.url.path, response.status_code, elapsed,
        )
        return response


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    """Render ``AuthError`` subclasses and body validation failures as JSON."""

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
        content = {"message": exc.message}
        if debug and isinstance(exc, UnexpectedFailure) and exc.detail:
            content["detail"] = exc.detail
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def body_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected body for %s: %s", request.url.path, exc.errors())
        error = ValidationError()
        return JSONResponse(status_code=error.status_code, content={"message": error.message})
