"""
Plain-text error responses.

- request validation failures (bad JSON, missing/invalid fields) -> 400
- HTTPException -> its own status, `detail` as the body
- storage failures -> 500 with a generic body; the driver message is logged only
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

STORAGE_ERRORS: tuple[type[BaseException], ...] = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
)


def unauthorized(detail: str = "Unauthorized") -> StarletteHTTPException:
    return StarletteHTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    messages: list[str] = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            messages.append("body is not valid JSON")
            continue
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        where = ".".join(loc) or "body"
        messages.append(f"{where}: {error.get('msg', 'invalid value')}")
    return "Bad request: " + ("; ".join(messages) or "invalid body")


async def validation_error_handler(_: Request, exc: RequestValidationError) -> PlainTextResponse:
    return PlainTextResponse(_describe_validation_error(exc), status_code=status.HTTP_400_BAD_REQUEST)


async def http_error_handler(_: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def storage_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error(
        "Storage failure on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    for exc_type in STORAGE_ERRORS:
        app.add_exception_handler(exc_type, storage_error_handler)
