"""
Exception handlers shared by all routes.

- request validation failures are client errors (400), not FastAPI's default 422
- database failures become a generic 500 and are logged with traceback
"""

from __future__ import annotations

import asyncio
import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

DATABASE_ERRORS: tuple[type[Exception], ...] = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


def _validation_message(exc: RequestValidationError) -> str:
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        if error.get("type") == "json_invalid":
            return "Invalid JSON body."
        if loc:
            return f"Invalid field '{loc[-1]}': {error.get('msg', 'invalid value')}."
        return f"Invalid request body: {error.get('msg', 'invalid value')}."
    return "Invalid request."


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _validation_message(exc)},
    )


async def database_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "database_error method=%s path=%s error=%s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    for exc_type in DATABASE_ERRORS:
        app.add_exception_handler(exc_type, database_error_handler)
