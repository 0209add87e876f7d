"""
Exception handlers — the single place where errors become HTTP responses.

Status codes come from ``app.core.errors.status_for``; this module only
decides what the client gets to read and what gets logged.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import RatesError, InvalidStateError, status_for

logger = logging.getLogger(__name__)


async def rates_error_handler(request: Request, exc: RatesError) -> JSONResponse:
    """Map a ``RatesError`` to its status; internal details stay in the log."""
    status_code = status_for(exc)

    if isinstance(exc, InvalidStateError):
        logger.error(
            "Unusable data for %s %s: %s",
            request.method, request.url.path, exc.message,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status_code,
            content={"detail": "Internal server error"},
        )

    logger.info(
        "%s %s failed with %s (%s): %s",
        request.method, request.url.path, exc.kind.value, status_code, exc.message,
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


async def missing_parameter_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Answer 400 for a missing query parameter, naming it.

    Every other validation problem keeps FastAPI's default 422 response.
    """
    for error in exc.errors():
        loc = error.get("loc", ())
        if error.get("type") == "missing" and len(loc) == 2 and loc[0] == "query":
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"detail": f"{loc[1]} parameter is required in the path"},
            )
    return await request_validation_exception_handler(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RatesError, rates_error_handler)
    app.add_exception_handler(RequestValidationError, missing_parameter_handler)
