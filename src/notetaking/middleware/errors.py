"""Exception handlers mapping failures to ErrorResponse bodies."""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.errors import ErrorKind, ServiceError, STATUS_CODES, TITLES
from ..core.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _error_response(status_code: int, error: str, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def format_validation_errors(errors) -> List[Dict[str, Any]]:
    """Flatten pydantic error entries into ``{field, message}`` pairs."""
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        formatted.append({"field": ".".join(loc) or "body", "message": error.get("msg", "")})
    return formatted


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.kind is ErrorKind.INTERNAL:
        logger.error(f"Internal error on {request.method} {request.url.path}: {exc.message}")
    return _error_response(exc.status_code, exc.title, exc.message, exc.details)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_validation_errors(exc.errors())
    logger.info(f"Validation failed on {request.method} {request.url.path}: {errors}")
    return _error_response(
        STATUS_CODES[ErrorKind.VALIDATION],
        TITLES[ErrorKind.VALIDATION],
        "Request validation failed",
        {"errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return _error_response(
        STATUS_CODES[ErrorKind.INTERNAL],
        TITLES[ErrorKind.INTERNAL],
        "An unexpected error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on app."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
