"""Global exception handlers for consistent error responses.

This module registers exception handlers that convert all exceptions
to the unified ``{"success": false, "message": ...}`` envelope.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import AppException, RouteNotFoundError, ValidationError

logger = logging.getLogger("app.exception")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle all AppException subclasses."""
    extra = {
        "method": request.method,
        "path": request.url.path,
        "status_code": exc.status_code,
        "error_type": exc.error_type,
    }
    if exc.status_code >= 500:
        logger.error("AppException: %s - %s", exc.error_type, exc.message, extra=extra)
        # Internal details stay in the log
        return _error_response(exc.status_code, "Internal server error")

    logger.info("AppException: %s - %s", exc.error_type, exc.message, extra=extra)
    return _error_response(exc.status_code, exc.message)


def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTPException raised by routing (unknown path, wrong method)."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error_response(exc.status_code, RouteNotFoundError().message)
    return _error_response(exc.status_code, str(exc.detail))


def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request parsing errors (e.g. a body that is not a JSON object)."""
    messages = []
    for error in exc.errors():
        field = ".".join(
            str(loc) for loc in error["loc"] if loc not in ("body", "query", "path")
        )
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])

    error = ValidationError("Validation error", errors=messages)
    return _error_response(error.status_code, error.message)


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors."""
    logger.error(
        "Unhandled exception: %s %s - %s",
        request.method,
        request.url.path,
        exc,
        extra={"method": request.method, "path": request.url.path, "status_code": 500},
        exc_info=exc,
    )
    return _error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
