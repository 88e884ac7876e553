"""App-wide exception hierarchy.

This module provides a unified exception system with automatic HTTP status code
mapping and consistent error response formatting.
"""


class AppException(Exception):
    """Base exception for all application errors.

    All custom exceptions inherit from this class and define their own
    status_code and error_type for consistent API responses.
    """

    status_code: int = 500
    error_type: str = "internal_error"

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(message)


# Validation errors (400)
class ValidationError(AppException):
    """Raised when caller input is malformed or out of range.

    Carries the individual field messages in ``errors``; ``message`` is the
    human-readable concatenation of all of them.
    """

    status_code = 400
    error_type = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        errors: list[str] | None = None,
    ):
        self.errors = errors or []
        if errors:
            message = f"{message}: {', '.join(errors)}"
        super().__init__(message)


# Not found errors (404)
class NotFoundError(AppException):
    """Base class for resource not found errors."""

    status_code = 404
    error_type = "not_found"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class RouteNotFoundError(NotFoundError):
    """Raised when no route matches the request path."""

    error_type = "route_not_found"

    def __init__(self, message: str = "Route not found"):
        super().__init__(message)


# Conflict errors (409)
class ConflictError(AppException):
    """Base class for resource conflict errors."""

    status_code = 409
    error_type = "conflict"

    def __init__(self, message: str = "Resource conflict"):
        super().__init__(message)


# Internal errors (500)
class InternalError(AppException):
    """Raised for persistence or infrastructure faults."""

    status_code = 500
    error_type = "internal_error"

    def __init__(self, message: str = "An internal error occurred"):
        super().__init__(message)
