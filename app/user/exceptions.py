"""User domain exceptions.

User-related exceptions for invalid ids, not found and conflict scenarios.
"""

from app.core.exceptions import ConflictError, NotFoundError, ValidationError


class InvalidUserIdError(ValidationError):
    """Raised when a path id is not a syntactically valid UUID."""

    error_type = "invalid_user_id"

    def __init__(self, message: str = "Validation error: id must be a valid UUID"):
        super().__init__(message)


class UserNotFoundError(NotFoundError):
    """Raised when user cannot be found."""

    error_type = "user_not_found"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class EmailExistsError(ConflictError):
    """Raised when an email is already taken by another record."""

    error_type = "email_exists"

    def __init__(self, message: str = "User with this email already exists"):
        super().__init__(message)
