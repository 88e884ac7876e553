"""Input validation for user operations.

These are pure functions: each takes the raw, transport-agnostic payload and
returns a typed, validated object or raises ``ValidationError`` listing every
violated field. The user service calls them itself, so its contract holds no
matter which transport sits in front of it.
"""

import uuid
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import ValidationError
from app.user.exceptions import InvalidUserIdError
from app.user.schemas import UserCreate, UserQuery, UserUpdate

VALIDATION_MESSAGE = "Validation error"

M = TypeVar("M", bound=BaseModel)


def _field_messages(exc: PydanticValidationError) -> list[str]:
    messages = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return messages


def _validate(model: type[M], payload: Any) -> M:
    if isinstance(payload, model):
        return payload
    if isinstance(payload, Mapping):
        payload = dict(payload)
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(VALIDATION_MESSAGE, errors=_field_messages(e)) from e


def validate_user_create(payload: Mapping[str, Any] | UserCreate) -> UserCreate:
    return _validate(UserCreate, payload)


def validate_user_update(payload: Mapping[str, Any] | UserUpdate) -> UserUpdate:
    return _validate(UserUpdate, payload)


def validate_user_query(params: Mapping[str, Any] | UserQuery | None) -> UserQuery:
    """Validate list parameters; ``None`` means all defaults."""
    return _validate(UserQuery, {} if params is None else params)


def parse_user_id(raw: str | uuid.UUID) -> uuid.UUID:
    """Parse a canonical hyphenated UUID (either case).

    Braces, ``urn:uuid:`` prefixes and bare hex are rejected.
    """
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        parsed = uuid.UUID(str(raw))
    except ValueError as e:
        raise InvalidUserIdError() from e
    if str(parsed) != str(raw).lower():
        raise InvalidUserIdError()
    return parsed
