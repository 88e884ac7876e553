"""User domain schemas.

Request and response schemas for user operations.

Security notes:
- password_hash is internal-only, never exposed in responses
- UserRead has no password field at all, so it cannot leak through a response
- UserUpdate does not accept a password
"""

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Annotated, Self

from pydantic import (
    ConfigDict,
    EmailStr,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from app.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from app.models.responses import CamelModel, Pagination
from app.user.models import UserRole

PHONE_PATTERN = r"^\+?[1-9]\d{1,14}$"

Name = Annotated[str, Field(min_length=2, max_length=100)]
Age = Annotated[int, Field(ge=1, le=150)]
Phone = Annotated[str, Field(pattern=PHONE_PATTERN)]
Password = Annotated[str, Field(min_length=6, max_length=255)]


class UserInput(CamelModel):
    """Base for client-supplied payloads. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", populate_by_name=False)


class UserCreate(UserInput):
    """Payload for registering a user."""

    first_name: Name
    last_name: Name
    email: EmailStr
    password: Password
    age: Age | None = None
    phone: Phone | None = None
    role: UserRole = UserRole.user


class UserUpdate(UserInput):
    """Partial update payload.

    Only the fields present in the request are applied. ``age`` and
    ``phone`` may be sent as null to clear them; the other fields may not.
    """

    first_name: Name | None = None
    last_name: Name | None = None
    email: EmailStr | None = None
    age: Age | None = None
    phone: Phone | None = None
    role: UserRole | None = None
    is_active: bool | None = None

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> Self:
        nullable = {"age", "phone"}
        for name in sorted(self.model_fields_set - nullable):
            if getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} may not be null")
        return self


class UserQuery(UserInput):
    """Filter and pagination parameters for listing users."""

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    search: str | None = Field(default=None, max_length=255)
    role: UserRole | None = None
    is_active: bool | None = None

    @field_validator("search", mode="before")
    @classmethod
    def blank_search_means_no_filter(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class UserRead(CamelModel):
    """Response schema for a user record.

    This class should ONLY contain fields that are safe to expose.
    Never add password_hash here.
    """

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    age: int | None
    phone: str | None
    role: UserRole
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_datetime(self, value: datetime) -> str:
        """Format datetime as ISO 8601 string in UTC.

        Converts datetime to UTC timezone and formats with Z suffix
        (e.g. 2026-01-19T12:34:56Z).
        """
        # Convert to UTC if timezone-aware, otherwise assume UTC
        if value.tzinfo is not None:
            utc_value = value.astimezone(UTC)
        else:
            # Naive datetime - SQLite hands timestamps back without tzinfo
            utc_value = value.replace(tzinfo=UTC)

        # Normalize to whole seconds and format with Z suffix
        return utc_value.replace(microsecond=0).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class UserPage:
    """One page of users plus the pagination metadata for it."""

    items: list[UserRead]
    pagination: Pagination
