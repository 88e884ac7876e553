"""User domain models.

SQLModel table definition for User.
"""

import uuid
from enum import Enum

from sqlmodel import Field, SQLModel

from app.core.mixins import TimestampMixin


class UserRole(str, Enum):
    """Role stored on a user record.

    Roles are informational only; nothing in the service enforces them.
    """

    admin = "admin"
    user = "user"


class User(TimestampMixin, SQLModel, table=True):
    """User database model.

    Note: password_hash is internal-only and must never be exposed in
    API responses. Use ``UserRead`` for anything leaving the service.
    """

    __tablename__: str = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(index=True, unique=True, max_length=255)
    password_hash: str = Field(max_length=255)
    age: int | None = Field(default=None)
    phone: str | None = Field(default=None, max_length=20)
    role: UserRole = Field(default=UserRole.user, max_length=20)
    is_active: bool = Field(default=True, index=True)
