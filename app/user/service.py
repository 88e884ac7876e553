"""User record store.

Owns the user lifecycle: validation, email uniqueness, password hashing,
filtered/paginated listing, updates, hard delete and deactivation. Every
operation runs against the injected session; storage failures never escape
as raw SQLAlchemy errors.
"""

import logging
import math
import uuid
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, and_, col, func, or_, select

from app.core.exceptions import InternalError
from app.core.mixins import utc_now
from app.core.security import PasswordHasher
from app.models.responses import Pagination
from app.user.exceptions import EmailExistsError, UserNotFoundError
from app.user.models import User
from app.user.schemas import UserCreate, UserPage, UserQuery, UserRead, UserUpdate
from app.user.validation import (
    parse_user_id,
    validate_user_create,
    validate_user_query,
    validate_user_update,
)

logger = logging.getLogger("app.user")


class UserService:
    """CRUD operations over user records.

    Args:
        session: Database session scoped to the current request
        hasher: Password hasher used before a record is persisted
    """

    def __init__(self, session: Session, hasher: PasswordHasher):
        self.session = session
        self.hasher = hasher

    @contextmanager
    def _storage(self, action: str) -> Iterator[None]:
        """Classify storage failures raised inside the block.

        A unique-constraint violation can only come from ``users.email``, so
        it surfaces as ``EmailExistsError`` even when it beat the pre-check.
        """
        try:
            yield
        except IntegrityError as e:
            self.session.rollback()
            raise EmailExistsError() from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Storage failure while trying to %s", action, exc_info=True)
            raise InternalError(f"Failed to {action}") from e

    def _email_taken(self, email: str, exclude_id: uuid.UUID | None = None) -> bool:
        conditions = [col(User.email) == email]
        if exclude_id is not None:
            conditions.append(col(User.id) != exclude_id)
        statement = select(User.id).where(and_(*conditions))
        return self.session.exec(statement).first() is not None

    def _get(self, user_id: str | uuid.UUID) -> User:
        pk = parse_user_id(user_id)
        with self._storage("load user"):
            user = self.session.get(User, pk)
        if user is None:
            raise UserNotFoundError()
        return user

    def create_user(self, payload: Mapping[str, Any] | UserCreate) -> UserRead:
        """Register a new user.

        Raises:
            ValidationError: If any field violates its constraints
            EmailExistsError: If the email is already registered
        """
        data = validate_user_create(payload)

        with self._storage("create user"):
            if self._email_taken(data.email):
                raise EmailExistsError()

            user = User(
                first_name=data.first_name,
                last_name=data.last_name,
                email=data.email,
                password_hash=self.hasher.hash(data.password),
                age=data.age,
                phone=data.phone,
                role=data.role,
                is_active=True,
            )
            user.updated_at = user.created_at
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)

        logger.info("User created", extra={"user_id": str(user.id)})
        return UserRead.model_validate(user)

    def list_users(self, params: Mapping[str, Any] | UserQuery | None = None) -> UserPage:
        """List users matching the filters, newest first.

        ``search`` is a case-insensitive substring match against first name,
        last name or email; it is ANDed with the ``role`` and ``isActive``
        filters. Pages past the end are empty rather than an error.
        """
        query = validate_user_query(params)

        conditions = []
        if query.search is not None:
            term = query.search
            conditions.append(
                or_(
                    col(User.first_name).icontains(term, autoescape=True),
                    col(User.last_name).icontains(term, autoescape=True),
                    col(User.email).icontains(term, autoescape=True),
                )
            )
        if query.role is not None:
            conditions.append(col(User.role) == query.role)
        if query.is_active is not None:
            conditions.append(col(User.is_active) == query.is_active)

        count_statement = select(func.count()).select_from(User).where(*conditions)
        offset = (query.page - 1) * query.limit

        users: Sequence[User] = []
        with self._storage("list users"):
            total = self.session.exec(count_statement).one()
            # Pages past the end never reach OFFSET, which may overflow the
            # database's integer type.
            if offset < total:
                statement = (
                    select(User)
                    .where(*conditions)
                    .order_by(col(User.created_at).desc(), col(User.id).desc())
                    .offset(offset)
                    .limit(query.limit)
                )
                users = self.session.exec(statement).all()

        return UserPage(
            items=[UserRead.model_validate(user) for user in users],
            pagination=Pagination(
                page=query.page,
                total_pages=math.ceil(total / query.limit),
                total=total,
                limit=query.limit,
            ),
        )

    def get_user(self, user_id: str | uuid.UUID) -> UserRead:
        return UserRead.model_validate(self._get(user_id))

    def update_user(
        self, user_id: str | uuid.UUID, payload: Mapping[str, Any] | UserUpdate
    ) -> UserRead:
        """Apply a partial update; fields absent from the payload are untouched.

        Raises:
            ValidationError: If the id or any supplied field is invalid
            UserNotFoundError: If no user has this id
            EmailExistsError: If the new email belongs to another user
        """
        user, changes = self._apply_update(user_id, payload, action="update user")
        logger.info(
            "User updated (%s)",
            ", ".join(sorted(changes)) or "no fields",
            extra={"user_id": str(user.id)},
        )
        return UserRead.model_validate(user)

    def _apply_update(
        self,
        user_id: str | uuid.UUID,
        payload: Mapping[str, Any] | UserUpdate,
        *,
        action: str,
    ) -> tuple[User, dict[str, Any]]:
        pk = parse_user_id(user_id)
        changes = validate_user_update(payload).model_dump(exclude_unset=True)
        user = self._get(pk)

        with self._storage(action):
            new_email = changes.get("email")
            if new_email is not None and new_email != user.email:
                if self._email_taken(new_email, exclude_id=user.id):
                    raise EmailExistsError()

            for key, value in changes.items():
                setattr(user, key, value)
            user.updated_at = utc_now()

            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)

        return user, changes

    def delete_user(self, user_id: str | uuid.UUID) -> None:
        """Permanently remove a user."""
        user = self._get(user_id)
        with self._storage("delete user"):
            self.session.delete(user)
            self.session.commit()
        logger.info("User deleted", extra={"user_id": str(user.id)})

    def deactivate_user(self, user_id: str | uuid.UUID) -> None:
        """Soft delete: same as updating ``isActive`` to false."""
        user, _ = self._apply_update(
            user_id,
            UserUpdate.model_validate({"isActive": False}),
            action="deactivate user",
        )
        logger.info("User deactivated", extra={"user_id": str(user.id)})
