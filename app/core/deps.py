"""Centralized dependency type aliases for FastAPI routes.

Import all dependencies from this single module:
    from app.core.deps import SessionDep, PasswordHasherDep, UserServiceDep
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from app.core.security import PasswordHasher, get_password_hasher
from app.db.engine import get_session
from app.user.service import UserService

# Database session (one per request, drawn from the app's engine)
SessionDep = Annotated[Session, Depends(get_session)]

# Password hashing primitive
PasswordHasherDep = Annotated[PasswordHasher, Depends(get_password_hasher)]


def get_user_service(session: SessionDep, hasher: PasswordHasherDep) -> UserService:
    return UserService(session, hasher)


# User record store bound to the request's session
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
