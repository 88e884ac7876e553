"""User domain router.

User management routes for CRUD operations. Handlers stay thin: the raw
payload goes straight to ``UserService``, which validates it itself, and the
result is wrapped in the response envelope.

Path operations are plain ``def`` so FastAPI runs them in its threadpool and
blocking database I/O in one request does not hold up the others.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Request, status

from app.core.constants import CommonResponses, Routes
from app.core.deps import UserServiceDep
from app.models.responses import ApiResponse, DataResponse, PageResponse
from app.user.schemas import UserRead

router = APIRouter(
    prefix=Routes.USER.prefix,
    tags=[Routes.USER.tag],
    responses={**CommonResponses.BAD_REQUEST},
)

UserPayload = Annotated[dict[str, Any], Body()]


@router.post(
    "",
    response_model=DataResponse[UserRead],
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.CONFLICT},
)
def create_user(payload: UserPayload, users: UserServiceDep):
    """Register a new user.

    Body: firstName, lastName, email, password, and optionally age, phone, role.
    """
    user = users.create_user(payload)
    return DataResponse(message="User created successfully", data=user)


@router.get("", response_model=PageResponse[UserRead])
def list_users(request: Request, users: UserServiceDep):
    """List users, newest first.

    Query: page, limit, search (name or email substring), role, isActive.
    """
    page = users.list_users(request.query_params)
    return PageResponse(
        message="Users retrieved successfully",
        data=page.items,
        pagination=page.pagination,
    )


@router.get(
    "/{user_id}",
    response_model=DataResponse[UserRead],
    responses={**CommonResponses.NOT_FOUND},
)
def get_user(user_id: str, users: UserServiceDep):
    """Get a user by ID."""
    user = users.get_user(user_id)
    return DataResponse(message="User retrieved successfully", data=user)


@router.put(
    "/{user_id}",
    response_model=DataResponse[UserRead],
    responses={**CommonResponses.NOT_FOUND, **CommonResponses.CONFLICT},
)
def update_user(user_id: str, payload: UserPayload, users: UserServiceDep):
    """Update a user by ID.

    Any subset of firstName, lastName, email, age, phone, role and isActive.
    The password cannot be changed here.
    """
    user = users.update_user(user_id, payload)
    return DataResponse(message="User updated successfully", data=user)


@router.delete(
    "/{user_id}",
    response_model=ApiResponse,
    responses={**CommonResponses.NOT_FOUND},
)
def delete_user(user_id: str, users: UserServiceDep):
    """Permanently delete a user."""
    users.delete_user(user_id)
    return ApiResponse(message="User deleted successfully")


@router.patch(
    "/{user_id}/deactivate",
    response_model=ApiResponse,
    responses={**CommonResponses.NOT_FOUND},
)
def deactivate_user(user_id: str, users: UserServiceDep):
    """Deactivate a user (soft delete). The record stays queryable."""
    users.deactivate_user(user_id)
    return ApiResponse(message="User deactivated successfully")
