"""
App-wide constants for route configuration.

This module provides a single source of truth for route prefixes, tags,
pagination bounds and common response definitions for API routes.
"""

from dataclasses import dataclass
from typing import Any

from app.models.responses import ErrorResponse


@dataclass(frozen=True)
class RouteConfig:
    """Configuration for a route group."""

    prefix: str
    tag: str


class Routes:
    """Route configurations for all API endpoints."""

    USER = RouteConfig(prefix="/users", tag="users")
    HEALTH = RouteConfig(prefix="/health", tag="health")


# Pagination bounds for list endpoints
DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100


# Common response definitions for reuse across routers
# Use these when configuring APIRouter or individual endpoints
class CommonResponses:
    """Standard HTTP error response definitions for OpenAPI documentation."""

    BAD_REQUEST: dict[int, dict[str, Any]] = {
        400: {"description": "Invalid request data", "model": ErrorResponse}
    }
    NOT_FOUND: dict[int, dict[str, Any]] = {
        404: {"description": "Resource not found", "model": ErrorResponse}
    }
    CONFLICT: dict[int, dict[str, Any]] = {
        409: {"description": "Resource already exists", "model": ErrorResponse}
    }
