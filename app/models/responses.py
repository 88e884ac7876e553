"""Response envelope schemas for consistent API formatting.

Every response body, success or failure, is an envelope with a ``success``
flag so callers can branch on it alone.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(CamelModel):
    """Envelope without a payload (deletes, deactivation)."""

    success: bool = True
    message: str | None = None


class DataResponse(ApiResponse, Generic[DataT]):
    """Envelope carrying a single resource."""

    data: DataT


class Pagination(CamelModel):
    page: int
    total_pages: int
    total: int
    limit: int


class PageResponse(ApiResponse, Generic[DataT]):
    """Envelope carrying one page of resources."""

    data: list[DataT]
    pagination: Pagination


class ErrorResponse(CamelModel):
    """Standard error response schema.

    All API errors return this format for consistency.
    """

    success: bool = False
    message: str
