"""
Common Schemas

Building blocks shared by the admin and reader APIs: the ORM-aware base
schema, pagination, the error envelope and the health payload.

Admin list endpoints all answer in one shape:

    {"data": [...], "pagination": {"page": 2, "per_page": 20, "total": 45, "total_pages": 3}}
"""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from docshelf import __version__


ItemT = TypeVar("ItemT")


class BaseSchema(BaseModel):
    """Response schema that can be validated straight from a model instance."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class PaginationParams(BaseModel):
    """``?page=&per_page=`` query parameters, 1-based."""

    page: int = Field(default=1, ge=1, description="Page number, starting at 1")
    per_page: int = Field(default=20, ge=1, le=100, description="Items per page")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page


class PaginationMeta(BaseModel):
    page: int
    per_page: int
    total: int
    total_pages: int


class PaginatedResponse(BaseModel, Generic[ItemT]):
    """One page of a list endpoint plus where it sits in the whole."""

    data: list[ItemT]
    pagination: PaginationMeta

    @classmethod
    def build(
        cls, items: Sequence[ItemT], params: PaginationParams, total: int
    ) -> "PaginatedResponse[ItemT]":
        pages = -(-total // params.per_page)
        meta = PaginationMeta(
            page=params.page, per_page=params.per_page, total=total, total_pages=pages
        )
        return cls(data=list(items), pagination=meta)


class ErrorDetail(BaseModel):
    code: str = Field(description="Machine-readable code, e.g. NOT_FOUND")
    message: str
    details: Optional[dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response raised by the application."""

    error: ErrorDetail


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = "docshelf"
    version: str = __version__
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
