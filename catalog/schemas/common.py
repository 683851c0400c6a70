"""Shared pydantic schemas: camelCase base model and response envelopes."""

from datetime import datetime, timezone
from typing import Any, Generic, Literal, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from catalog.domain.pagination import PageResult, PaginationMeta

T = TypeVar("T")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Serializes with camelCase keys, accepts camelCase or snake_case input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseMeta(BaseModel):
    timestamp: datetime = Field(default_factory=_now)
    version: str = "v1"


class PaginationResponse(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_meta(cls, meta: PaginationMeta) -> "PaginationResponse":
        return cls(
            page=meta.page,
            limit=meta.limit,
            total=meta.total,
            total_pages=meta.total_pages,
            has_next=meta.has_next,
            has_prev=meta.has_prev,
        )


class SuccessResponse(BaseModel, Generic[T]):
    """Envelope for a single resource."""

    status: Literal["success"] = "success"
    data: T
    meta: ResponseMeta = Field(default_factory=ResponseMeta)


class PaginatedResponse(BaseModel, Generic[T]):
    """Envelope for a page of resources."""

    status: Literal["success"] = "success"
    data: list[T]
    pagination: PaginationResponse
    meta: ResponseMeta = Field(default_factory=ResponseMeta)

    @classmethod
    def from_result(cls, result: PageResult[T]) -> "PaginatedResponse[T]":
        return cls(data=result.data, pagination=PaginationResponse.from_meta(result.pagination))


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Any = None


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    error: ErrorBody
    meta: ResponseMeta = Field(default_factory=ResponseMeta)


class ReorderItem(CamelModel):
    """One entry of a reorder request."""

    id: UUID
    order: int = Field(..., ge=0)
