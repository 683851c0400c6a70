"""Page request and page result value types."""

import math
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from catalog.errors import ValidationError

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageRequest:
    """1-based page number and page size."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError("page must be >= 1", {"page": self.page})
        if not 1 <= self.limit <= MAX_LIMIT:
            raise ValidationError(
                f"limit must be between 1 and {MAX_LIMIT}", {"limit": self.limit}
            )

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PaginationMeta:
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_total(cls, request: PageRequest, total: int) -> "PaginationMeta":
        """Build metadata from the requested page; the page is never clamped."""
        total_pages = math.ceil(total / request.limit)
        return cls(
            page=request.page,
            limit=request.limit,
            total=total,
            total_pages=total_pages,
            has_next=request.page < total_pages,
            has_prev=request.page > 1,
        )


@dataclass
class PageResult(Generic[T]):
    data: list[T]
    pagination: PaginationMeta

    def map(self, fn: Callable[[T], U]) -> "PageResult[U]":
        return PageResult(data=[fn(item) for item in self.data], pagination=self.pagination)
