"""Single-branch filter selection and pagination for list endpoints.

Branches are registered in precedence order and only the first one whose
condition holds is used; filters are never combined. A filtered branch
loads its whole matching set and slices the page in memory. Only the
unfiltered listing pushes skip/limit down to storage.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from catalog.domain.pagination import PageRequest, PageResult, PaginationMeta

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class FilterBranch(Generic[T]):
    name: str
    active: bool
    fetch: Callable[[], Awaitable[list[T]]]


class FilterChain(Generic[T]):
    """Ordered list of filter branches for one listing."""

    def __init__(self, resource: str):
        self.resource = resource
        self._branches: list[FilterBranch[T]] = []

    def when(
        self, active: bool, name: str, fetch: Callable[[], Awaitable[list[T]]]
    ) -> "FilterChain[T]":
        self._branches.append(FilterBranch(name=name, active=active, fetch=fetch))
        return self

    def selected(self) -> FilterBranch[T] | None:
        for branch in self._branches:
            if branch.active:
                return branch
        return None

    async def resolve(
        self,
        page: PageRequest,
        fetch_page: Callable[[int, int], Awaitable[list[T]]],
        count: Callable[[], Awaitable[int]],
    ) -> PageResult[T]:
        branch = self.selected()
        if branch is not None:
            logger.debug("Listing %s by %s", self.resource, branch.name)
            items = await branch.fetch()
            total = len(items)
            data = items[page.skip:page.skip + page.limit]
        else:
            logger.debug("Listing %s unfiltered", self.resource)
            data = await fetch_page(page.skip, page.limit)
            total = await count()

        return PageResult(data=data, pagination=PaginationMeta.from_total(page, total))
