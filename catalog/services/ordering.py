"""Reordering of children within one parent.

Used for modules inside a language and materials inside a module. Every
change is validated before anything is written, and the writes go out as
one batch inside the caller's transaction.
"""

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Generic, TypeVar

from catalog.domain.ordering import OrderChange, OrderedItem
from catalog.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=OrderedItem)


class ReorderEngine(Generic[C]):
    """Validate-then-apply reorder for one parent/child relationship."""

    def __init__(
        self,
        find_child: Callable[[str], Awaitable[C | None]],
        apply_batch: Callable[[Sequence[C]], Awaitable[None]],
        child_label: str,
        parent_label: str,
        rollback: Callable[[], Awaitable[None]] | None = None,
    ):
        self._find_child = find_child
        self._apply_batch = apply_batch
        self._rollback = rollback
        self.child_label = child_label
        self.parent_label = parent_label

    async def _validate(self, parent_id: str, changes: Sequence[OrderChange]) -> list[tuple[C, int]]:
        resolved = []
        for change in changes:
            child = await self._find_child(change.id)
            if child is None:
                raise NotFoundError(
                    f"{self.child_label} with ID {change.id} not found",
                    {"id": change.id},
                )
            if child.parent_id != parent_id:
                raise ValidationError(
                    f"{self.child_label} {change.id} does not belong to "
                    f"{self.parent_label.lower()} {parent_id}",
                    {
                        "id": change.id,
                        f"{self.parent_label.lower()}Id": parent_id,
                        "actualParentId": child.parent_id,
                    },
                )
            resolved.append((child, change.order))
        return resolved

    async def reorder(self, parent_id: str, changes: Sequence[OrderChange]) -> None:
        """Apply all order changes or none of them."""
        resolved = await self._validate(parent_id, changes)
        if not resolved:
            return

        children = []
        for child, new_order in resolved:
            child.reorder(new_order)
            children.append(child)

        try:
            await self._apply_batch(children)
        except Exception:
            logger.error(
                "Reorder of %d %s item(s) under %s %s failed, rolling back",
                len(children),
                self.child_label.lower(),
                self.parent_label.lower(),
                parent_id,
            )
            if self._rollback is not None:
                await self._rollback()
            raise

        logger.info(
            "Reordered %d %s item(s) under %s %s",
            len(children),
            self.child_label.lower(),
            self.parent_label.lower(),
            parent_id,
        )
