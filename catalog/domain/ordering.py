"""Types shared by ordered children (modules in a language, materials in a module)."""

from dataclasses import dataclass
from typing import Protocol

from catalog.domain.common import RecordMetadata


class OrderedItem(Protocol):
    @property
    def id(self) -> str: ...

    @property
    def parent_id(self) -> str: ...

    order: int
    meta: RecordMetadata

    def reorder(self, new_order: int) -> None: ...


@dataclass(frozen=True)
class OrderChange:
    """One ``(child id, new order)`` pair of a reorder batch."""

    id: str
    order: int
