"""Generic async repository over one ORM table.

Repositories speak domain entities on the outside and ORM rows on the
inside. They never commit: the request-scoped session owns the
transaction, repositories only flush.
"""

import uuid
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any, ClassVar, Generic, Literal, TypeVar

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.common import RecordMetadata
from catalog.domain.ordering import OrderedItem
from catalog.errors import NotFoundError
from catalog.models.base import Base

E = TypeVar("E")
R = TypeVar("R", bound=Base)

SortDirection = Literal["asc", "desc"]


def parse_id(value: str | uuid.UUID) -> uuid.UUID | None:
    """Convert an entity id to a UUID, or None if it is not a valid UUID."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


def as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on the way back; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def metadata_of(row: Any) -> RecordMetadata:
    return RecordMetadata(
        id=str(row.id),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SQLAlchemyRepository(ABC, Generic[E, R]):
    """CRUD operations shared by every entity repository."""

    row_type: ClassVar[type[Base]]
    entity_label: ClassVar[str] = "Entity"
    # Columns written by update(); identity and parent columns are left out.
    updatable_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, db: AsyncSession):
        self.db = db

    # Mapping

    @abstractmethod
    def to_domain(self, row: R) -> E: ...

    @abstractmethod
    def to_values(self, entity: E) -> dict[str, Any]:
        """Column values for inserting ``entity`` (timestamps excluded)."""

    def _default_order(self) -> list[Any]:
        row = self.row_type
        return [row.created_at, row.id]

    def _order_clause(self, order_by: Mapping[str, SortDirection] | None) -> list[Any]:
        if not order_by:
            return self._default_order()
        clauses = []
        for field, direction in order_by.items():
            column = getattr(self.row_type, field)
            clauses.append(column.desc() if direction == "desc" else column.asc())
        clauses.append(self.row_type.id)
        return clauses

    async def _scalars(self, stmt: Any) -> list[E]:
        result = await self.db.execute(stmt)
        return [self.to_domain(row) for row in result.scalars().all()]

    async def _get_row(self, entity_id: str) -> R | None:
        key = parse_id(entity_id)
        if key is None:
            return None
        return await self.db.get(self.row_type, key)

    # CRUD

    async def find_by_id(self, entity_id: str) -> E | None:
        row = await self._get_row(entity_id)
        return self.to_domain(row) if row else None

    async def find_all(
        self,
        skip: int | None = None,
        take: int | None = None,
        order_by: Mapping[str, SortDirection] | None = None,
    ) -> list[E]:
        stmt = select(self.row_type).order_by(*self._order_clause(order_by))
        if skip:
            stmt = stmt.offset(skip)
        if take is not None:
            stmt = stmt.limit(take)
        return await self._scalars(stmt)

    async def create(self, entity: E) -> E:
        meta: RecordMetadata = entity.meta
        row = self.row_type(
            **self.to_values(entity),
            created_at=meta.created_at,
            updated_at=meta.updated_at,
        )
        self.db.add(row)
        await self.db.flush()
        return self.to_domain(row)

    async def update(self, entity_id: str, entity: E) -> E:
        row = await self._get_row(entity_id)
        if row is None:
            raise NotFoundError(f"{self.entity_label} with ID {entity_id} not found")

        values = self.to_values(entity)
        for field in self.updatable_fields:
            setattr(row, field, values[field])
        row.updated_at = entity.meta.updated_at

        await self.db.flush()
        return self.to_domain(row)

    async def delete(self, entity_id: str) -> None:
        row = await self._get_row(entity_id)
        if row is None:
            raise NotFoundError(f"{self.entity_label} with ID {entity_id} not found")
        await self.db.delete(row)
        await self.db.flush()

    async def count(self, **where: Any) -> int:
        stmt = select(func.count()).select_from(self.row_type)
        for field, value in where.items():
            stmt = stmt.where(getattr(self.row_type, field) == value)
        result = await self.db.execute(stmt)
        return result.scalar() or 0

    async def exists(self, entity_id: str) -> bool:
        key = parse_id(entity_id)
        if key is None:
            return False
        return await self.count(id=key) > 0


class OrderedRepositoryMixin:
    """Bulk ``order`` writes for children of one parent."""

    db: AsyncSession
    row_type: ClassVar[type[Base]]

    async def apply_orders(self, children: Sequence[OrderedItem]) -> None:
        """Write ``order`` and ``updated_at`` of every child in one flush.

        Callers run this inside the request transaction; a failure leaves
        the whole batch to be rolled back.
        """
        row = self.row_type
        for child in children:
            await self.db.execute(
                update(row)
                .where(row.id == parse_id(child.id))
                .values(order=child.order, updated_at=child.meta.updated_at)
            )
        await self.db.flush()
