"""Repository for learning materials."""

from typing import Any

from sqlalchemy import select

from catalog.domain.material import Material, MaterialType
from catalog.models import MaterialRow
from catalog.repositories.base import (
    OrderedRepositoryMixin,
    SQLAlchemyRepository,
    metadata_of,
    parse_id,
)


class MaterialRepository(OrderedRepositoryMixin, SQLAlchemyRepository[Material, MaterialRow]):
    row_type = MaterialRow
    entity_label = "Material"
    updatable_fields = ("title", "type", "content", "duration", "order")

    def to_domain(self, row: MaterialRow) -> Material:
        return Material(
            module_id=str(row.module_id),
            title=row.title,
            type=row.type,
            content=row.content,
            order=row.order,
            duration=row.duration,
            meta=metadata_of(row),
        )

    def to_values(self, entity: Material) -> dict[str, Any]:
        return {
            "module_id": parse_id(entity.module_id),
            "title": entity.title,
            "type": entity.type,
            "content": entity.content,
            "duration": entity.duration,
            "order": entity.order,
        }

    def _ordered(self) -> list[Any]:
        return [MaterialRow.order, MaterialRow.created_at, MaterialRow.id]

    async def find_by_module_id(self, module_id: str) -> list[Material]:
        key = parse_id(module_id)
        if key is None:
            return []
        return await self._scalars(
            select(MaterialRow)
            .where(MaterialRow.module_id == key)
            .order_by(*self._default_order())
        )

    async def find_by_module_id_ordered(self, module_id: str) -> list[Material]:
        key = parse_id(module_id)
        if key is None:
            return []
        return await self._scalars(
            select(MaterialRow)
            .where(MaterialRow.module_id == key)
            .order_by(*self._ordered())
        )

    async def find_by_type(
        self, material_type: MaterialType, module_id: str | None = None
    ) -> list[Material]:
        """Materials of one type, optionally limited to a module."""
        stmt = select(MaterialRow).where(MaterialRow.type == material_type)
        if module_id is not None:
            key = parse_id(module_id)
            if key is None:
                return []
            stmt = stmt.where(MaterialRow.module_id == key)
        return await self._scalars(stmt.order_by(*self._ordered()))

    async def search_by_title(self, query: str) -> list[Material]:
        return await self._scalars(
            select(MaterialRow)
            .where(MaterialRow.title.icontains(query, autoescape=True))
            .order_by(MaterialRow.title, MaterialRow.id)
        )
