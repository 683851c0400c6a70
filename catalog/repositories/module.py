"""Repository for course modules."""

from typing import Any

from sqlalchemy import select

from catalog.domain.module import Module
from catalog.models import ModuleRow
from catalog.repositories.base import (
    OrderedRepositoryMixin,
    SQLAlchemyRepository,
    metadata_of,
    parse_id,
)


class ModuleRepository(OrderedRepositoryMixin, SQLAlchemyRepository[Module, ModuleRow]):
    row_type = ModuleRow
    entity_label = "Module"
    updatable_fields = ("title", "description", "syllabus", "order")

    def to_domain(self, row: ModuleRow) -> Module:
        return Module(
            language_id=str(row.language_id),
            title=row.title,
            slug=row.slug,
            order=row.order,
            description=row.description,
            syllabus=row.syllabus,
            meta=metadata_of(row),
        )

    def to_values(self, entity: Module) -> dict[str, Any]:
        return {
            "language_id": parse_id(entity.language_id),
            "title": entity.title,
            "slug": entity.slug,
            "description": entity.description,
            "syllabus": entity.syllabus,
            "order": entity.order,
        }

    async def find_by_language_id(self, language_id: str) -> list[Module]:
        key = parse_id(language_id)
        if key is None:
            return []
        return await self._scalars(
            select(ModuleRow)
            .where(ModuleRow.language_id == key)
            .order_by(*self._default_order())
        )

    async def find_by_language_id_ordered(self, language_id: str) -> list[Module]:
        """Modules of a language by ``order``, ties by creation time then id."""
        key = parse_id(language_id)
        if key is None:
            return []
        return await self._scalars(
            select(ModuleRow)
            .where(ModuleRow.language_id == key)
            .order_by(ModuleRow.order, ModuleRow.created_at, ModuleRow.id)
        )

    async def find_by_language_and_slug(self, language_id: str, slug: str) -> Module | None:
        key = parse_id(language_id)
        if key is None:
            return None
        result = await self.db.execute(
            select(ModuleRow).where(
                ModuleRow.language_id == key,
                ModuleRow.slug == slug,
            )
        )
        row = result.scalar_one_or_none()
        return self.to_domain(row) if row else None

    async def search_by_title(self, query: str) -> list[Module]:
        return await self._scalars(
            select(ModuleRow)
            .where(ModuleRow.title.icontains(query, autoescape=True))
            .order_by(ModuleRow.title, ModuleRow.id)
        )
