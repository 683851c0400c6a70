"""Repository for programming languages."""

from typing import Any

from sqlalchemy import select

from catalog.domain.common import Difficulty
from catalog.domain.language import ProgrammingLanguage
from catalog.models import LanguageRow
from catalog.repositories.base import SQLAlchemyRepository, metadata_of


class LanguageRepository(SQLAlchemyRepository[ProgrammingLanguage, LanguageRow]):
    """Language persistence plus slug, activity, difficulty and name lookups."""

    row_type = LanguageRow
    entity_label = "Language"
    updatable_fields = ("name", "description", "icon", "difficulty", "is_active")

    def to_domain(self, row: LanguageRow) -> ProgrammingLanguage:
        return ProgrammingLanguage(
            name=row.name,
            slug=row.slug,
            difficulty=row.difficulty,
            is_active=row.is_active,
            description=row.description,
            icon=row.icon,
            meta=metadata_of(row),
        )

    def to_values(self, entity: ProgrammingLanguage) -> dict[str, Any]:
        return {
            "name": entity.name,
            "slug": entity.slug,
            "description": entity.description,
            "icon": entity.icon,
            "difficulty": entity.difficulty,
            "is_active": entity.is_active,
        }

    async def find_by_slug(self, slug: str) -> ProgrammingLanguage | None:
        result = await self.db.execute(select(LanguageRow).where(LanguageRow.slug == slug))
        row = result.scalar_one_or_none()
        return self.to_domain(row) if row else None

    async def find_all_active(self) -> list[ProgrammingLanguage]:
        return await self._scalars(
            select(LanguageRow)
            .where(LanguageRow.is_active == True)
            .order_by(LanguageRow.name, LanguageRow.id)
        )

    async def find_by_difficulty(self, difficulty: Difficulty) -> list[ProgrammingLanguage]:
        return await self._scalars(
            select(LanguageRow)
            .where(LanguageRow.difficulty == difficulty)
            .order_by(LanguageRow.name, LanguageRow.id)
        )

    async def search_by_name(self, query: str) -> list[ProgrammingLanguage]:
        """Case-insensitive substring match on the name."""
        return await self._scalars(
            select(LanguageRow)
            .where(LanguageRow.name.icontains(query, autoescape=True))
            .order_by(LanguageRow.name, LanguageRow.id)
        )
