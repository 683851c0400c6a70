"""Service for programming language operations."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.language import ProgrammingLanguage
from catalog.domain.pagination import PageRequest, PageResult
from catalog.errors import NotFoundError, ValidationError
from catalog.mappers import language as mapper
from catalog.repositories import LanguageRepository
from catalog.schemas.language import (
    LanguageCreate,
    LanguageQuery,
    LanguageResponse,
    LanguageUpdate,
)
from catalog.services.filtering import FilterChain

logger = logging.getLogger(__name__)


class LanguageService:
    """Service for language CRUD, listing and activation."""

    def __init__(self, db: AsyncSession, repository: LanguageRepository | None = None):
        self.db = db
        self.repository = repository or LanguageRepository(db)

    async def _get_or_404(self, language_id: str) -> ProgrammingLanguage:
        language = await self.repository.find_by_id(language_id)
        if not language:
            raise NotFoundError(f"Language with ID {language_id} not found")
        return language

    async def _inactive(self) -> list[ProgrammingLanguage]:
        return [lang for lang in await self.repository.find_all() if not lang.is_active]

    async def get_all(
        self, query: LanguageQuery, page: PageRequest
    ) -> PageResult[LanguageResponse]:
        """List languages: search, then difficulty, then active flag, then everything."""
        repo = self.repository
        chain = (
            FilterChain[ProgrammingLanguage]("languages")
            .when(bool(query.search), "search", lambda: repo.search_by_name(query.search))
            .when(bool(query.difficulty), "difficulty", lambda: repo.find_by_difficulty(query.difficulty))
            .when(
                query.is_active is not None,
                "is_active",
                repo.find_all_active if query.is_active else self._inactive,
            )
        )
        result = await chain.resolve(
            page,
            fetch_page=lambda skip, take: repo.find_all(skip=skip, take=take),
            count=repo.count,
        )
        return result.map(mapper.to_response)

    async def get_by_id(self, language_id: str) -> LanguageResponse:
        return mapper.to_response(await self._get_or_404(language_id))

    async def get_by_slug(self, slug: str) -> LanguageResponse:
        language = await self.repository.find_by_slug(slug)
        if not language:
            raise NotFoundError(f"Language with slug {slug} not found")
        return mapper.to_response(language)

    async def create(self, data: LanguageCreate) -> LanguageResponse:
        if await self.repository.find_by_slug(data.slug):
            raise ValidationError(
                f"Language with slug {data.slug} already exists", {"slug": data.slug}
            )

        created = await self.repository.create(mapper.from_create(data))
        logger.info("Created language %s (%s)", created.slug, created.id)
        return mapper.to_response(created)

    async def update(self, language_id: str, data: LanguageUpdate) -> LanguageResponse:
        language = await self._get_or_404(language_id)
        language.update(mapper.to_patch(data))
        updated = await self.repository.update(language_id, language)
        return mapper.to_response(updated)

    async def delete(self, language_id: str) -> None:
        if not await self.repository.exists(language_id):
            raise NotFoundError(f"Language with ID {language_id} not found")
        await self.repository.delete(language_id)
        logger.info("Deleted language %s", language_id)

    async def activate(self, language_id: str) -> LanguageResponse:
        language = await self._get_or_404(language_id)
        language.activate()
        return mapper.to_response(await self.repository.update(language_id, language))

    async def deactivate(self, language_id: str) -> LanguageResponse:
        language = await self._get_or_404(language_id)
        language.deactivate()
        return mapper.to_response(await self.repository.update(language_id, language))
