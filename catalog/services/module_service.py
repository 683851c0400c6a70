"""Service for course module operations."""

import logging
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.module import Module
from catalog.domain.ordering import OrderChange
from catalog.domain.pagination import PageRequest, PageResult
from catalog.errors import NotFoundError, ValidationError
from catalog.mappers import module as mapper
from catalog.repositories import LanguageRepository, ModuleRepository
from catalog.schemas.module import ModuleCreate, ModuleQuery, ModuleResponse, ModuleUpdate
from catalog.services.filtering import FilterChain
from catalog.services.ordering import ReorderEngine

logger = logging.getLogger(__name__)


class ModuleService:
    """Service for module CRUD, listing and reordering within a language."""

    def __init__(
        self,
        db: AsyncSession,
        repository: ModuleRepository | None = None,
        languages: LanguageRepository | None = None,
    ):
        self.db = db
        self.repository = repository or ModuleRepository(db)
        self.languages = languages or LanguageRepository(db)
        self.reorder_engine = ReorderEngine[Module](
            find_child=self.repository.find_by_id,
            apply_batch=self.repository.apply_orders,
            child_label="Module",
            parent_label="Language",
            rollback=db.rollback,
        )

    async def _get_or_404(self, module_id: str) -> Module:
        module = await self.repository.find_by_id(module_id)
        if not module:
            raise NotFoundError(f"Module with ID {module_id} not found")
        return module

    async def get_all(self, query: ModuleQuery, page: PageRequest) -> PageResult[ModuleResponse]:
        """List modules: title search, then language scope, then everything."""
        repo = self.repository
        language_id = str(query.language_id) if query.language_id else None
        chain = (
            FilterChain[Module]("modules")
            .when(bool(query.search), "search", lambda: repo.search_by_title(query.search))
            .when(
                language_id is not None,
                "language_id",
                lambda: repo.find_by_language_id_ordered(language_id),
            )
        )
        result = await chain.resolve(
            page,
            fetch_page=lambda skip, take: repo.find_all(skip=skip, take=take),
            count=repo.count,
        )
        return result.map(mapper.to_response)

    async def get_by_id(self, module_id: str) -> ModuleResponse:
        return mapper.to_response(await self._get_or_404(module_id))

    async def get_by_language_and_slug(self, language_id: str, slug: str) -> ModuleResponse:
        module = await self.repository.find_by_language_and_slug(language_id, slug)
        if not module:
            raise NotFoundError(f"Module with slug {slug} not found for language {language_id}")
        return mapper.to_response(module)

    async def get_by_language_id(self, language_id: str) -> list[ModuleResponse]:
        modules = await self.repository.find_by_language_id_ordered(language_id)
        return [mapper.to_response(m) for m in modules]

    async def create(self, data: ModuleCreate) -> ModuleResponse:
        language_id = str(data.language_id)
        if not await self.languages.exists(language_id):
            raise NotFoundError(f"Language with ID {language_id} not found")

        if await self.repository.find_by_language_and_slug(language_id, data.slug):
            raise ValidationError(
                f"Module with slug {data.slug} already exists for this language",
                {"slug": data.slug, "languageId": language_id},
            )

        created = await self.repository.create(mapper.from_create(data))
        logger.info("Created module %s in language %s", created.id, language_id)
        return mapper.to_response(created)

    async def update(self, module_id: str, data: ModuleUpdate) -> ModuleResponse:
        module = await self._get_or_404(module_id)
        module.update(mapper.to_patch(data))
        return mapper.to_response(await self.repository.update(module_id, module))

    async def delete(self, module_id: str) -> None:
        if not await self.repository.exists(module_id):
            raise NotFoundError(f"Module with ID {module_id} not found")
        await self.repository.delete(module_id)
        logger.info("Deleted module %s", module_id)

    async def reorder(self, language_id: str, changes: Sequence[OrderChange]) -> None:
        await self.reorder_engine.reorder(language_id, changes)
