"""Service for learning material operations."""

import logging
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.material import Material
from catalog.domain.ordering import OrderChange
from catalog.domain.pagination import PageRequest, PageResult
from catalog.errors import NotFoundError
from catalog.mappers import material as mapper
from catalog.repositories import MaterialRepository, ModuleRepository
from catalog.schemas.material import (
    MaterialCreate,
    MaterialQuery,
    MaterialResponse,
    MaterialUpdate,
)
from catalog.services.filtering import FilterChain
from catalog.services.ordering import ReorderEngine

logger = logging.getLogger(__name__)


class MaterialService:
    """Service for material CRUD, listing and reordering within a module."""

    def __init__(
        self,
        db: AsyncSession,
        repository: MaterialRepository | None = None,
        modules: ModuleRepository | None = None,
    ):
        self.db = db
        self.repository = repository or MaterialRepository(db)
        self.modules = modules or ModuleRepository(db)
        self.reorder_engine = ReorderEngine[Material](
            find_child=self.repository.find_by_id,
            apply_batch=self.repository.apply_orders,
            child_label="Material",
            parent_label="Module",
            rollback=db.rollback,
        )

    async def _get_or_404(self, material_id: str) -> Material:
        material = await self.repository.find_by_id(material_id)
        if not material:
            raise NotFoundError(f"Material with ID {material_id} not found")
        return material

    async def get_all(
        self, query: MaterialQuery, page: PageRequest
    ) -> PageResult[MaterialResponse]:
        """List materials: title search, then type, then module scope, then everything.

        The type filter stays inside the module when a module id is also given.
        """
        repo = self.repository
        module_id = str(query.module_id) if query.module_id else None
        chain = (
            FilterChain[Material]("materials")
            .when(bool(query.search), "search", lambda: repo.search_by_title(query.search))
            .when(bool(query.type), "type", lambda: repo.find_by_type(query.type, module_id))
            .when(
                module_id is not None,
                "module_id",
                lambda: repo.find_by_module_id_ordered(module_id),
            )
        )
        result = await chain.resolve(
            page,
            fetch_page=lambda skip, take: repo.find_all(skip=skip, take=take),
            count=repo.count,
        )
        return result.map(mapper.to_response)

    async def get_by_id(self, material_id: str) -> MaterialResponse:
        return mapper.to_response(await self._get_or_404(material_id))

    async def get_by_module_id(self, module_id: str) -> list[MaterialResponse]:
        materials = await self.repository.find_by_module_id_ordered(module_id)
        return [mapper.to_response(m) for m in materials]

    async def create(self, data: MaterialCreate) -> MaterialResponse:
        module_id = str(data.module_id)
        if not await self.modules.exists(module_id):
            raise NotFoundError(f"Module with ID {module_id} not found")

        created = await self.repository.create(mapper.from_create(data))
        logger.info("Created material %s in module %s", created.id, module_id)
        return mapper.to_response(created)

    async def update(self, material_id: str, data: MaterialUpdate) -> MaterialResponse:
        material = await self._get_or_404(material_id)
        material.update(mapper.to_patch(data))
        return mapper.to_response(await self.repository.update(material_id, material))

    async def delete(self, material_id: str) -> None:
        if not await self.repository.exists(material_id):
            raise NotFoundError(f"Material with ID {material_id} not found")
        await self.repository.delete(material_id)
        logger.info("Deleted material %s", material_id)

    async def reorder(self, module_id: str, changes: Sequence[OrderChange]) -> None:
        await self.reorder_engine.reorder(module_id, changes)
