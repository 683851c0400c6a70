"""Course module routes."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from catalog.api.deps import AdminUser, ContentEditor, DBSession
from catalog.domain.pagination import PageRequest
from catalog.mappers import module as mapper
from catalog.schemas.common import PaginatedResponse, SuccessResponse
from catalog.schemas.module import (
    ModuleCreate,
    ModuleQuery,
    ModuleResponse,
    ModuleUpdate,
    ReorderModulesRequest,
)
from catalog.services.module_service import ModuleService

router = APIRouter(prefix="/modules", tags=["modules"])


@router.get("", response_model=PaginatedResponse[ModuleResponse])
async def list_modules(
    db: DBSession,
    search: str | None = Query(None),
    language_id: UUID | None = Query(None, alias="languageId"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
) -> PaginatedResponse[ModuleResponse]:
    """List modules, optionally searched by title or scoped to one language."""
    service = ModuleService(db)
    query = ModuleQuery(search=search, language_id=language_id)
    result = await service.get_all(query, PageRequest(page=page, limit=limit))
    return PaginatedResponse[ModuleResponse].from_result(result)


@router.get("/language/{language_id}", response_model=SuccessResponse[list[ModuleResponse]])
async def list_language_modules(
    language_id: str, db: DBSession
) -> SuccessResponse[list[ModuleResponse]]:
    """All modules of a language in display order."""
    service = ModuleService(db)
    modules = await service.get_by_language_id(language_id)
    return SuccessResponse[list[ModuleResponse]](data=modules)


@router.get(
    "/language/{language_id}/slug/{slug}",
    response_model=SuccessResponse[ModuleResponse],
)
async def get_module_by_slug(
    language_id: str, slug: str, db: DBSession
) -> SuccessResponse[ModuleResponse]:
    service = ModuleService(db)
    module = await service.get_by_language_and_slug(language_id, slug)
    return SuccessResponse[ModuleResponse](data=module)


@router.get("/{module_id}", response_model=SuccessResponse[ModuleResponse])
async def get_module(module_id: str, db: DBSession) -> SuccessResponse[ModuleResponse]:
    service = ModuleService(db)
    return SuccessResponse[ModuleResponse](data=await service.get_by_id(module_id))


@router.post(
    "",
    response_model=SuccessResponse[ModuleResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_module(
    data: ModuleCreate,
    current_user: ContentEditor,
    db: DBSession,
) -> SuccessResponse[ModuleResponse]:
    """Create a module inside an existing language."""
    service = ModuleService(db)
    return SuccessResponse[ModuleResponse](data=await service.create(data))


@router.put("/{module_id}", response_model=SuccessResponse[ModuleResponse])
async def update_module(
    module_id: str,
    data: ModuleUpdate,
    current_user: ContentEditor,
    db: DBSession,
) -> SuccessResponse[ModuleResponse]:
    service = ModuleService(db)
    return SuccessResponse[ModuleResponse](data=await service.update(module_id, data))


@router.delete("/{module_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_module(
    module_id: str,
    current_user: AdminUser,
    db: DBSession,
) -> None:
    service = ModuleService(db)
    await service.delete(module_id)


@router.post("/language/{language_id}/reorder", status_code=status.HTTP_204_NO_CONTENT)
async def reorder_modules(
    language_id: UUID,
    data: ReorderModulesRequest,
    current_user: ContentEditor,
    db: DBSession,
) -> None:
    """Set the order of several modules of one language at once."""
    service = ModuleService(db)
    await service.reorder(str(language_id), mapper.to_order_changes(data))
