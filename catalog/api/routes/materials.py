"""Learning material routes."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from catalog.api.deps import AdminUser, ContentEditor, DBSession
from catalog.domain.material import MaterialType
from catalog.domain.pagination import PageRequest
from catalog.mappers import material as mapper
from catalog.schemas.common import PaginatedResponse, SuccessResponse
from catalog.schemas.material import (
    MaterialCreate,
    MaterialQuery,
    MaterialResponse,
    MaterialUpdate,
    ReorderMaterialsRequest,
)
from catalog.services.material_service import MaterialService

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("", response_model=PaginatedResponse[MaterialResponse])
async def list_materials(
    db: DBSession,
    search: str | None = Query(None),
    material_type: MaterialType | None = Query(None, alias="type"),
    module_id: UUID | None = Query(None, alias="moduleId"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
) -> PaginatedResponse[MaterialResponse]:
    """List materials by title search, type, or module."""
    service = MaterialService(db)
    query = MaterialQuery(search=search, type=material_type, module_id=module_id)
    result = await service.get_all(query, PageRequest(page=page, limit=limit))
    return PaginatedResponse[MaterialResponse].from_result(result)


@router.get("/module/{module_id}", response_model=SuccessResponse[list[MaterialResponse]])
async def list_module_materials(
    module_id: str, db: DBSession
) -> SuccessResponse[list[MaterialResponse]]:
    service = MaterialService(db)
    materials = await service.get_by_module_id(module_id)
    return SuccessResponse[list[MaterialResponse]](data=materials)


@router.get("/{material_id}", response_model=SuccessResponse[MaterialResponse])
async def get_material(material_id: str, db: DBSession) -> SuccessResponse[MaterialResponse]:
    service = MaterialService(db)
    return SuccessResponse[MaterialResponse](data=await service.get_by_id(material_id))


@router.post(
    "",
    response_model=SuccessResponse[MaterialResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_material(
    data: MaterialCreate,
    current_user: ContentEditor,
    db: DBSession,
) -> SuccessResponse[MaterialResponse]:
    service = MaterialService(db)
    return SuccessResponse[MaterialResponse](data=await service.create(data))


@router.put("/{material_id}", response_model=SuccessResponse[MaterialResponse])
async def update_material(
    material_id: str,
    data: MaterialUpdate,
    current_user: ContentEditor,
    db: DBSession,
) -> SuccessResponse[MaterialResponse]:
    service = MaterialService(db)
    return SuccessResponse[MaterialResponse](data=await service.update(material_id, data))


@router.delete("/{material_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_material(
    material_id: str,
    current_user: AdminUser,
    db: DBSession,
) -> None:
    service = MaterialService(db)
    await service.delete(material_id)


@router.post("/module/{module_id}/reorder", status_code=status.HTTP_204_NO_CONTENT)
async def reorder_materials(
    module_id: UUID,
    data: ReorderMaterialsRequest,
    current_user: ContentEditor,
    db: DBSession,
) -> None:
    """Set the order of several materials of one module at once."""
    service = MaterialService(db)
    await service.reorder(str(module_id), mapper.to_order_changes(data))
