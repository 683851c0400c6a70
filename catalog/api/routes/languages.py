"""Programming language routes."""

from fastapi import APIRouter, Query, status

from catalog.api.deps import AdminUser, ContentEditor, DBSession
from catalog.domain.common import Difficulty
from catalog.domain.pagination import PageRequest
from catalog.schemas.common import PaginatedResponse, SuccessResponse
from catalog.schemas.language import (
    LanguageCreate,
    LanguageQuery,
    LanguageResponse,
    LanguageUpdate,
)
from catalog.services.language_service import LanguageService

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get("", response_model=PaginatedResponse[LanguageResponse])
async def list_languages(
    db: DBSession,
    search: str | None = Query(None),
    difficulty: Difficulty | None = Query(None),
    is_active: bool | None = Query(None, alias="isActive"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
) -> PaginatedResponse[LanguageResponse]:
    """List languages with an optional single filter."""
    service = LanguageService(db)
    query = LanguageQuery(search=search, difficulty=difficulty, is_active=is_active)
    result = await service.get_all(query, PageRequest(page=page, limit=limit))
    return PaginatedResponse[LanguageResponse].from_result(result)


@router.get("/slug/{slug}", response_model=SuccessResponse[LanguageResponse])
async def get_language_by_slug(slug: str, db: DBSession) -> SuccessResponse[LanguageResponse]:
    service = LanguageService(db)
    return SuccessResponse[LanguageResponse](data=await service.get_by_slug(slug))


@router.get("/{language_id}", response_model=SuccessResponse[LanguageResponse])
async def get_language(language_id: str, db: DBSession) -> SuccessResponse[LanguageResponse]:
    service = LanguageService(db)
    return SuccessResponse[LanguageResponse](data=await service.get_by_id(language_id))


@router.post(
    "",
    response_model=SuccessResponse[LanguageResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_language(
    data: LanguageCreate,
    current_user: ContentEditor,
    db: DBSession,
) -> SuccessResponse[LanguageResponse]:
    """Create a new language."""
    service = LanguageService(db)
    return SuccessResponse[LanguageResponse](data=await service.create(data))


@router.put("/{language_id}", response_model=SuccessResponse[LanguageResponse])
async def update_language(
    language_id: str,
    data: LanguageUpdate,
    current_user: ContentEditor,
    db: DBSession,
) -> SuccessResponse[LanguageResponse]:
    """Update a language. Omitted fields are left unchanged."""
    service = LanguageService(db)
    return SuccessResponse[LanguageResponse](data=await service.update(language_id, data))


@router.delete("/{language_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_language(
    language_id: str,
    current_user: AdminUser,
    db: DBSession,
) -> None:
    """Delete a language together with its modules and materials."""
    service = LanguageService(db)
    await service.delete(language_id)


@router.post("/{language_id}/activate", response_model=SuccessResponse[LanguageResponse])
async def activate_language(
    language_id: str,
    current_user: ContentEditor,
    db: DBSession,
) -> SuccessResponse[LanguageResponse]:
    service = LanguageService(db)
    return SuccessResponse[LanguageResponse](data=await service.activate(language_id))


@router.post("/{language_id}/deactivate", response_model=SuccessResponse[LanguageResponse])
async def deactivate_language(
    language_id: str,
    current_user: ContentEditor,
    db: DBSession,
) -> SuccessResponse[LanguageResponse]:
    service = LanguageService(db)
    return SuccessResponse[LanguageResponse](data=await service.deactivate(language_id))
