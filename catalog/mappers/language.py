"""Language entity <-> schema conversion."""

from catalog.domain.language import LanguagePatch, ProgrammingLanguage
from catalog.schemas.language import LanguageCreate, LanguageResponse, LanguageUpdate


def to_response(entity: ProgrammingLanguage) -> LanguageResponse:
    return LanguageResponse(
        id=entity.id,
        name=entity.name,
        slug=entity.slug,
        description=entity.description,
        icon=entity.icon,
        difficulty=entity.difficulty,
        is_active=entity.is_active,
        created_at=entity.meta.created_at,
        updated_at=entity.meta.updated_at,
    )


def from_create(data: LanguageCreate) -> ProgrammingLanguage:
    return ProgrammingLanguage.create(
        name=data.name,
        slug=data.slug,
        difficulty=data.difficulty,
        description=data.description,
        icon=data.icon,
    )


def to_patch(data: LanguageUpdate) -> LanguagePatch:
    """Carry over only the fields the client actually sent."""
    return LanguagePatch(**{field: getattr(data, field) for field in data.model_fields_set})
