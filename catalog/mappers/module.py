"""Module entity <-> schema conversion."""

from catalog.domain.module import Module, ModulePatch
from catalog.domain.ordering import OrderChange
from catalog.schemas.module import (
    ModuleCreate,
    ModuleResponse,
    ModuleUpdate,
    ReorderModulesRequest,
)


def to_response(entity: Module) -> ModuleResponse:
    return ModuleResponse(
        id=entity.id,
        language_id=entity.language_id,
        title=entity.title,
        slug=entity.slug,
        description=entity.description,
        syllabus=entity.syllabus,
        order=entity.order,
        created_at=entity.meta.created_at,
        updated_at=entity.meta.updated_at,
    )


def from_create(data: ModuleCreate) -> Module:
    return Module.create(
        language_id=str(data.language_id),
        title=data.title,
        slug=data.slug,
        order=data.order,
        description=data.description,
        syllabus=data.syllabus,
    )


def to_patch(data: ModuleUpdate) -> ModulePatch:
    values = {field: getattr(data, field) for field in data.model_fields_set}
    # order is not nullable; an explicit null leaves it unchanged
    if values.get("order", 0) is None:
        del values["order"]
    return ModulePatch(**values)


def to_order_changes(data: ReorderModulesRequest) -> list[OrderChange]:
    return [OrderChange(id=str(item.id), order=item.order) for item in data.modules]
