"""Material entity <-> schema conversion."""

from catalog.domain.material import Material, MaterialPatch
from catalog.domain.ordering import OrderChange
from catalog.schemas.material import (
    MaterialCreate,
    MaterialResponse,
    MaterialUpdate,
    ReorderMaterialsRequest,
)


def to_response(entity: Material) -> MaterialResponse:
    return MaterialResponse(
        id=entity.id,
        module_id=entity.module_id,
        title=entity.title,
        type=entity.type,
        content=entity.content,
        duration=entity.duration,
        order=entity.order,
        created_at=entity.meta.created_at,
        updated_at=entity.meta.updated_at,
    )


def from_create(data: MaterialCreate) -> Material:
    return Material.create(
        module_id=str(data.module_id),
        title=data.title,
        type=data.type,
        content=data.content,
        order=data.order,
        duration=data.duration,
    )


def to_patch(data: MaterialUpdate) -> MaterialPatch:
    values = {field: getattr(data, field) for field in data.model_fields_set}
    # order is not nullable; an explicit null leaves it unchanged
    if values.get("order", 0) is None:
        del values["order"]
    return MaterialPatch(**values)


def to_order_changes(data: ReorderMaterialsRequest) -> list[OrderChange]:
    return [OrderChange(id=str(item.id), order=item.order) for item in data.materials]
