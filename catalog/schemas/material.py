"""Pydantic schemas for materials."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from catalog.domain.material import MaterialType
from catalog.schemas.common import CamelModel, ReorderItem


class MaterialCreate(CamelModel):
    module_id: UUID
    title: str = Field(..., min_length=1, max_length=200)
    type: MaterialType
    content: str = Field(..., min_length=1, max_length=10000)
    duration: int | None = Field(None, ge=0)
    order: int = Field(..., ge=0)


class MaterialUpdate(CamelModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    type: MaterialType | None = None
    content: str | None = Field(None, min_length=1, max_length=10000)
    duration: int | None = Field(None, ge=0)
    order: int | None = Field(None, ge=0)


class MaterialResponse(CamelModel):
    id: str
    module_id: str
    title: str
    type: MaterialType
    content: str
    duration: int | None
    order: int
    created_at: datetime
    updated_at: datetime


class MaterialQuery(CamelModel):
    search: str | None = None
    type: MaterialType | None = None
    module_id: UUID | None = None


class ReorderMaterialsRequest(CamelModel):
    materials: list[ReorderItem]
