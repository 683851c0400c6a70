"""Pydantic schemas for modules."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from catalog.schemas.common import CamelModel, ReorderItem
from catalog.schemas.language import SLUG_PATTERN


class ModuleCreate(CamelModel):
    language_id: UUID
    title: str = Field(..., min_length=1, max_length=200)
    slug: str = Field(..., min_length=1, max_length=200, pattern=SLUG_PATTERN)
    description: str | None = Field(None, max_length=1000)
    syllabus: str | None = Field(None, max_length=5000)
    order: int = Field(..., ge=0)


class ModuleUpdate(CamelModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=1000)
    syllabus: str | None = Field(None, max_length=5000)
    order: int | None = Field(None, ge=0)


class ModuleResponse(CamelModel):
    id: str
    language_id: str
    title: str
    slug: str
    description: str | None
    syllabus: str | None
    order: int
    created_at: datetime
    updated_at: datetime


class ModuleQuery(CamelModel):
    search: str | None = None
    language_id: UUID | None = None


class ReorderModulesRequest(CamelModel):
    modules: list[ReorderItem]
