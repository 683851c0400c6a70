"""Pydantic schemas for programming languages."""

from datetime import datetime

from pydantic import Field, HttpUrl, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from catalog.domain.common import Difficulty
from catalog.schemas.common import CamelModel

SLUG_PATTERN = r"^[a-z0-9-]+$"

_http_url = TypeAdapter(HttpUrl)


def _check_icon(value: str | None) -> str | None:
    # An empty string is a valid "no icon" value.
    if value:
        try:
            _http_url.validate_python(value)
        except PydanticValidationError:
            raise ValueError("Invalid icon URL")
    return value


class LanguageCreate(CamelModel):
    """Schema for creating a language."""

    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100, pattern=SLUG_PATTERN)
    description: str | None = Field(None, max_length=500)
    icon: str | None = Field(None, max_length=500)
    difficulty: Difficulty = Difficulty.BEGINNER

    @field_validator("icon")
    @classmethod
    def validate_icon(cls, value: str | None) -> str | None:
        return _check_icon(value)


class LanguageUpdate(CamelModel):
    """Schema for updating a language. Only fields sent by the client are applied."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    icon: str | None = Field(None, max_length=500)
    difficulty: Difficulty | None = None

    @field_validator("icon")
    @classmethod
    def validate_icon(cls, value: str | None) -> str | None:
        return _check_icon(value)


class LanguageResponse(CamelModel):
    id: str
    name: str
    slug: str
    description: str | None
    icon: str | None
    difficulty: Difficulty
    is_active: bool
    created_at: datetime
    updated_at: datetime


class LanguageQuery(CamelModel):
    search: str | None = None
    difficulty: Difficulty | None = None
    is_active: bool | None = None
