"""Shared building blocks for domain entities."""

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _UnsetType(enum.Enum):
    """Marker for a patch field the caller did not supply."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _UnsetType.UNSET
Unset = _UnsetType


def is_set(value: Any) -> bool:
    """Return True if a patch field was supplied (None counts as supplied)."""
    return value is not UNSET


class Difficulty(str, enum.Enum):
    """Difficulty level shared by languages and assignments."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


@dataclass
class RecordMetadata:
    """Identity and timestamps embedded in every entity.

    An empty ``id`` means the record has not been persisted yet.
    """

    id: str = ""
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @classmethod
    def new(cls) -> "RecordMetadata":
        now = utcnow()
        return cls(id="", created_at=now, updated_at=now)

    @property
    def is_new(self) -> bool:
        return not self.id

    def touch(self) -> None:
        self.updated_at = utcnow()
