"""Learning material entity."""

import copy
import enum
from dataclasses import dataclass, field

from catalog.domain.common import UNSET, RecordMetadata, Unset, is_set


class MaterialType(str, enum.Enum):
    """Kind of learning material."""

    VIDEO = "VIDEO"
    ARTICLE = "ARTICLE"
    CODE_EXAMPLE = "CODE_EXAMPLE"
    INTERACTIVE = "INTERACTIVE"


@dataclass
class MaterialPatch:
    """Partial update for a material."""

    title: str | Unset = UNSET
    type: MaterialType | Unset = UNSET
    content: str | Unset = UNSET
    duration: int | None | Unset = UNSET
    order: int | Unset = UNSET


@dataclass
class Material:
    """A piece of content inside a module. ``duration`` is in minutes."""

    module_id: str
    title: str
    type: MaterialType
    content: str
    order: int
    duration: int | None = None
    meta: RecordMetadata = field(default_factory=RecordMetadata.new)

    @classmethod
    def create(
        cls,
        module_id: str,
        title: str,
        type: MaterialType,
        content: str,
        order: int,
        duration: int | None = None,
    ) -> "Material":
        return cls(
            module_id=module_id,
            title=title,
            type=type,
            content=content,
            order=order,
            duration=duration,
            meta=RecordMetadata.new(),
        )

    @property
    def id(self) -> str:
        return self.meta.id

    @property
    def parent_id(self) -> str:
        return self.module_id

    @property
    def is_new(self) -> bool:
        return self.meta.is_new

    def update(self, patch: MaterialPatch) -> None:
        if is_set(patch.title) and patch.title:
            self.title = patch.title
        if is_set(patch.type) and patch.type:
            self.type = patch.type
        if is_set(patch.content) and patch.content:
            self.content = patch.content
        if is_set(patch.duration):
            self.duration = patch.duration
        if is_set(patch.order):
            self.order = patch.order
        self.meta.touch()

    def is_video(self) -> bool:
        return self.type == MaterialType.VIDEO

    def is_article(self) -> bool:
        return self.type == MaterialType.ARTICLE

    def reorder(self, new_order: int) -> None:
        self.order = new_order
        self.meta.touch()

    def copy(self) -> "Material":
        return copy.deepcopy(self)
