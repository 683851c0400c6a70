"""Course module entity."""

import copy
from dataclasses import dataclass, field

from catalog.domain.common import UNSET, RecordMetadata, Unset, is_set


@dataclass
class ModulePatch:
    """Partial update for a module."""

    title: str | Unset = UNSET
    description: str | None | Unset = UNSET
    syllabus: str | None | Unset = UNSET
    order: int | Unset = UNSET


@dataclass
class Module:
    """A module within a programming language, ordered by ``order``."""

    language_id: str
    title: str
    slug: str
    order: int
    description: str | None = None
    syllabus: str | None = None
    meta: RecordMetadata = field(default_factory=RecordMetadata.new)

    @classmethod
    def create(
        cls,
        language_id: str,
        title: str,
        slug: str,
        order: int,
        description: str | None = None,
        syllabus: str | None = None,
    ) -> "Module":
        return cls(
            language_id=language_id,
            title=title,
            slug=slug,
            order=order,
            description=description,
            syllabus=syllabus,
            meta=RecordMetadata.new(),
        )

    @property
    def id(self) -> str:
        return self.meta.id

    @property
    def parent_id(self) -> str:
        return self.language_id

    @property
    def is_new(self) -> bool:
        return self.meta.is_new

    def update(self, patch: ModulePatch) -> None:
        if is_set(patch.title) and patch.title:
            self.title = patch.title
        if is_set(patch.description):
            self.description = patch.description
        if is_set(patch.syllabus):
            self.syllabus = patch.syllabus
        if is_set(patch.order):
            self.order = patch.order
        self.meta.touch()

    def reorder(self, new_order: int) -> None:
        self.order = new_order
        self.meta.touch()

    def copy(self) -> "Module":
        return copy.deepcopy(self)
