"""Programming language entity."""

import copy
from dataclasses import dataclass, field

from catalog.domain.common import UNSET, Difficulty, RecordMetadata, Unset, is_set


@dataclass
class LanguagePatch:
    """Partial update for a programming language."""

    name: str | Unset = UNSET
    description: str | None | Unset = UNSET
    icon: str | None | Unset = UNSET
    difficulty: Difficulty | Unset = UNSET


@dataclass
class ProgrammingLanguage:
    """A programming language offered by the catalog."""

    name: str
    slug: str
    difficulty: Difficulty = Difficulty.BEGINNER
    is_active: bool = True
    description: str | None = None
    icon: str | None = None
    meta: RecordMetadata = field(default_factory=RecordMetadata.new)

    @classmethod
    def create(
        cls,
        name: str,
        slug: str,
        difficulty: Difficulty = Difficulty.BEGINNER,
        description: str | None = None,
        icon: str | None = None,
    ) -> "ProgrammingLanguage":
        """Create a new, not yet persisted, active language."""
        return cls(
            name=name,
            slug=slug,
            difficulty=difficulty,
            is_active=True,
            description=description,
            icon=icon,
            meta=RecordMetadata.new(),
        )

    @property
    def id(self) -> str:
        return self.meta.id

    @property
    def is_new(self) -> bool:
        return self.meta.is_new

    def update(self, patch: LanguagePatch) -> None:
        """Apply supplied fields; an empty icon string means "no icon"."""
        if is_set(patch.name) and patch.name:
            self.name = patch.name
        if is_set(patch.description):
            self.description = patch.description
        if is_set(patch.icon):
            self.icon = patch.icon
        if is_set(patch.difficulty) and patch.difficulty:
            self.difficulty = patch.difficulty
        self.meta.touch()

    def activate(self) -> None:
        self.is_active = True
        self.meta.touch()

    def deactivate(self) -> None:
        self.is_active = False
        self.meta.touch()

    def copy(self) -> "ProgrammingLanguage":
        return copy.deepcopy(self)
