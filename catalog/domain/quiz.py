"""Quiz entity. Stored and queryable, not exposed over HTTP."""

import copy
from dataclasses import dataclass, field

from catalog.domain.common import UNSET, RecordMetadata, Unset, is_set


@dataclass
class QuizPatch:
    title: str | Unset = UNSET
    description: str | None | Unset = UNSET
    passing_score: int | Unset = UNSET
    time_limit: int | None | Unset = UNSET


@dataclass
class Quiz:
    module_id: str
    title: str
    passing_score: int = 70
    description: str | None = None
    time_limit: int | None = None
    meta: RecordMetadata = field(default_factory=RecordMetadata.new)

    @classmethod
    def create(
        cls,
        module_id: str,
        title: str,
        passing_score: int = 70,
        description: str | None = None,
        time_limit: int | None = None,
    ) -> "Quiz":
        return cls(
            module_id=module_id,
            title=title,
            passing_score=passing_score,
            description=description,
            time_limit=time_limit,
            meta=RecordMetadata.new(),
        )

    @property
    def id(self) -> str:
        return self.meta.id

    def update(self, patch: QuizPatch) -> None:
        if is_set(patch.title) and patch.title:
            self.title = patch.title
        if is_set(patch.description):
            self.description = patch.description
        if is_set(patch.passing_score):
            self.passing_score = patch.passing_score
        if is_set(patch.time_limit):
            self.time_limit = patch.time_limit
        self.meta.touch()

    def is_passing(self, score: int) -> bool:
        return score >= self.passing_score

    def has_time_limit(self) -> bool:
        return self.time_limit is not None and self.time_limit > 0

    def copy(self) -> "Quiz":
        return copy.deepcopy(self)
