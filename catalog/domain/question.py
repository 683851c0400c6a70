"""Quiz question entity with its answer options."""

import copy
from dataclasses import dataclass, field

from catalog.domain.common import UNSET, RecordMetadata, Unset, is_set


@dataclass
class QuestionOption:
    id: str
    option_text: str
    is_correct: bool
    order: int


@dataclass
class QuestionPatch:
    question: str | Unset = UNSET
    explanation: str | None | Unset = UNSET
    order: int | Unset = UNSET
    points: int | Unset = UNSET
    options: list[QuestionOption] | Unset = UNSET


@dataclass
class Question:
    quiz_id: str
    question: str
    order: int
    options: list[QuestionOption] = field(default_factory=list)
    points: int = 1
    explanation: str | None = None
    meta: RecordMetadata = field(default_factory=RecordMetadata.new)

    @classmethod
    def create(
        cls,
        quiz_id: str,
        question: str,
        order: int,
        options: list[QuestionOption],
        points: int = 1,
        explanation: str | None = None,
    ) -> "Question":
        return cls(
            quiz_id=quiz_id,
            question=question,
            order=order,
            options=list(options),
            points=points,
            explanation=explanation,
            meta=RecordMetadata.new(),
        )

    @property
    def id(self) -> str:
        return self.meta.id

    @property
    def parent_id(self) -> str:
        return self.quiz_id

    def update(self, patch: QuestionPatch) -> None:
        if is_set(patch.question) and patch.question:
            self.question = patch.question
        if is_set(patch.explanation):
            self.explanation = patch.explanation
        if is_set(patch.order):
            self.order = patch.order
        if is_set(patch.points):
            self.points = patch.points
        if is_set(patch.options) and patch.options:
            self.options = list(patch.options)
        self.meta.touch()

    def correct_options(self) -> list[QuestionOption]:
        return [opt for opt in self.options if opt.is_correct]

    def is_correct_option(self, option_id: str) -> bool:
        for opt in self.options:
            if opt.id == option_id:
                return opt.is_correct
        return False

    def is_valid(self) -> bool:
        """A question needs at least one correct option."""
        return any(opt.is_correct for opt in self.options)

    def reorder(self, new_order: int) -> None:
        self.order = new_order
        self.meta.touch()

    def copy(self) -> "Question":
        return copy.deepcopy(self)
