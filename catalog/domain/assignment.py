"""Coding assignment entity. Stored and queryable, not exposed over HTTP."""

import copy
from dataclasses import dataclass, field

from catalog.domain.common import UNSET, Difficulty, RecordMetadata, Unset, is_set


@dataclass
class TestCase:
    input: str
    expected_output: str
    description: str | None = None

    # Keep pytest from collecting this as a test class.
    __test__ = False


@dataclass
class AssignmentPatch:
    title: str | Unset = UNSET
    description: str | Unset = UNSET
    difficulty: Difficulty | Unset = UNSET
    starter_code: str | None | Unset = UNSET
    test_cases: list[TestCase] | Unset = UNSET
    hints: list[str] | None | Unset = UNSET
    max_score: int | Unset = UNSET
    time_limit: int | None | Unset = UNSET


@dataclass
class Assignment:
    """A graded coding exercise attached to a module.

    ``time_limit`` is in minutes.
    """

    module_id: str
    title: str
    description: str
    difficulty: Difficulty
    test_cases: list[TestCase] = field(default_factory=list)
    max_score: int = 100
    starter_code: str | None = None
    hints: list[str] | None = None
    time_limit: int | None = None
    meta: RecordMetadata = field(default_factory=RecordMetadata.new)

    @classmethod
    def create(
        cls,
        module_id: str,
        title: str,
        description: str,
        difficulty: Difficulty,
        test_cases: list[TestCase],
        max_score: int = 100,
        starter_code: str | None = None,
        hints: list[str] | None = None,
        time_limit: int | None = None,
    ) -> "Assignment":
        return cls(
            module_id=module_id,
            title=title,
            description=description,
            difficulty=difficulty,
            test_cases=list(test_cases),
            max_score=max_score,
            starter_code=starter_code,
            hints=hints,
            time_limit=time_limit,
            meta=RecordMetadata.new(),
        )

    @property
    def id(self) -> str:
        return self.meta.id

    def update(self, patch: AssignmentPatch) -> None:
        if is_set(patch.title) and patch.title:
            self.title = patch.title
        if is_set(patch.description) and patch.description:
            self.description = patch.description
        if is_set(patch.difficulty) and patch.difficulty:
            self.difficulty = patch.difficulty
        if is_set(patch.starter_code):
            self.starter_code = patch.starter_code
        if is_set(patch.test_cases) and patch.test_cases:
            self.test_cases = list(patch.test_cases)
        if is_set(patch.hints):
            self.hints = patch.hints
        if is_set(patch.max_score):
            self.max_score = patch.max_score
        if is_set(patch.time_limit):
            self.time_limit = patch.time_limit
        self.meta.touch()

    def add_test_case(self, test_case: TestCase) -> None:
        self.test_cases.append(test_case)
        self.meta.touch()

    def add_hint(self, hint: str) -> None:
        if self.hints is None:
            self.hints = []
        self.hints.append(hint)
        self.meta.touch()

    def has_time_limit(self) -> bool:
        return self.time_limit is not None and self.time_limit > 0

    def copy(self) -> "Assignment":
        return copy.deepcopy(self)
