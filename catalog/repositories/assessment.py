"""Repositories for assignments, quizzes and questions.

These back entities that are stored but have no HTTP routes yet.
"""

from dataclasses import asdict
from typing import Any

from sqlalchemy import select

from catalog.domain.assignment import Assignment, TestCase
from catalog.domain.common import Difficulty
from catalog.domain.question import Question, QuestionOption
from catalog.domain.quiz import Quiz
from catalog.models import AssignmentRow, ModuleRow, QuestionRow, QuizRow
from catalog.repositories.base import (
    OrderedRepositoryMixin,
    SQLAlchemyRepository,
    metadata_of,
    parse_id,
)


class AssignmentRepository(SQLAlchemyRepository[Assignment, AssignmentRow]):
    row_type = AssignmentRow
    entity_label = "Assignment"
    updatable_fields = (
        "title",
        "description",
        "difficulty",
        "starter_code",
        "test_cases",
        "hints",
        "max_score",
        "time_limit",
    )

    def to_domain(self, row: AssignmentRow) -> Assignment:
        return Assignment(
            module_id=str(row.module_id),
            title=row.title,
            description=row.description,
            difficulty=row.difficulty,
            test_cases=[TestCase(**tc) for tc in row.test_cases or []],
            max_score=row.max_score,
            starter_code=row.starter_code,
            hints=list(row.hints) if row.hints is not None else None,
            time_limit=row.time_limit,
            meta=metadata_of(row),
        )

    def to_values(self, entity: Assignment) -> dict[str, Any]:
        return {
            "module_id": parse_id(entity.module_id),
            "title": entity.title,
            "description": entity.description,
            "difficulty": entity.difficulty,
            "starter_code": entity.starter_code,
            "test_cases": [asdict(tc) for tc in entity.test_cases],
            "hints": list(entity.hints) if entity.hints is not None else None,
            "max_score": entity.max_score,
            "time_limit": entity.time_limit,
        }

    async def find_by_module_id(self, module_id: str) -> list[Assignment]:
        key = parse_id(module_id)
        if key is None:
            return []
        return await self._scalars(
            select(AssignmentRow)
            .where(AssignmentRow.module_id == key)
            .order_by(*self._default_order())
        )

    async def find_by_difficulty(self, module_id: str, difficulty: Difficulty) -> list[Assignment]:
        key = parse_id(module_id)
        if key is None:
            return []
        return await self._scalars(
            select(AssignmentRow)
            .where(
                AssignmentRow.module_id == key,
                AssignmentRow.difficulty == difficulty,
            )
            .order_by(*self._default_order())
        )

    async def find_by_language_id(self, language_id: str) -> list[Assignment]:
        """Assignments of every module belonging to a language."""
        key = parse_id(language_id)
        if key is None:
            return []
        return await self._scalars(
            select(AssignmentRow)
            .join(ModuleRow, AssignmentRow.module_id == ModuleRow.id)
            .where(ModuleRow.language_id == key)
            .order_by(ModuleRow.order, AssignmentRow.created_at, AssignmentRow.id)
        )


class QuizRepository(SQLAlchemyRepository[Quiz, QuizRow]):
    row_type = QuizRow
    entity_label = "Quiz"
    updatable_fields = ("title", "description", "passing_score", "time_limit")

    def to_domain(self, row: QuizRow) -> Quiz:
        return Quiz(
            module_id=str(row.module_id),
            title=row.title,
            passing_score=row.passing_score,
            description=row.description,
            time_limit=row.time_limit,
            meta=metadata_of(row),
        )

    def to_values(self, entity: Quiz) -> dict[str, Any]:
        return {
            "module_id": parse_id(entity.module_id),
            "title": entity.title,
            "description": entity.description,
            "passing_score": entity.passing_score,
            "time_limit": entity.time_limit,
        }

    async def find_by_module_id(self, module_id: str) -> list[Quiz]:
        key = parse_id(module_id)
        if key is None:
            return []
        return await self._scalars(
            select(QuizRow)
            .where(QuizRow.module_id == key)
            .order_by(*self._default_order())
        )

    async def find_by_language_id(self, language_id: str) -> list[Quiz]:
        key = parse_id(language_id)
        if key is None:
            return []
        return await self._scalars(
            select(QuizRow)
            .join(ModuleRow, QuizRow.module_id == ModuleRow.id)
            .where(ModuleRow.language_id == key)
            .order_by(ModuleRow.order, QuizRow.created_at, QuizRow.id)
        )


class QuestionRepository(OrderedRepositoryMixin, SQLAlchemyRepository[Question, QuestionRow]):
    row_type = QuestionRow
    entity_label = "Question"
    updatable_fields = ("question", "explanation", "order", "points", "options")

    def to_domain(self, row: QuestionRow) -> Question:
        return Question(
            quiz_id=str(row.quiz_id),
            question=row.question,
            order=row.order,
            options=[QuestionOption(**opt) for opt in row.options or []],
            points=row.points,
            explanation=row.explanation,
            meta=metadata_of(row),
        )

    def to_values(self, entity: Question) -> dict[str, Any]:
        return {
            "quiz_id": parse_id(entity.quiz_id),
            "question": entity.question,
            "explanation": entity.explanation,
            "order": entity.order,
            "points": entity.points,
            "options": [asdict(opt) for opt in entity.options],
        }

    async def find_by_quiz_id(self, quiz_id: str) -> list[Question]:
        key = parse_id(quiz_id)
        if key is None:
            return []
        return await self._scalars(
            select(QuestionRow)
            .where(QuestionRow.quiz_id == key)
            .order_by(*self._default_order())
        )

    async def find_by_quiz_id_ordered(self, quiz_id: str) -> list[Question]:
        key = parse_id(quiz_id)
        if key is None:
            return []
        return await self._scalars(
            select(QuestionRow)
            .where(QuestionRow.quiz_id == key)
            .order_by(QuestionRow.order, QuestionRow.created_at, QuestionRow.id)
        )
