from catalog.repositories.base import OrderedRepositoryMixin, SQLAlchemyRepository, parse_id
from catalog.repositories.language import LanguageRepository
from catalog.repositories.module import ModuleRepository
from catalog.repositories.material import MaterialRepository
from catalog.repositories.assessment import (
    AssignmentRepository,
    QuestionRepository,
    QuizRepository,
)

__all__ = [
    "SQLAlchemyRepository",
    "OrderedRepositoryMixin",
    "parse_id",
    "LanguageRepository",
    "ModuleRepository",
    "MaterialRepository",
    "AssignmentRepository",
    "QuizRepository",
    "QuestionRepository",
]
