from catalog.models.base import Base
from catalog.models.language import LanguageRow
from catalog.models.module import ModuleRow
from catalog.models.material import MaterialRow
from catalog.models.assignment import AssignmentRow
from catalog.models.quiz import QuizRow, QuestionRow

__all__ = [
    "Base",
    "LanguageRow",
    "ModuleRow",
    "MaterialRow",
    "AssignmentRow",
    "QuizRow",
    "QuestionRow",
]
