from catalog.domain.common import UNSET, Difficulty, RecordMetadata, Unset, is_set, utcnow
from catalog.domain.language import LanguagePatch, ProgrammingLanguage
from catalog.domain.module import Module, ModulePatch
from catalog.domain.material import Material, MaterialPatch, MaterialType
from catalog.domain.assignment import Assignment, AssignmentPatch, TestCase
from catalog.domain.quiz import Quiz, QuizPatch
from catalog.domain.question import Question, QuestionOption, QuestionPatch
from catalog.domain.ordering import OrderChange, OrderedItem
from catalog.domain.pagination import PageRequest, PageResult, PaginationMeta

__all__ = [
    "UNSET",
    "Unset",
    "is_set",
    "utcnow",
    "Difficulty",
    "RecordMetadata",
    "ProgrammingLanguage",
    "LanguagePatch",
    "Module",
    "ModulePatch",
    "Material",
    "MaterialPatch",
    "MaterialType",
    "Assignment",
    "AssignmentPatch",
    "TestCase",
    "Quiz",
    "QuizPatch",
    "Question",
    "QuestionOption",
    "QuestionPatch",
    "OrderChange",
    "OrderedItem",
    "PageRequest",
    "PageResult",
    "PaginationMeta",
]
