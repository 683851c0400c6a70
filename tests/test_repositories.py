"""Repository tests against an in-memory SQLite database."""

from datetime import timedelta

import pytest

from catalog.domain import (
    Assignment,
    Difficulty,
    MaterialType,
    Question,
    QuestionOption,
    Quiz,
    TestCase,
)
from catalog.errors import NotFoundError
from catalog.models import LanguageRow
from catalog.repositories import (
    AssignmentRepository,
    LanguageRepository,
    MaterialRepository,
    ModuleRepository,
    QuestionRepository,
    QuizRepository,
    SQLAlchemyRepository,
)
from tests.conftest import PAST, language, material, module, past_meta


@pytest.mark.asyncio
async def test_create_assigns_id_and_keeps_timestamps(session):
    created = await LanguageRepository(session).create(language())

    assert created.id
    assert not created.is_new
    assert created.meta.created_at == PAST
    assert created.meta.updated_at == PAST


@pytest.mark.asyncio
async def test_find_by_slug_and_unknown_ids(session):
    repo = LanguageRepository(session)
    created = await repo.create(language("kotlin", "Kotlin"))

    assert (await repo.find_by_slug("kotlin")).id == created.id
    assert await repo.find_by_slug("missing") is None
    assert await repo.find_by_id("not-a-uuid") is None
    assert await repo.exists("not-a-uuid") is False


@pytest.mark.asyncio
async def test_search_by_name_is_case_insensitive_and_escapes_wildcards(session):
    repo = LanguageRepository(session)
    await repo.create(language("javascript", "JavaScript"))
    await repo.create(language("java", "Java"))
    await repo.create(language("c-sharp", "C#"))

    assert [lang.slug for lang in await repo.search_by_name("JAVA")] == ["java", "javascript"]
    assert await repo.search_by_name("%") == []


@pytest.mark.asyncio
async def test_update_writes_fields_and_timestamp(session):
    repo = LanguageRepository(session)
    created = await repo.create(language())

    created.deactivate()
    updated = await repo.update(created.id, created)

    assert updated.is_active is False
    assert updated.meta.updated_at > PAST
    assert updated.meta.created_at == PAST


@pytest.mark.asyncio
async def test_update_and_delete_missing_rows(session):
    repo = LanguageRepository(session)
    ghost = language()

    with pytest.raises(NotFoundError):
        await repo.update("00000000-0000-0000-0000-000000000000", ghost)
    with pytest.raises(NotFoundError):
        await repo.delete("00000000-0000-0000-0000-000000000000")


@pytest.mark.asyncio
async def test_find_all_pages_by_creation_time(session):
    repo = LanguageRepository(session)
    for minutes, slug in enumerate(["a", "b", "c", "d"]):
        await repo.create(language(slug, slug.upper(), meta=past_meta(PAST + timedelta(minutes=minutes))))

    page = await repo.find_all(skip=1, take=2)
    by_name = await repo.find_all(order_by={"name": "desc"})

    assert [lang.slug for lang in page] == ["b", "c"]
    assert [lang.slug for lang in by_name] == ["d", "c", "b", "a"]
    assert await repo.count() == 4
    assert await repo.count(is_active=True) == 4


@pytest.mark.asyncio
async def test_module_order_ties_break_on_creation_time(session):
    lang = await LanguageRepository(session).create(language())
    repo = ModuleRepository(session)
    newer = await repo.create(
        module(lang.id, "newer", order=1, meta=past_meta(PAST + timedelta(hours=1)))
    )
    older = await repo.create(module(lang.id, "older", order=1))
    first = await repo.create(module(lang.id, "first", order=0))

    ordered = await repo.find_by_language_id_ordered(lang.id)

    assert [m.id for m in ordered] == [first.id, older.id, newer.id]
    assert (await repo.find_by_language_and_slug(lang.id, "older")).id == older.id
    assert await repo.find_by_language_and_slug(lang.id, "nope") is None


@pytest.mark.asyncio
async def test_deleting_language_cascades_to_modules_and_materials(session):
    lang = await LanguageRepository(session).create(language())
    mod = await ModuleRepository(session).create(module(lang.id, "basics"))
    await MaterialRepository(session).create(material(mod.id, "Intro"))

    await LanguageRepository(session).delete(lang.id)

    assert await ModuleRepository(session).count() == 0
    assert await MaterialRepository(session).count() == 0


@pytest.mark.asyncio
async def test_material_lookups(session):
    lang = await LanguageRepository(session).create(language())
    mod = await ModuleRepository(session).create(module(lang.id, "basics"))
    repo = MaterialRepository(session)
    await repo.create(material(mod.id, "Setup video", order=1, type=MaterialType.VIDEO, duration=12))
    await repo.create(material(mod.id, "Reading", order=0))

    assert [m.title for m in await repo.find_by_module_id_ordered(mod.id)] == ["Reading", "Setup video"]
    videos = await repo.find_by_type(MaterialType.VIDEO)
    assert [m.duration for m in videos] == [12]
    assert [m.title for m in await repo.search_by_title("read")] == ["Reading"]


@pytest.mark.asyncio
async def test_assignment_and_quiz_lookups_by_language(session):
    lang = await LanguageRepository(session).create(language())
    other = await LanguageRepository(session).create(language("go", "Go"))
    mod = await ModuleRepository(session).create(module(lang.id, "basics"))
    other_mod = await ModuleRepository(session).create(module(other.id, "go-basics"))

    assignments = AssignmentRepository(session)
    created = await assignments.create(
        Assignment(
            module_id=mod.id,
            title="FizzBuzz",
            description="Classic",
            difficulty=Difficulty.INTERMEDIATE,
            test_cases=[TestCase(input="15", expected_output="FizzBuzz")],
            hints=["modulo"],
            meta=past_meta(),
        )
    )
    await assignments.create(
        Assignment(
            module_id=other_mod.id,
            title="Hello",
            description="Print",
            difficulty=Difficulty.BEGINNER,
            meta=past_meta(),
        )
    )
    quizzes = QuizRepository(session)
    await quizzes.create(Quiz(module_id=mod.id, title="Checkpoint", meta=past_meta()))

    by_language = await assignments.find_by_language_id(lang.id)
    assert [a.id for a in by_language] == [created.id]
    assert by_language[0].test_cases == [TestCase(input="15", expected_output="FizzBuzz")]
    assert by_language[0].hints == ["modulo"]
    assert await assignments.find_by_difficulty(mod.id, Difficulty.BEGINNER) == []
    assert len(await assignments.find_by_module_id(mod.id)) == 1
    assert [q.title for q in await quizzes.find_by_language_id(lang.id)] == ["Checkpoint"]
    assert await quizzes.find_by_language_id(other.id) == []


@pytest.mark.asyncio
async def test_question_orders_are_applied_in_bulk(session):
    lang = await LanguageRepository(session).create(language())
    mod = await ModuleRepository(session).create(module(lang.id, "basics"))
    quiz = await QuizRepository(session).create(Quiz(module_id=mod.id, title="Q", meta=past_meta()))
    repo = QuestionRepository(session)
    option = QuestionOption(id="a", option_text="Yes", is_correct=True, order=0)
    first = await repo.create(
        Question(quiz_id=quiz.id, question="One?", order=0, options=[option], meta=past_meta())
    )
    second = await repo.create(
        Question(quiz_id=quiz.id, question="Two?", order=1, options=[option], meta=past_meta())
    )

    first.reorder(1)
    second.reorder(0)
    await repo.apply_orders([first, second])

    ordered = await repo.find_by_quiz_id_ordered(quiz.id)
    assert [q.question for q in ordered] == ["Two?", "One?"]
    assert ordered[0].options == [option]
    assert ordered[0].meta.updated_at > PAST


def test_repository_without_mapping_hooks_cannot_be_built():
    class HalfRepository(SQLAlchemyRepository):
        row_type = LanguageRow

        def to_domain(self, row):
            return row

    with pytest.raises(TypeError):
        HalfRepository(None)
