"""Initial migration with catalog tables.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # Create enums
    difficulty_enum = postgresql.ENUM(
        "BEGINNER", "INTERMEDIATE", "ADVANCED", name="difficulty_enum", create_type=False
    )
    difficulty_enum.create(op.get_bind(), checkfirst=True)

    material_type_enum = postgresql.ENUM(
        "VIDEO", "ARTICLE", "CODE_EXAMPLE", "INTERACTIVE",
        name="material_type_enum",
        create_type=False,
    )
    material_type_enum.create(op.get_bind(), checkfirst=True)

    # Create programming_languages table
    op.create_table(
        "programming_languages",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("icon", sa.String(500), nullable=True),
        sa.Column("difficulty", difficulty_enum, nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, default=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_programming_languages_slug", "programming_languages", ["slug"], unique=True
    )
    op.create_index(
        "ix_programming_languages_is_active", "programming_languages", ["is_active"], unique=False
    )

    # Create modules table
    op.create_table(
        "modules",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("language_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("description", sa.String(1000), nullable=True),
        sa.Column("syllabus", sa.Text(), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False, default=0),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["language_id"], ["programming_languages.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("language_id", "slug", name="uq_modules_language_slug"),
    )
    op.create_index("ix_modules_language_id", "modules", ["language_id"], unique=False)

    # Create materials table
    op.create_table(
        "materials",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("module_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("type", material_type_enum, nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False, default=0),
        *_timestamps(),
        sa.ForeignKeyConstraint(["module_id"], ["modules.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_materials_module_id", "materials", ["module_id"], unique=False)

    # Create assignments table
    op.create_table(
        "assignments",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("module_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("difficulty", difficulty_enum, nullable=False),
        sa.Column("starter_code", sa.Text(), nullable=True),
        sa.Column("test_cases", sa.JSON(), nullable=False),
        sa.Column("hints", sa.JSON(), nullable=True),
        sa.Column("max_score", sa.Integer(), nullable=False, default=100),
        sa.Column("time_limit", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["module_id"], ["modules.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_assignments_module_id", "assignments", ["module_id"], unique=False)

    # Create quizzes table
    op.create_table(
        "quizzes",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("module_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("passing_score", sa.Integer(), nullable=False, default=70),
        sa.Column("time_limit", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["module_id"], ["modules.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_quizzes_module_id", "quizzes", ["module_id"], unique=False)

    # Create questions table
    op.create_table(
        "questions",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("quiz_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("explanation", sa.Text(), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False, default=0),
        sa.Column("points", sa.Integer(), nullable=False, default=1),
        sa.Column("options", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["quiz_id"], ["quizzes.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_questions_quiz_id", "questions", ["quiz_id"], unique=False)


def downgrade() -> None:
    op.drop_table("questions")
    op.drop_table("quizzes")
    op.drop_table("assignments")
    op.drop_table("materials")
    op.drop_table("modules")
    op.drop_table("programming_languages")

    # Drop enum types
    op.execute("DROP TYPE IF EXISTS material_type_enum")
    op.execute("DROP TYPE IF EXISTS difficulty_enum")
