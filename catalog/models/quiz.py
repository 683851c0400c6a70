"""Quiz and question models."""

import uuid
from typing import Any

from sqlalchemy import JSON, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from catalog.models.base import Base, TimestampMixin, UUIDMixin


class QuizRow(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "quizzes"

    module_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("modules.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    passing_score: Mapped[int] = mapped_column(Integer, nullable=False, default=70)
    time_limit: Mapped[int | None] = mapped_column(Integer, nullable=True)


class QuestionRow(Base, UUIDMixin, TimestampMixin):
    """Question table; options are stored inline as JSON."""

    __tablename__ = "questions"

    quiz_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("quizzes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    question: Mapped[str] = mapped_column(Text, nullable=False)
    explanation: Mapped[str | None] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    options: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
