"""Assignment model."""

import uuid
from typing import Any

from sqlalchemy import JSON, Enum, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from catalog.domain.common import Difficulty
from catalog.models.base import Base, TimestampMixin, UUIDMixin


class AssignmentRow(Base, UUIDMixin, TimestampMixin):
    """Assignment table; test cases and hints are stored as JSON."""

    __tablename__ = "assignments"

    module_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("modules.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    difficulty: Mapped[Difficulty] = mapped_column(
        Enum(Difficulty, name="difficulty_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    starter_code: Mapped[str | None] = mapped_column(Text, nullable=True)
    test_cases: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    hints: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    max_score: Mapped[int] = mapped_column(Integer, nullable=False, default=100)
    time_limit: Mapped[int | None] = mapped_column(Integer, nullable=True)
