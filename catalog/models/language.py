"""Programming language model."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Enum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.domain.common import Difficulty
from catalog.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from catalog.models.module import ModuleRow


class LanguageRow(Base, UUIDMixin, TimestampMixin):
    """Programming language table."""

    __tablename__ = "programming_languages"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    icon: Mapped[str | None] = mapped_column(String(500), nullable=True)
    difficulty: Mapped[Difficulty] = mapped_column(
        Enum(Difficulty, name="difficulty_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=Difficulty.BEGINNER,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)

    # Relationships
    modules: Mapped[list["ModuleRow"]] = relationship(
        "ModuleRow",
        back_populates="language",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
