"""Course module model."""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from catalog.models.language import LanguageRow
    from catalog.models.material import MaterialRow


class ModuleRow(Base, UUIDMixin, TimestampMixin):
    """Module table; slugs are unique per language."""

    __tablename__ = "modules"
    __table_args__ = (
        UniqueConstraint("language_id", "slug", name="uq_modules_language_slug"),
    )

    language_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("programming_languages.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    syllabus: Mapped[str | None] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    language: Mapped["LanguageRow"] = relationship(
        "LanguageRow",
        back_populates="modules",
    )
    materials: Mapped[list["MaterialRow"]] = relationship(
        "MaterialRow",
        back_populates="module",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
