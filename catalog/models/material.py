"""Learning material model."""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.domain.material import MaterialType
from catalog.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from catalog.models.module import ModuleRow


class MaterialRow(Base, UUIDMixin, TimestampMixin):
    """Material table."""

    __tablename__ = "materials"

    module_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("modules.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[MaterialType] = mapped_column(
        Enum(MaterialType, name="material_type_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    module: Mapped["ModuleRow"] = relationship(
        "ModuleRow",
        back_populates="materials",
    )
