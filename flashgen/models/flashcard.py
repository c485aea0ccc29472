"""
flashcard.py
- Purpose: Flashcards, both AI proposals (tagged with their generation) and manual cards.
- Invariant: AI-sourced rows carry a generation_id; manual rows never do.
"""
import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Enum, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flashgen.constants.statuses import FlashcardSource, FlashcardStatus
from flashgen.models.base import Base, utcnow


def _enum_values(enum_cls) -> list[str]:
    return [m.value for m in enum_cls]


class Flashcard(Base):
    __tablename__ = "flashcards"
    __table_args__ = (
        CheckConstraint(
            "(source = 'manual' AND generation_id IS NULL) "
            "OR (source <> 'manual' AND generation_id IS NOT NULL)",
            name="ck_flashcards_source_generation",
        ),
        Index("ix_flashcards_user_status", "user_id", "status"),
        Index("ix_flashcards_generation", "generation_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    generation_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("generations.id"), nullable=True)

    front: Mapped[str] = mapped_column(Text, nullable=False)
    back: Mapped[str] = mapped_column(Text, nullable=False)

    status: Mapped[FlashcardStatus] = mapped_column(
        Enum(FlashcardStatus, name="flashcard_status", native_enum=False, values_callable=_enum_values, length=16),
        nullable=False,
        default=FlashcardStatus.PENDING,
    )
    source: Mapped[FlashcardSource] = mapped_column(
        Enum(FlashcardSource, name="flashcard_source", native_enum=False, values_callable=_enum_values, length=16),
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )

    generation: Mapped["Generation"] = relationship(back_populates="flashcards")
