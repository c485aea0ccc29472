"""
generation.py
- Purpose: One row per generation attempt (request to turn source text into proposals).
- Created with zero counts before the generator runs; finalized once with
  generated_count + duration after proposals are stored.
"""
import uuid
from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flashgen.models.base import Base, utcnow


class Generation(Base):
    __tablename__ = "generations"
    __table_args__ = (
        Index("ix_generations_user_created", "user_id", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)

    model: Mapped[str] = mapped_column(Text, nullable=False)

    generated_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # mutated by the review flow, not by the generation pipeline
    accepted_unedited_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    accepted_edited_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    source_text_hash: Mapped[str] = mapped_column(String(32), nullable=False)
    source_text_length: Mapped[int] = mapped_column(Integer, nullable=False)
    generation_duration: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # ms

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )

    flashcards: Mapped[list["Flashcard"]] = relationship(back_populates="generation")
