"""
generation_error_log.py
- Purpose: Write-only audit trail of failed generation attempts. Never updated.
"""
import uuid
from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from flashgen.models.base import Base, utcnow


class GenerationErrorLog(Base):
    __tablename__ = "generation_error_logs"
    __table_args__ = (
        Index("ix_generation_error_logs_user_created", "user_id", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    model: Mapped[str] = mapped_column(Text, nullable=False)

    source_text_hash: Mapped[str] = mapped_column(String(32), nullable=False)
    source_text_length: Mapped[int] = mapped_column(Integer, nullable=False)

    error_code: Mapped[str] = mapped_column(String(64), nullable=False)
    error_message: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
