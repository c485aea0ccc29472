# flashgen/services/flashcard_service.py
"""
flashcard_service.py
- Purpose: Create flashcards in bulk (manual cards and accepted AI proposals).
- Design: All-or-nothing. Every item is checked before anything is written,
  and the whole batch is one commit.
"""

from __future__ import annotations

import logging
import uuid

from fastapi import status as http_status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from flashgen.core import AppError, ErrorCode, ErrorReason
from flashgen.core.errors import reason_text
from flashgen.models.flashcard import Flashcard
from flashgen.repos.flashcard.write import FlashcardWriteRepo
from flashgen.schemas.flashcard import FlashcardCreateCommand
from flashgen.validations.flashcard_validators import validate_source_generation

logger = logging.getLogger("flashgen.flashcard_service")


class FlashcardService:
    def __init__(self, db: Session):
        self.db = db
        self.flashcard_write = FlashcardWriteRepo(db)

    def create_batch(self, items: list[FlashcardCreateCommand], *, user_id: uuid.UUID) -> list[Flashcard]:
        for i, it in enumerate(items):
            validate_source_generation(it.flashcard_source, it.flashcard_generation_id, index=i)

        try:
            rows = self.flashcard_write.create_many(
                user_id=user_id,
                items=[
                    {
                        "front": it.flashcard_front,
                        "back": it.flashcard_back,
                        "source": it.flashcard_source,
                        "generation_id": it.flashcard_generation_id,
                        "status": it.flashcard_status,
                    }
                    for it in items
                ],
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("flashcards.batch_failed", extra={"count": len(items)})
            raise AppError(
                code=ErrorCode.DATABASE_ERROR,
                reason=reason_text(ErrorReason.DATABASE_ERROR),
                status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
                details={"message": e.__class__.__name__},
            ) from e

        logger.info("flashcards.batch_created", extra={"count": len(rows)})
        return rows
