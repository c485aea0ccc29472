"""
flashcard/write.py
- Purpose: Write-side DB operations for Flashcard rows.
- Design: No business logic; persistence only. Caller owns commit/rollback.
"""

from sqlalchemy.orm import Session

from flashgen.constants.statuses import FlashcardSource, FlashcardStatus
from flashgen.models.flashcard import Flashcard


class FlashcardWriteRepo:
    def __init__(self, db: Session):
        self.db = db

    def bulk_insert_proposals(self, *, generation_id, user_id, proposals) -> list[Flashcard]:
        """Insert generated proposals tagged with their generation (ids preserved)."""
        rows = [
            Flashcard(
                id=p.id,
                user_id=user_id,
                generation_id=generation_id,
                front=p.front,
                back=p.back,
                status=p.status,
                source=FlashcardSource.AI_FULL,
            )
            for p in proposals
        ]
        self.db.add_all(rows)
        self.db.flush()
        return rows

    def create_many(self, *, user_id, items: list[dict]) -> list[Flashcard]:
        rows = [
            Flashcard(
                user_id=user_id,
                generation_id=it.get("generation_id"),
                front=it["front"],
                back=it["back"],
                source=it["source"],
                status=it.get("status") or FlashcardStatus.ACCEPTED,
            )
            for it in items
        ]
        self.db.add_all(rows)
        self.db.flush()
        for r in rows:
            self.db.refresh(r)
        return rows
