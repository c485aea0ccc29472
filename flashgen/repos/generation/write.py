"""
generation/write.py
- Purpose: Write-side DB operations for Generation attempts.
- Design: No business logic; persistence only. Caller owns commit/rollback.
"""

from sqlalchemy.orm import Session

from flashgen.models.generation import Generation


class GenerationWriteRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_generation(
        self,
        *,
        user_id,
        model: str,
        source_text_hash: str,
        source_text_length: int,
    ) -> Generation:
        row = Generation(
            user_id=user_id,
            model=model,
            generated_count=0,
            accepted_unedited_count=0,
            accepted_edited_count=0,
            source_text_hash=source_text_hash,
            source_text_length=source_text_length,
            generation_duration=0,
        )
        self.db.add(row)
        self.db.flush()
        self.db.refresh(row)
        return row

    def finalize_generation(self, generation_id, *, generated_count: int, duration_ms: int) -> Generation | None:
        row = self.db.get(Generation, generation_id)
        if not row:
            return None
        row.generated_count = generated_count
        row.generation_duration = duration_ms
        self.db.flush()
        return row
