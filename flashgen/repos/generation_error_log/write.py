from sqlalchemy.orm import Session

from flashgen.models.generation_error_log import GenerationErrorLog


class GenerationErrorLogWriteRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_entry(
        self,
        *,
        user_id,
        model: str,
        source_text_hash: str,
        source_text_length: int,
        error_code: str,
        error_message: str,
    ) -> GenerationErrorLog:
        row = GenerationErrorLog(
            user_id=user_id,
            model=model,
            source_text_hash=source_text_hash,
            source_text_length=source_text_length,
            error_code=error_code,
            error_message=error_message,
        )
        self.db.add(row)
        self.db.flush()
        return row
