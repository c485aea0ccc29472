# flashgen/services/record_store.py
"""
record_store.py
- Purpose: Persistence for one generation request: the attempt row, its
  flashcard proposals and the error-log sink.
- Design: Each step commits on its own. There is no transaction spanning the
  attempt row and the proposals; if proposal insertion fails, that step is
  rolled back and the attempt row stays with generated_count = 0.
  Blocking session work runs in a worker thread the caller may abandon on
  timeout, so the error-log sink writes through its own short-lived session
  rather than the request session a stuck thread may still hold.
"""

from __future__ import annotations

import functools
import logging
import uuid
from typing import Callable, Sequence, TypeVar

import anyio.to_thread
from sqlalchemy.exc import DBAPIError, DisconnectionError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from flashgen.generation.errors import PersistenceFailure
from flashgen.generation.types import FlashcardProposal, GenerationErrorLogEntry, GenerationMeta
from flashgen.repos.flashcard.write import FlashcardWriteRepo
from flashgen.repos.generation.write import GenerationWriteRepo
from flashgen.repos.generation_error_log.write import GenerationErrorLogWriteRepo

logger = logging.getLogger("flashgen.record_store")

T = TypeVar("T")


def _is_connection_error(exc: SQLAlchemyError) -> bool:
    if isinstance(exc, DisconnectionError):
        return True
    return isinstance(exc, DBAPIError) and bool(exc.connection_invalidated)


async def _in_thread(fn: Callable[..., T], *args) -> T:
    # Cancelling the awaiting task returns at once; the thread runs to completion unobserved
    return await anyio.to_thread.run_sync(functools.partial(fn, *args), abandon_on_cancel=True)


class GenerationRecordStore:
    def __init__(self, db: Session, session_factory: sessionmaker):
        self.db = db
        self.session_factory = session_factory
        self.generation_write = GenerationWriteRepo(db)
        self.flashcard_write = FlashcardWriteRepo(db)

    def _in_transaction(self, action: str, fn: Callable[[], T]) -> T:
        try:
            out = fn()
            self.db.commit()
            return out
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceFailure(
                f"Failed to {action}: {e.__class__.__name__}",
                connection_lost=_is_connection_error(e),
            ) from e

    # ----------------------------
    # Pipeline steps
    # ----------------------------
    async def create_attempt(self, meta: GenerationMeta) -> uuid.UUID:
        def _create() -> uuid.UUID:
            row = self.generation_write.create_generation(
                user_id=meta.user_id,
                model=meta.model,
                source_text_hash=meta.source_text_hash,
                source_text_length=meta.source_text_length,
            )
            return row.id

        return await _in_thread(self._in_transaction, "create generation record", _create)

    async def insert_proposals(
        self,
        generation_id: uuid.UUID,
        proposals: Sequence[FlashcardProposal],
        user_id: uuid.UUID,
    ) -> None:
        def _insert() -> None:
            self.flashcard_write.bulk_insert_proposals(
                generation_id=generation_id,
                user_id=user_id,
                proposals=proposals,
            )

        await _in_thread(self._in_transaction, "insert flashcard proposals", _insert)

    async def finalize_attempt(self, generation_id: uuid.UUID, *, generated_count: int, duration_ms: int) -> None:
        def _finalize() -> None:
            row = self.generation_write.finalize_generation(
                generation_id,
                generated_count=generated_count,
                duration_ms=duration_ms,
            )
            if row is None:
                raise PersistenceFailure(f"Failed to update generation record: {generation_id} not found")

        await _in_thread(self._in_transaction, "update generation record", _finalize)

    # ----------------------------
    # Error sink (best-effort)
    # ----------------------------
    def _write_error_log(self, entry: GenerationErrorLogEntry) -> None:
        with self.session_factory() as db:
            GenerationErrorLogWriteRepo(db).create_entry(
                user_id=entry.user_id,
                model=entry.model,
                source_text_hash=entry.source_text_hash,
                source_text_length=entry.source_text_length,
                error_code=entry.error_code,
                error_message=entry.error_message,
            )
            db.commit()

    async def log_error(self, entry: GenerationErrorLogEntry) -> None:
        """Never raises: a failed audit write must not replace the error being reported."""
        try:
            await _in_thread(self._write_error_log, entry)
        except Exception:
            logger.exception(
                "error_log.write_failed",
                extra={"error_code": entry.error_code, "model": entry.model},
            )
