# flashgen/services/generation_service.py
"""
generation_service.py
- Purpose: The generation request pipeline.

    validate -> sanitize -> record attempt -> generate (deadline + retry)
             -> persist proposals -> finalize attempt -> result

- Design: Once the attempt row exists, every failure writes exactly one
  error-log entry (best-effort) before it propagates. Failures before that
  point propagate untouched. Domain failures are mapped to HTTP codes by the
  router, not here.
- Known gap: the attempt row and the proposals are committed separately. A crash
  between the two leaves an attempt with generated_count = 0 and no proposals.
"""

from __future__ import annotations

import asyncio
import hashlib
import logging
import time
import uuid
from dataclasses import replace
from typing import Awaitable, Callable, TypeVar

from flashgen.constants.statuses import FlashcardStatus
from flashgen.core.config import settings
from flashgen.core.request_context import set_context
from flashgen.generation.base import ContentGenerator
from flashgen.generation.errors import (
    GenerationFailure,
    GenerationFailureCategory,
    PersistenceFailure,
    error_log_code,
    is_retryable_failure,
)
from flashgen.generation.executor import RetryingTimeoutExecutor
from flashgen.generation.sanitize import sanitize_text
from flashgen.generation.types import GenerationErrorLogEntry, GenerationMeta, GenerationResult
from flashgen.services.record_store import GenerationRecordStore
from flashgen.validations.generation_validators import validate_source_text_bounds

logger = logging.getLogger("flashgen.generation_service")

T = TypeVar("T")


def hash_source_text(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


class GenerationService:
    def __init__(
        self,
        store: GenerationRecordStore,
        generator: ContentGenerator,
        *,
        executor: RetryingTimeoutExecutor | None = None,
        attempt_timeout_seconds: float | None = None,
        timeout_seconds: float | None = None,
        max_retries: int | None = None,
        is_retryable: Callable[[BaseException], bool] = is_retryable_failure,
        error_code_for: Callable[[BaseException], str] = error_log_code,
        model_suffix: str = "",
        persistence_timeout_seconds: float | None = None,
    ):
        self.store = store
        self.generator = generator
        self.executor = executor or RetryingTimeoutExecutor(
            backoff_seconds=settings.GENERATION_RETRY_BACKOFF_SECONDS,
        )
        self.attempt_timeout_seconds = (
            attempt_timeout_seconds
            if attempt_timeout_seconds is not None
            else settings.GENERATION_ATTEMPT_TIMEOUT_SECONDS
        )
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else settings.GENERATION_TIMEOUT_SECONDS
        self.max_retries = max_retries if max_retries is not None else settings.GENERATION_MAX_RETRIES
        self.is_retryable = is_retryable
        self.error_code_for = error_code_for
        self.model_suffix = model_suffix
        self.persistence_timeout_seconds = (
            persistence_timeout_seconds
            if persistence_timeout_seconds is not None
            else settings.PERSISTENCE_TIMEOUT_SECONDS
        )

    # ----------------------------
    # Generation step
    # ----------------------------
    def _log_retry(self, attempt: int, failure: BaseException) -> None:
        logger.warning(
            "generation.retry",
            extra={
                "attempt": attempt,
                "max_retries": self.max_retries,
                "category": getattr(getattr(failure, "category", None), "value", None),
                "error_type": type(failure).__name__,
                "error": str(failure),
            },
        )

    async def _generate(self, text: str, model: str, status: FlashcardStatus):
        run = self.executor.run(
            lambda: self.generator.generate(text, model, status),
            timeout_seconds=self.attempt_timeout_seconds,
            max_retries=self.max_retries,
            is_retryable=self.is_retryable,
            on_retry=self._log_retry,
        )
        try:
            proposals = await asyncio.wait_for(run, timeout=self.timeout_seconds)
        except asyncio.TimeoutError as e:
            raise GenerationFailure(
                GenerationFailureCategory.TIMEOUT,
                f"AI service request timed out after {self.timeout_seconds:g} seconds",
            ) from e

        if not proposals:
            raise GenerationFailure(
                GenerationFailureCategory.INVALID_RESPONSE,
                "AI service returned no flashcard proposals",
            )
        return list(proposals)

    # ----------------------------
    # Persistence step
    # ----------------------------
    async def _persist(self, action: str, step: Awaitable[T]) -> T:
        """Await one record-store step under the persistence deadline; a hung step is abandoned."""
        try:
            return await asyncio.wait_for(step, timeout=self.persistence_timeout_seconds)
        except asyncio.TimeoutError as e:
            raise PersistenceFailure(
                f"Failed to {action}: timed out after {self.persistence_timeout_seconds:g} seconds"
            ) from e

    # ----------------------------
    # Pipeline
    # ----------------------------
    async def generate_flashcards(
        self,
        *,
        text: str,
        model: str,
        user_id: uuid.UUID,
        status: FlashcardStatus = FlashcardStatus.PENDING,
    ) -> GenerationResult:
        started = time.monotonic()

        validate_source_text_bounds(text, model)

        clean = sanitize_text(text)
        meta = GenerationMeta(
            user_id=user_id,
            model=f"{model}{self.model_suffix}",
            source_text_hash=hash_source_text(clean),
            source_text_length=len(clean),
        )

        # Nothing to attribute an error-log entry to until this returns
        generation_id = await self._persist("create generation record", self.store.create_attempt(meta))
        set_context(user_id=str(user_id), generation_id=str(generation_id))
        logger.info(
            "generation.start",
            extra={"model": meta.model, "source_text_length": meta.source_text_length, "status": status.value},
        )

        try:
            generated = await self._generate(clean, meta.model, status)
            proposals = [replace(p, generation_id=generation_id, user_id=user_id) for p in generated]

            await self._persist(
                "insert flashcard proposals",
                self.store.insert_proposals(generation_id, proposals, user_id),
            )

            duration_ms = int((time.monotonic() - started) * 1000)
            await self._persist(
                "update generation record",
                self.store.finalize_attempt(
                    generation_id,
                    generated_count=len(proposals),
                    duration_ms=duration_ms,
                ),
            )
        except Exception as e:
            await self._record_failure(meta, e)
            raise

        logger.info(
            "generation.succeeded",
            extra={"generated_count": len(proposals), "duration_ms": duration_ms},
        )
        return GenerationResult(generation_id=generation_id, proposals=proposals, duration_ms=duration_ms)

    async def _record_failure(self, meta: GenerationMeta, exc: Exception) -> None:
        code = self.error_code_for(exc)
        logger.error(
            "generation.failed",
            extra={"error_code": code, "error_type": type(exc).__name__, "error": str(exc)},
        )
        entry = GenerationErrorLogEntry(
            user_id=meta.user_id,
            model=meta.model,
            source_text_hash=meta.source_text_hash,
            source_text_length=meta.source_text_length,
            error_code=code,
            error_message=str(exc) or type(exc).__name__,
        )
        try:
            await asyncio.wait_for(self.store.log_error(entry), timeout=self.persistence_timeout_seconds)
        except asyncio.TimeoutError:
            logger.error("error_log.write_failed", extra={"error_code": code, "error": "timed out"})
