"""
flashcard_validators.py
- Purpose: Source / generation-id consistency for flashcards.
"""

from uuid import UUID

from flashgen.constants.statuses import AI_SOURCES, FlashcardSource
from flashgen.core import ErrorCode, ErrorReason
from flashgen.core.errors import bad_request


def source_matches_generation(source: FlashcardSource, generation_id: UUID | None) -> bool:
    if source in AI_SOURCES:
        return generation_id is not None
    return generation_id is None


def validate_source_generation(source: FlashcardSource, generation_id: UUID | None, *, index: int | None = None) -> None:
    if source_matches_generation(source, generation_id):
        return
    details = {"flashcardSource": source.value, "flashcardGenerationId": str(generation_id) if generation_id else None}
    if index is not None:
        details["index"] = index
    raise bad_request(
        ErrorReason.SOURCE_GENERATION_MISMATCH,
        code=ErrorCode.SOURCE_GENERATION_MISMATCH,
        details=details,
    )
