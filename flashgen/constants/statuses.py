"""
statuses.py
- Purpose: Central source of truth for flashcard status/source tags.
- Design: Keep FE-facing values stable and explicit.
"""

from enum import Enum


class FlashcardStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class FlashcardSource(str, Enum):
    AI_FULL = "ai-full"
    AI_EDITED = "ai-edited"
    MANUAL = "manual"


AI_SOURCES = frozenset({FlashcardSource.AI_FULL, FlashcardSource.AI_EDITED})


def parse_flashcard_status(value: str | None) -> FlashcardStatus | None:
    """Lenient parse for query params: unknown values read as "not given"."""
    if not value:
        return None
    try:
        return FlashcardStatus(value)
    except ValueError:
        return None
