# flashgen/generation/types.py
import uuid
from dataclasses import dataclass, field

from flashgen.constants.statuses import FlashcardSource, FlashcardStatus


@dataclass(frozen=True)
class FlashcardProposal:
    front: str
    back: str
    status: FlashcardStatus = FlashcardStatus.PENDING
    source: FlashcardSource = FlashcardSource.AI_FULL
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    # Filled in by the pipeline once the attempt row exists
    generation_id: uuid.UUID | None = None
    user_id: uuid.UUID | None = None


@dataclass(frozen=True)
class GenerationMeta:
    user_id: uuid.UUID
    model: str                      # label of generator/config, e.g. "gpt-4o-mini"
    source_text_hash: str           # md5 hex of the sanitized text
    source_text_length: int


@dataclass(frozen=True)
class GenerationErrorLogEntry:
    user_id: uuid.UUID
    model: str
    source_text_hash: str
    source_text_length: int
    error_code: str                 # e.g. "AI_SERVICE_ERROR.TIMEOUT", "GENERAL_ERROR"
    error_message: str


@dataclass(frozen=True)
class GenerationResult:
    generation_id: uuid.UUID
    proposals: list[FlashcardProposal]
    duration_ms: int

    @property
    def count(self) -> int:
        return len(self.proposals)
