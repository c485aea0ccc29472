"""
generation.py (schemas)
- Purpose: Request/response DTOs for the generation endpoints.
"""

from typing import Any
from uuid import UUID

from pydantic import Field

from flashgen.constants.statuses import FlashcardSource, FlashcardStatus
from flashgen.generation.types import GenerationResult
from flashgen.schemas.api import CamelModel

SOURCE_TEXT_MIN_LENGTH = 1000
SOURCE_TEXT_MAX_LENGTH = 10000


class GenerationCreateCommand(CamelModel):
    generation_source_text: str = Field(min_length=SOURCE_TEXT_MIN_LENGTH, max_length=SOURCE_TEXT_MAX_LENGTH)
    generation_model: str = Field(min_length=1)


class FlashcardProposalDTO(CamelModel):
    flashcard_id: UUID
    flashcard_front: str
    flashcard_back: str
    flashcard_status: FlashcardStatus
    flashcard_source: FlashcardSource = FlashcardSource.AI_FULL
    flashcard_generation_id: UUID | None = None


class GenerationGetResponseDTO(CamelModel):
    generation_id: UUID
    generation_flashcard_proposals: list[FlashcardProposalDTO]
    generation_count: int
    generation_duration: int

    @classmethod
    def from_result(cls, result: GenerationResult) -> "GenerationGetResponseDTO":
        return cls(
            generation_id=result.generation_id,
            generation_flashcard_proposals=[
                FlashcardProposalDTO(
                    flashcard_id=p.id,
                    flashcard_front=p.front,
                    flashcard_back=p.back,
                    flashcard_status=p.status,
                    flashcard_source=p.source,
                    flashcard_generation_id=p.generation_id,
                )
                for p in result.proposals
            ],
            generation_count=result.count,
            generation_duration=result.duration_ms,
        )


class PerformanceTestCommand(GenerationCreateCommand):
    # Normalized leniently by normalize_performance_options, so left untyped here
    performance_options: Any = None
