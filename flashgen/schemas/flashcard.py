"""
flashcard.py (schemas)
- Purpose: DTOs for manual/batch flashcard creation.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from flashgen.constants.statuses import FlashcardSource, FlashcardStatus
from flashgen.schemas.api import CamelModel

FRONT_MAX_LENGTH = 200
BACK_MAX_LENGTH = 500


class FlashcardCreateCommand(CamelModel):
    flashcard_front: str = Field(max_length=FRONT_MAX_LENGTH)
    flashcard_back: str = Field(max_length=BACK_MAX_LENGTH)
    flashcard_source: FlashcardSource
    flashcard_generation_id: UUID | None = None
    flashcard_status: FlashcardStatus = FlashcardStatus.ACCEPTED


class FlashcardBatchCreateCommand(CamelModel):
    flashcard_list: list[FlashcardCreateCommand] = Field(min_length=1)


class FlashcardGetResponseDTO(CamelModel):
    flashcard_id: UUID
    flashcard_front: str
    flashcard_back: str
    flashcard_status: FlashcardStatus
    flashcard_source: FlashcardSource
    flashcard_generation_id: UUID | None
    flashcard_created_at: datetime
    flashcard_updated_at: datetime
    flashcard_user_id: UUID

    @classmethod
    def from_flashcard(cls, card) -> "FlashcardGetResponseDTO":
        """Mapper from ORM row -> response DTO."""
        return cls(
            flashcard_id=card.id,
            flashcard_front=card.front,
            flashcard_back=card.back,
            flashcard_status=card.status,
            flashcard_source=card.source,
            flashcard_generation_id=card.generation_id,
            flashcard_created_at=card.created_at,
            flashcard_updated_at=card.updated_at,
            flashcard_user_id=card.user_id,
        )


class FlashcardBatchResponseDTO(CamelModel):
    list_items: list[FlashcardGetResponseDTO]
    list_total: int
