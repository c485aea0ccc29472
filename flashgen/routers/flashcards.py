"""
flashcards.py
- Purpose: POST /api/flashcards/batch, save manual cards and accepted proposals.
"""

import uuid

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from flashgen.api.deps import get_current_user_id, get_flashcard_service
from flashgen.core.responses import success_response
from flashgen.schemas.api import ERROR_RESPONSES, ApiSuccessResponse
from flashgen.schemas.flashcard import FlashcardBatchCreateCommand, FlashcardBatchResponseDTO, FlashcardGetResponseDTO
from flashgen.services.flashcard_service import FlashcardService

router = APIRouter(prefix="/api/flashcards", tags=["Flashcards"])


@router.post(
    "/batch",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiSuccessResponse[FlashcardBatchResponseDTO],
    responses=ERROR_RESPONSES,
)
def create_flashcards_batch(
    command: FlashcardBatchCreateCommand,
    user_id: uuid.UUID = Depends(get_current_user_id),
    svc: FlashcardService = Depends(get_flashcard_service),
) -> JSONResponse:
    rows = svc.create_batch(command.flashcard_list, user_id=user_id)
    data = FlashcardBatchResponseDTO(
        list_items=[FlashcardGetResponseDTO.from_flashcard(r) for r in rows],
        list_total=len(rows),
    )
    return success_response(data, status_code=status.HTTP_201_CREATED)
