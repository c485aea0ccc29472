"""
generations.py
- Purpose: POST /api/generations, generate flashcard proposals from source text.
- Design: Keep router thin. Parse + validate here, delegate the pipeline to
  GenerationService, map domain failures to the error envelope.
"""

import uuid

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from flashgen.api.deps import get_current_user_id, get_generation_service
from flashgen.constants.statuses import FlashcardStatus, parse_flashcard_status
from flashgen.core import ErrorCode, ErrorReason
from flashgen.core.errors import bad_request
from flashgen.core.responses import success_response
from flashgen.routers.error_mapping import map_generation_error
from flashgen.schemas.api import ERROR_RESPONSES, ApiErrorResponse, ApiSuccessResponse
from flashgen.schemas.generation import GenerationGetResponseDTO
from flashgen.services.generation_service import GenerationService
from flashgen.validations.generation_validators import validate_generation_command

router = APIRouter(prefix="/api", tags=["Generations"])


async def read_json_body(request: Request):
    try:
        return await request.json()
    except ValueError as e:
        raise bad_request(ErrorReason.MALFORMED_JSON, code=ErrorCode.MALFORMED_JSON) from e


@router.post(
    "/generations",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiSuccessResponse[GenerationGetResponseDTO],
    responses={**ERROR_RESPONSES, 503: {"model": ApiErrorResponse}},
)
async def create_generation(
    request: Request,
    flashcard_status: str | None = Query(None, alias="flashcardStatus"),
    user_id: uuid.UUID = Depends(get_current_user_id),
    svc: GenerationService = Depends(get_generation_service),
) -> JSONResponse:
    body = await read_json_body(request)
    command = validate_generation_command(body)
    initial_status = parse_flashcard_status(flashcard_status) or FlashcardStatus.PENDING

    try:
        result = await svc.generate_flashcards(
            text=command.generation_source_text,
            model=command.generation_model,
            user_id=user_id,
            status=initial_status,
        )
    except Exception as e:
        raise map_generation_error(e) from e

    return success_response(GenerationGetResponseDTO.from_result(result), status_code=status.HTTP_201_CREATED)
