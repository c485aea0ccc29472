"""
performance.py
- Purpose: POST /api/generations-performance-test, run the real pipeline
  against a tunable synthetic generator for load testing.
- Design: Same orchestrator as /api/generations. Every failure is retried
  up to the requested count and surfaced as PERFORMANCE_TEST_ERROR.
"""

import logging
import uuid
from dataclasses import asdict

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from flashgen.api.deps import (
    PerformanceGeneratorFactory,
    get_current_user_id,
    get_performance_generator_factory,
    get_record_store,
)
from flashgen.constants.statuses import FlashcardStatus
from flashgen.core import ErrorCode, ErrorReason
from flashgen.core.errors import bad_request
from flashgen.core.responses import success_response
from flashgen.generation.errors import retry_any_failure
from flashgen.routers.error_mapping import map_performance_error
from flashgen.routers.generations import read_json_body
from flashgen.schemas.api import ERROR_RESPONSES, ApiSuccessResponse
from flashgen.schemas.generation import GenerationGetResponseDTO, PerformanceTestCommand
from flashgen.services.generation_service import GenerationService
from flashgen.services.record_store import GenerationRecordStore
from flashgen.validations.performance_validators import normalize_performance_options

logger = logging.getLogger("flashgen.performance")

router = APIRouter(prefix="/api", tags=["Performance"])

MODEL_SUFFIX = "-performance-test"


@router.post(
    "/generations-performance-test",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiSuccessResponse[GenerationGetResponseDTO],
    responses=ERROR_RESPONSES,
)
async def create_performance_test_generation(
    request: Request,
    user_id: uuid.UUID = Depends(get_current_user_id),
    store: GenerationRecordStore = Depends(get_record_store),
    make_generator: PerformanceGeneratorFactory = Depends(get_performance_generator_factory),
) -> JSONResponse:
    body = await read_json_body(request)
    try:
        command = PerformanceTestCommand.model_validate(body)
    except ValidationError as e:
        raise bad_request(
            ErrorReason.VALIDATION_FAILED,
            code=ErrorCode.VALIDATION_ERROR,
            details={"errors": [{"loc": list(err.get("loc", ())), "msg": err.get("msg")} for err in e.errors()]},
        ) from e

    options = normalize_performance_options(command.performance_options)
    logger.info("performance_test.start", extra={"options": asdict(options)})

    svc = GenerationService(
        store=store,
        generator=make_generator(options),
        max_retries=options.retries,
        is_retryable=retry_any_failure,
        error_code_for=lambda exc: ErrorCode.PERFORMANCE_TEST_ERROR.value,
        model_suffix=MODEL_SUFFIX,
    )

    try:
        result = await svc.generate_flashcards(
            text=command.generation_source_text,
            model=command.generation_model,
            user_id=user_id,
            status=FlashcardStatus.PENDING,
        )
    except Exception as e:
        raise map_performance_error(e) from e

    return success_response(GenerationGetResponseDTO.from_result(result), status_code=status.HTTP_201_CREATED)
