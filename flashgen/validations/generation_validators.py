"""
generation_validators.py
- Purpose: Boundary validation for generation requests.
- Design: Map pydantic errors onto the bounds-specific error codes the UI
  branches on, so the service only ever sees a valid command.
"""

from typing import Any

from pydantic import ValidationError

from flashgen.core import AppError, ErrorCode, ErrorReason
from flashgen.core.errors import bad_request
from flashgen.schemas.generation import (
    SOURCE_TEXT_MAX_LENGTH,
    SOURCE_TEXT_MIN_LENGTH,
    GenerationCreateCommand,
)

TEXT_FIELDS = {"generationSourceText", "generation_source_text"}
MODEL_FIELDS = {"generationModel", "generation_model"}


def _field(err: dict) -> str | None:
    loc = err.get("loc") or ()
    return str(loc[0]) if loc else None


def _json_safe_errors(errors: list[dict]) -> list[dict[str, Any]]:
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")} for e in errors]


def generation_error_from_validation(exc: ValidationError) -> AppError:
    """Pick the most specific error code for a failed GenerationCreateCommand."""
    errors = exc.errors()
    for err in errors:
        if _field(err) not in TEXT_FIELDS:
            continue
        if err.get("type") == "string_too_short":
            return bad_request(ErrorReason.TEXT_TOO_SHORT, code=ErrorCode.TEXT_TOO_SHORT)
        if err.get("type") == "string_too_long":
            return bad_request(ErrorReason.TEXT_TOO_LONG, code=ErrorCode.TEXT_TOO_LONG)

    if any(_field(e) in MODEL_FIELDS for e in errors):
        return bad_request(ErrorReason.MODEL_REQUIRED, code=ErrorCode.MODEL_REQUIRED)

    return bad_request(
        ErrorReason.VALIDATION_FAILED,
        code=ErrorCode.VALIDATION_ERROR,
        details={"errors": _json_safe_errors(errors)},
    )


def validate_generation_command(body: Any) -> GenerationCreateCommand:
    if not isinstance(body, dict):
        raise bad_request(ErrorReason.VALIDATION_FAILED, code=ErrorCode.VALIDATION_ERROR)
    try:
        return GenerationCreateCommand.model_validate(body)
    except ValidationError as e:
        raise generation_error_from_validation(e) from e


def validate_source_text_bounds(text: str, model: str) -> None:
    """Guard for callers that reach the pipeline without going through the router."""
    n = len(text or "")
    if n < SOURCE_TEXT_MIN_LENGTH:
        raise bad_request(ErrorReason.TEXT_TOO_SHORT, code=ErrorCode.TEXT_TOO_SHORT)
    if n > SOURCE_TEXT_MAX_LENGTH:
        raise bad_request(ErrorReason.TEXT_TOO_LONG, code=ErrorCode.TEXT_TOO_LONG)
    if not (model or "").strip():
        raise bad_request(ErrorReason.MODEL_REQUIRED, code=ErrorCode.MODEL_REQUIRED)
