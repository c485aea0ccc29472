"""
error_mapping.py
- Purpose: Translate pipeline failures into AppError at the HTTP boundary.
- Design: The generation package knows nothing about status codes; this is
  the single place that decides them.
"""

from fastapi import status as http_status

from flashgen.core import AppError, ErrorCode, ErrorReason
from flashgen.core.errors import reason_text
from flashgen.generation.errors import GenerationFailure, GenerationFailureCategory, PersistenceFailure

_FAILURE_MAP: dict[GenerationFailureCategory, tuple[ErrorCode, ErrorReason, int]] = {
    GenerationFailureCategory.TIMEOUT: (
        ErrorCode.AI_SERVICE_TIMEOUT,
        ErrorReason.AI_TIMEOUT,
        http_status.HTTP_500_INTERNAL_SERVER_ERROR,
    ),
    GenerationFailureCategory.SERVICE_OVERLOAD: (
        ErrorCode.AI_SERVICE_OVERLOADED,
        ErrorReason.AI_OVERLOADED,
        http_status.HTTP_503_SERVICE_UNAVAILABLE,
    ),
    GenerationFailureCategory.CONTENT_POLICY: (
        ErrorCode.CONTENT_POLICY_VIOLATION,
        ErrorReason.CONTENT_POLICY,
        http_status.HTTP_400_BAD_REQUEST,
    ),
    GenerationFailureCategory.INVALID_RESPONSE: (
        ErrorCode.AI_SERVICE_ERROR,
        ErrorReason.AI_FAILED,
        http_status.HTTP_500_INTERNAL_SERVER_ERROR,
    ),
    GenerationFailureCategory.UNKNOWN: (
        ErrorCode.AI_SERVICE_ERROR,
        ErrorReason.AI_FAILED,
        http_status.HTTP_500_INTERNAL_SERVER_ERROR,
    ),
}


def _error(code: ErrorCode, reason: ErrorReason, status_code: int, exc: Exception) -> AppError:
    return AppError(
        code=code,
        reason=reason_text(reason),
        status_code=status_code,
        details={"message": str(exc) or type(exc).__name__},
    )


def map_generation_error(exc: Exception) -> AppError:
    if isinstance(exc, AppError):
        return exc

    if isinstance(exc, GenerationFailure):
        code, reason, status_code = _FAILURE_MAP[exc.category]
        return _error(code, reason, status_code, exc)

    if isinstance(exc, PersistenceFailure):
        if exc.connection_lost:
            return _error(
                ErrorCode.DATABASE_CONNECTION,
                ErrorReason.DATABASE_UNAVAILABLE,
                http_status.HTTP_500_INTERNAL_SERVER_ERROR,
                exc,
            )
        return _error(ErrorCode.DATABASE_ERROR, ErrorReason.DATABASE_ERROR, http_status.HTTP_500_INTERNAL_SERVER_ERROR, exc)

    return _error(ErrorCode.UNKNOWN, ErrorReason.UNKNOWN, http_status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


def map_performance_error(exc: Exception) -> AppError:
    if isinstance(exc, AppError):
        return exc
    return _error(
        ErrorCode.PERFORMANCE_TEST_ERROR,
        ErrorReason.PERFORMANCE_TEST_FAILED,
        http_status.HTTP_500_INTERNAL_SERVER_ERROR,
        exc,
    )
