"""
errors.py
- Purpose: AppError used across validators/routers for consistent errors.
- Pattern: raise AppError(...) at the boundary, handler converts to the API envelope.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import status as http_status

from flashgen.core.error_codes import ErrorCode
from flashgen.core.error_reasons import ErrorReason


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: dict[str, Any] | None = None
    message: str | None = None  # Optional override for reason

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message or self.reason}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiError": {
                "apiErrorCode": self.code.value,
                "apiErrorMessage": self.message if self.message else self.reason,
                "apiErrorDetails": self.details,
            }
        }


def reason_text(reason: str) -> str:
    # str() on a str-Enum member renders "ErrorReason.X", not its value
    return reason.value if isinstance(reason, ErrorReason) else str(reason)


# Convenience constructors (keep validators/routers terse)
def bad_request(
    reason: str = ErrorReason.VALIDATION_FAILED,
    *,
    code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    details: dict | None = None,
) -> AppError:
    return AppError(
        code=code,
        reason=reason_text(reason),
        status_code=http_status.HTTP_400_BAD_REQUEST,
        details=details,
    )


def internal_error(
    reason: str = ErrorReason.UNKNOWN,
    *,
    code: ErrorCode = ErrorCode.UNKNOWN,
    details: dict | None = None,
) -> AppError:
    return AppError(
        code=code,
        reason=reason_text(reason),
        status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
        details=details,
    )
