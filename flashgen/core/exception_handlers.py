"""
exception_handlers.py
- Purpose: Convert AppError, request validation errors and unhandled exceptions
  into the API error envelope.

Also logs errors with request context so failures are diagnosable.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from flashgen.core import AppError, ErrorCode, ErrorReason
from flashgen.core.errors import bad_request, internal_error
from flashgen.core.responses import error_response

logger = logging.getLogger("flashgen.exceptions")


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning(
        "app_error",
        extra={
            "path": str(getattr(request.url, "path", "")),
            "method": request.method,
            "status_code": exc.status_code,
            "code": exc.code.value,
            "reason": exc.reason,
        },
    )
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        err = bad_request(ErrorReason.MALFORMED_JSON, code=ErrorCode.MALFORMED_JSON)
    else:
        err = bad_request(
            ErrorReason.VALIDATION_FAILED,
            code=ErrorCode.VALIDATION_ERROR,
            details={"errors": [{"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")} for e in errors]},
        )
    return await app_error_handler(request, err)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_exception",
        extra={"path": str(getattr(request.url, "path", "")), "method": request.method},
    )
    return error_response(internal_error(ErrorReason.UNKNOWN, code=ErrorCode.UNKNOWN))
