"""
responses.py
- Purpose: Build the {apiData|apiError, apiMetadata} envelope every endpoint returns.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from flashgen.core.errors import AppError
from flashgen.core.request_context import get_request_id
from flashgen.schemas.api import ApiMetadata


def build_metadata() -> dict[str, Any]:
    meta = ApiMetadata(
        api_timestamp=datetime.now(timezone.utc),
        api_request_id=get_request_id() or str(uuid.uuid4()),
    )
    return meta.model_dump(by_alias=True, mode="json")


def success_response(data: BaseModel, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "apiData": data.model_dump(by_alias=True, mode="json"),
            "apiMetadata": build_metadata(),
        },
    )


def error_response(exc: AppError) -> JSONResponse:
    content = exc.to_dict()
    content["apiMetadata"] = build_metadata()
    return JSONResponse(status_code=exc.status_code, content=content)
