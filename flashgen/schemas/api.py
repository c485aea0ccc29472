"""
api.py (schemas)
- Purpose: Envelope DTOs shared by every endpoint.
- Wire format is camelCase; Python side stays snake_case via alias_generator.
"""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiMetadata(CamelModel):
    api_timestamp: datetime
    api_request_id: str


class ApiErrorBody(CamelModel):
    api_error_code: str
    api_error_message: str
    api_error_details: dict[str, Any] | None = None


class ApiErrorResponse(CamelModel):
    api_error: ApiErrorBody
    api_metadata: ApiMetadata


class ApiSuccessResponse(CamelModel, Generic[T]):
    api_data: T
    api_metadata: ApiMetadata


# OpenAPI docs for routes that return the error envelope
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ApiErrorResponse},
    500: {"model": ApiErrorResponse},
}
