# flashgen/generation/errors.py
from enum import Enum

GENERAL_ERROR_CODE = "GENERAL_ERROR"


class GenerationFailureCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONTENT_POLICY = "CONTENT_POLICY"
    SERVICE_OVERLOAD = "SERVICE_OVERLOAD"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    UNKNOWN = "UNKNOWN"


RETRYABLE_CATEGORIES = frozenset({GenerationFailureCategory.TIMEOUT, GenerationFailureCategory.SERVICE_OVERLOAD})


class GenerationFailure(Exception):
    """Classified failure of a single content-generation attempt."""

    def __init__(self, category: GenerationFailureCategory, message: str):
        super().__init__(message)
        self.category = category

    @property
    def retryable(self) -> bool:
        return self.category in RETRYABLE_CATEGORIES


class PersistenceFailure(Exception):
    """Backing-store error while writing generation records."""

    def __init__(self, message: str, *, connection_lost: bool = False):
        super().__init__(message)
        self.connection_lost = connection_lost


def is_retryable_failure(exc: BaseException) -> bool:
    return isinstance(exc, GenerationFailure) and exc.retryable


def retry_any_failure(exc: BaseException) -> bool:
    return True


def error_log_code(exc: BaseException) -> str:
    if isinstance(exc, GenerationFailure):
        return f"AI_SERVICE_ERROR.{exc.category.value}"
    return GENERAL_ERROR_CODE
