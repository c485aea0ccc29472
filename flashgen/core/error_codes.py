# flashgen/core/error_codes.py
from enum import Enum

class ErrorCode(str, Enum):
    # Input
    MALFORMED_JSON = "INVALID_INPUT.MALFORMED_JSON"
    TEXT_TOO_SHORT = "INVALID_INPUT.TEXT_TOO_SHORT"
    TEXT_TOO_LONG = "INVALID_INPUT.TEXT_TOO_LONG"
    MODEL_REQUIRED = "INVALID_INPUT.MODEL_REQUIRED"
    VALIDATION_ERROR = "INVALID_INPUT.VALIDATION_ERROR"
    CONTENT_POLICY_VIOLATION = "INVALID_INPUT.CONTENT_POLICY_VIOLATION"
    SOURCE_GENERATION_MISMATCH = "INVALID_INPUT.SOURCE_GENERATION_MISMATCH"

    # AI service
    AI_SERVICE_TIMEOUT = "INTERNAL_ERROR.AI_SERVICE_TIMEOUT"
    AI_SERVICE_ERROR = "INTERNAL_ERROR.AI_SERVICE_ERROR"
    AI_SERVICE_OVERLOADED = "INTERNAL_ERROR.AI_SERVICE_OVERLOADED"

    # Storage
    DATABASE_ERROR = "INTERNAL_ERROR.DATABASE_ERROR"
    DATABASE_CONNECTION = "INTERNAL_ERROR.DATABASE_CONNECTION"

    UNKNOWN = "INTERNAL_ERROR.UNKNOWN"
    PERFORMANCE_TEST_ERROR = "PERFORMANCE_TEST_ERROR"
