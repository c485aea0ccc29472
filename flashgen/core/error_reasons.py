"""
error_reasons.py
- Purpose: Human-friendly messages paired with ErrorCode.
- Keep these stable; the frontend shows them verbatim.
"""

from enum import Enum


class ErrorReason(str, Enum):
    UNKNOWN = "An unexpected error occurred"

    MALFORMED_JSON = "Invalid JSON in request body"
    TEXT_TOO_SHORT = "Text must be at least 1000 characters long"
    TEXT_TOO_LONG = "Text cannot exceed 10000 characters"
    MODEL_REQUIRED = "Model name is required"
    VALIDATION_FAILED = "Validation failed"
    CONTENT_POLICY = "The input text violates content policy guidelines"
    SOURCE_GENERATION_MISMATCH = "Flashcard source is incompatible with the provided generation id"

    AI_TIMEOUT = "The AI service took too long to respond"
    AI_FAILED = "Error occurred while generating flashcards with AI"
    AI_OVERLOADED = "AI service is currently overloaded, please try again later"

    DATABASE_ERROR = "Error occurred while storing data"
    DATABASE_UNAVAILABLE = "Database connection not available"

    PERFORMANCE_TEST_FAILED = "Performance test execution failed"
