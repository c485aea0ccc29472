# flashgen/core/__init__.py
from flashgen.core.errors import AppError
from flashgen.core.error_codes import ErrorCode
from flashgen.core.error_reasons import ErrorReason

__all__ = ["AppError", "ErrorCode", "ErrorReason"]
