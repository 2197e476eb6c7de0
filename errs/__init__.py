"""
errs

Purpose:
    Error codes, structured errors and HTTP error responses for FastAPI handlers.

Author:
    Kanir Pandya

Created:
    2026-10-18
"""

from errs.contracts.error_codes import ErrorCode, status_for, status_text
from errs.contracts.error_contract import ErrorResponse
from errs.error_handlers import register_error_handlers
from errs.errors import (
    BAD_REQUEST,
    COMMON_ERRORS,
    FORBIDDEN,
    GONE,
    INTERNAL_SERVER_ERROR,
    NOT_FOUND,
    NOT_IMPLEMENTED,
    SERVICE_UNAVAILABLE,
    TOO_MANY_REQUESTS,
    UNAUTHORIZED,
    Error,
    ErrorOptions,
    new_error,
)
from errs.responses import find_error, response_error
from errs.validation import (
    FieldViolation,
    FieldViolationError,
    from_validation_failure,
    invalid_struct_error,
)

__all__ = [
    "BAD_REQUEST",
    "COMMON_ERRORS",
    "FORBIDDEN",
    "GONE",
    "INTERNAL_SERVER_ERROR",
    "NOT_FOUND",
    "NOT_IMPLEMENTED",
    "SERVICE_UNAVAILABLE",
    "TOO_MANY_REQUESTS",
    "UNAUTHORIZED",
    "Error",
    "ErrorCode",
    "ErrorOptions",
    "ErrorResponse",
    "FieldViolation",
    "FieldViolationError",
    "find_error",
    "from_validation_failure",
    "invalid_struct_error",
    "new_error",
    "register_error_handlers",
    "response_error",
    "status_for",
    "status_text",
]
