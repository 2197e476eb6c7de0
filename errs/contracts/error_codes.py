"""
errs.contracts.error_codes

Purpose:
    Closed set of error codes and their HTTP status mapping.
    Codes are the machine-readable part of every error response.

Author:
    Kanir Pandya

Created:
    2026-10-18
"""

from __future__ import annotations

from enum import Enum
from http import HTTPStatus
from typing import Any


class ErrorCode(str, Enum):
    # Client
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    GONE = "GONE"
    TOO_MANY_REQUESTS = "TOO_MANY_REQUESTS"

    # Server
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"

    def __str__(self) -> str:
        return self.value


_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
    ErrorCode.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
    ErrorCode.FORBIDDEN: HTTPStatus.FORBIDDEN,
    ErrorCode.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorCode.GONE: HTTPStatus.GONE,
    ErrorCode.TOO_MANY_REQUESTS: HTTPStatus.TOO_MANY_REQUESTS,
    ErrorCode.INTERNAL_SERVER_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorCode.NOT_IMPLEMENTED: HTTPStatus.NOT_IMPLEMENTED,
    ErrorCode.SERVICE_UNAVAILABLE: HTTPStatus.SERVICE_UNAVAILABLE,
}


def status_for(code: Any) -> int:
    """
    Return the HTTP status for an error code.

    Accepts ErrorCode members or their raw string values; anything else
    maps to 500.
    """
    if not isinstance(code, str):
        return int(HTTPStatus.INTERNAL_SERVER_ERROR)

    try:
        member = ErrorCode(code)
    except ValueError:
        return int(HTTPStatus.INTERNAL_SERVER_ERROR)

    return int(_STATUS_BY_CODE.get(member, HTTPStatus.INTERNAL_SERVER_ERROR))


def status_text(status: int) -> str:
    """Standard reason phrase for an HTTP status, e.g. 404 -> "Not Found"."""
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""
