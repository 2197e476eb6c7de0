"""
errs.errors

Purpose:
    Structured error type and its constructor.
    Handlers raise (or hand over) Error; response_error converts it to JSON.

Notes:
    - Error is frozen: code/message/info/timestamp never change after creation.
      info is a read-only top-level copy (MappingProxyType).
    - ErrorOptions replaces variadic option callbacks with named fields.
    - A cause passed as log_err is logged once and then dropped; it is not
      part of the error's data.

Author:
    Kanir Pandya

Created:
    2026-10-18
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping

from errs.contracts.error_codes import ErrorCode, status_for, status_text

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=False)
class Error(Exception):
    code: ErrorCode
    message: str
    info: Mapping[str, Any] | None = None
    timestamp: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        # Top-level read-only copy; nested values are the caller's.
        if self.info is not None and not isinstance(self.info, MappingProxyType):
            object.__setattr__(self, "info", MappingProxyType(dict(self.info)))

    def __reduce__(self):
        info = dict(self.info) if self.info is not None else None
        return (type(self), (self.code, self.message, info, self.timestamp))

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def http_status_code(self) -> int:
        return status_for(self.code)


@dataclass(frozen=True)
class ErrorOptions:
    """
    Optional settings for new_error().

    info:
        Mapping attached as the error's info (copied).
    log_err:
        Inner error logged at ERROR level together with the message.
    """

    info: Mapping[str, Any] | None = None
    log_err: BaseException | None = None

    def merge(self, other: ErrorOptions | None) -> ErrorOptions:
        """Return options where `other`'s non-None fields replace ours."""
        if other is None:
            return self
        return ErrorOptions(
            info=other.info if other.info is not None else self.info,
            log_err=other.log_err if other.log_err is not None else self.log_err,
        )


def new_error(
    code: ErrorCode,
    message: str,
    options: ErrorOptions | None = None,
) -> Error:
    opts = options or ErrorOptions()

    if opts.log_err is not None:
        logger.error("%s", message, exc_info=opts.log_err)

    return Error(code=code, message=message, info=opts.info, timestamp=_utcnow())


def _common(code: ErrorCode) -> Error:
    return new_error(code, status_text(status_for(code)))


# Common errors, one per code. Read-only; build a fresh one with new_error()
# when info or a specific message is needed.
BAD_REQUEST = _common(ErrorCode.BAD_REQUEST)
UNAUTHORIZED = _common(ErrorCode.UNAUTHORIZED)
FORBIDDEN = _common(ErrorCode.FORBIDDEN)
NOT_FOUND = _common(ErrorCode.NOT_FOUND)
GONE = _common(ErrorCode.GONE)
TOO_MANY_REQUESTS = _common(ErrorCode.TOO_MANY_REQUESTS)
INTERNAL_SERVER_ERROR = _common(ErrorCode.INTERNAL_SERVER_ERROR)
NOT_IMPLEMENTED = _common(ErrorCode.NOT_IMPLEMENTED)
SERVICE_UNAVAILABLE = _common(ErrorCode.SERVICE_UNAVAILABLE)

COMMON_ERRORS: tuple[Error, ...] = (
    BAD_REQUEST,
    UNAUTHORIZED,
    FORBIDDEN,
    NOT_FOUND,
    GONE,
    TOO_MANY_REQUESTS,
    INTERNAL_SERVER_ERROR,
    NOT_IMPLEMENTED,
    SERVICE_UNAVAILABLE,
)
