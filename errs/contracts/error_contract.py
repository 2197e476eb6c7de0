"""
errs.contracts.error_contract

Purpose:
    Stable JSON body for structured error responses.
    Used by response_error to serialize Error values consistently.

Author:
    Kanir Pandya

Created:
    2026-10-18
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from errs.contracts.error_codes import ErrorCode


class ErrorResponse(BaseModel):
    code: ErrorCode | str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    info: dict[str, Any] | None = Field(
        default=None, description="Optional structured details (omitted when empty)"
    )
    timestamp: datetime = Field(..., description="When the error was created (RFC 3339)")

    def to_content(self) -> dict[str, Any]:
        """JSON-ready payload; `info` is dropped when absent or empty."""
        content = self.model_dump(mode="json")
        if not content.get("info"):
            content.pop("info", None)
        return content
