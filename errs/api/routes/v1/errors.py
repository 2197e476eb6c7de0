"""
errs.api.routes.v1.errors

Purpose:
    Error catalog endpoint: every error code with its HTTP status and
    default message, for client discovery.

Author:
    Kanir Pandya

Created:
    2026-10-18
"""

from __future__ import annotations

from fastapi import APIRouter

from errs.errors import COMMON_ERRORS

router = APIRouter(tags=["errors"])


@router.get("/errors")
def error_catalog() -> dict:
    return {
        "errors": [
            {
                "code": str(e.code),
                "status": e.http_status_code(),
                "message": e.message,
            }
            for e in COMMON_ERRORS
        ]
    }
