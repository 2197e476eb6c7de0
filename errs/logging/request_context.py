"""
errs.logging.request_context

Purpose:
    Request-scoped context storage using contextvars.
    Lets log records (including error causes) carry the request id.

Author:
    Kanir Pandya

Created:
    2026-10-18
"""

from __future__ import annotations

import contextvars

request_id_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id",
    default=None,
)
