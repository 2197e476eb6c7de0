"""
errs.error_handlers

Purpose:
    Register global exception handlers so every failure leaves the API
    through response_error().

Notes:
    - The Exception handler runs outside RequestIdMiddleware, so it echoes
      the request id header itself.

Author:
    Kanir Pandya

Created:
    2026-10-18
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from errs.contracts.request_id_policy import RequestIdPolicy
from errs.errors import Error
from errs.logging.request_context import request_id_ctx_var
from errs.responses import response_error
from errs.validation import from_validation_failure

logger = logging.getLogger(__name__)


def _get_request_id(request: Request) -> str | None:
    rid = getattr(getattr(request, "state", None), "request_id", None)
    if isinstance(rid, str) and rid:
        return rid

    rid2 = request_id_ctx_var.get()
    if isinstance(rid2, str) and rid2:
        return rid2

    return None


def register_error_handlers(app: FastAPI, policy: RequestIdPolicy | None = None) -> None:
    """
    Register global exception handlers on the FastAPI app.
    """
    policy = policy or RequestIdPolicy()

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return response_error(from_validation_failure(exc))

    @app.exception_handler(Error)
    async def handle_error(request: Request, exc: Error) -> JSONResponse:
        return response_error(exc)

    @app.exception_handler(Exception)
    async def handle_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception in API request", exc_info=exc)

        response = response_error(exc)
        rid = _get_request_id(request)
        if rid:
            response.headers[policy.response_header] = rid
        return response
