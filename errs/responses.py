"""
errs.responses

Purpose:
    Turn any exception into exactly one JSON response.
    Structured errors are returned verbatim with their mapped status;
    everything else becomes an opaque 500.

Author:
    Kanir Pandya

Created:
    2026-10-18
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi.responses import JSONResponse
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from errs.contracts.error_codes import status_text
from errs.contracts.error_contract import ErrorResponse
from errs.errors import Error

logger = logging.getLogger(__name__)


def find_error(err: BaseException | None) -> Error | None:
    """
    Return the first Error on the exception chain (group members first,
    then explicit cause, then implicit context), or None.
    """
    seen: set[int] = set()
    stack = [err]

    while stack:
        cur = stack.pop()
        if cur is None or id(cur) in seen:
            continue
        seen.add(id(cur))

        if isinstance(cur, Error):
            return cur

        # Pushed in reverse so __cause__ is visited before __context__.
        stack.append(cur.__context__)
        stack.append(cur.__cause__)

        if isinstance(cur, BaseExceptionGroup):
            stack.extend(reversed(cur.exceptions))

    return None


def error_response(err: Error) -> ErrorResponse:
    return ErrorResponse(
        code=err.code,
        message=err.message,
        info=dict(err.info) if err.info else None,
        timestamp=err.timestamp,
    )


def response_error(err: BaseException) -> JSONResponse:
    e = find_error(err)
    if e is not None:
        try:
            content = error_response(e).to_content()
        except (PydanticSerializationError, ValidationError):
            logger.exception("Failed to serialize error %s", e)
        else:
            return JSONResponse(status_code=e.http_status_code(), content=content)
    else:
        logger.warning("Non-structured error mapped to 500: %s", type(err).__name__)

    status = HTTPStatus.INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=int(status), content=status_text(status))
