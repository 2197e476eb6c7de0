"""
errs.logging.logging_config

Purpose:
    Central logging configuration.
    Ensures request_id is present in logs (including uvicorn.access and uvicorn.error),
    so causes logged by new_error() can be correlated with the failing request.

Author:
    Kanir Pandya

Created:
    2026-10-18
"""

from __future__ import annotations

import logging

from errs.logging.request_id_filter import RequestIdFilter

LOG_FORMAT = "%(asctime)s | %(levelname)s | request_id=%(request_id)s | %(name)s | %(message)s"


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    return handler


def _configure_logger(
    logger_name: str, handler: logging.Handler, level: int, *, clear_handlers: bool
) -> None:
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if clear_handlers:
        logger.handlers.clear()

    logger.addHandler(handler)
    logger.propagate = False


def configure_logging(level: str | int = logging.INFO) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = _make_handler(level)

    # Don't clear root handlers; other libs (and pytest's caplog) may own some.
    root = logging.getLogger()
    root.setLevel(level)
    if not any(getattr(h, "_errs_handler", False) for h in root.handlers):
        handler._errs_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    # Uvicorn uses these loggers; clear their handlers so our formatter/filter wins.
    _configure_logger("uvicorn", handler, level, clear_handlers=True)
    _configure_logger("uvicorn.error", handler, level, clear_handlers=True)
    _configure_logger("uvicorn.access", handler, level, clear_handlers=True)
