"""
errs.api.main

Purpose:
    Example FastAPI application wired with request ids, logging and the
    structured error handlers.

Author:
    Kanir Pandya

Created:
    2026-10-18
"""

from __future__ import annotations

from fastapi import FastAPI

from errs.api.routes.v1 import v1_router
from errs.contracts.request_id_policy import RequestIdPolicy
from errs.error_handlers import register_error_handlers
from errs.logging.logging_config import configure_logging
from errs.middleware.request_id import RequestIdMiddleware
from errs.settings import get_settings


def create_app() -> FastAPI:
    settings = get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version)

    policy = RequestIdPolicy()
    app.add_middleware(RequestIdMiddleware, policy=policy)

    register_error_handlers(app, policy=policy)

    app.include_router(v1_router)

    return app
