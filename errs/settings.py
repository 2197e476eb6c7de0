"""
errs.settings

Purpose:
    Centralized configuration for the example FastAPI service.
    Keeps deployment flexible and avoids hard-coded app metadata.

Author:
    Kanir Pandya

Created:
    2026-10-18
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field


class Settings(BaseModel):
    service_name: str = Field(default="errs-api")
    service_version: str = Field(default="0.1.0")

    log_level: str = Field(default="INFO")


def get_settings() -> Settings:
    return Settings(log_level=os.getenv("ERRS_LOG_LEVEL", "INFO"))
