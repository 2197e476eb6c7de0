"""
tests.api.conftest

Shared pytest fixtures for API tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from errs.api.main import create_app


@pytest.fixture()
def app():
    return create_app()


@pytest.fixture()
def client_factory(app):
    """
    Factory fixture that creates a TestClient around the `app` fixture.

    IMPORTANT:
        Tests register their own routes on `app` before calling the factory.
        Pass raise_server_exceptions=False to observe the 500 response of an
        unhandled exception instead of having it re-raised.
    """

    def _make(*, raise_server_exceptions: bool = True) -> TestClient:
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    return client_factory()
