"""Fixtures for API tests.

Each test gets its own app over a fresh mocked container, so in-memory
state never leaks between tests.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from microblog.config import Settings
from microblog.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def app() -> FastAPI:
    """Create app backed by mock components."""
    return create_app(Settings(environment="test"), container=build_test_container())


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client (redirects are asserted, not followed)."""
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def other_client(app: FastAPI) -> TestClient:
    """Second client with its own cookie jar, sharing the same app."""
    return TestClient(app, follow_redirects=False)

