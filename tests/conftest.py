"""
pytest configuration and fixtures.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from sports_backend.app.main import create_app
from sports_backend.app.services import Stores


@pytest.fixture
def stores() -> Stores:
    """Fresh, empty collections for one test."""
    return Stores()


@pytest.fixture
def app(stores: Stores):
    """Application wired to the test's own stores."""
    return create_app(stores)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """HTTP client for the test application."""
    with TestClient(app) as test_client:
        yield test_client
