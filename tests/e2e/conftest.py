"""Shared fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from remark.interface.api.app import create_app
from tests.conftest import new_content
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with a fresh in-memory container."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


@pytest.fixture
def content_id() -> str:
    return str(new_content())

