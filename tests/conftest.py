"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from user_management_backend.api import create_api
from user_management_backend.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DOCS_ENABLED", "true")
    monkeypatch.setenv("DIAGNOSTICS_ENABLED", "true")
    monkeypatch.setenv("LOG_FORMAT", "json")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Return a test client over a fresh application and seeded store."""
    app = create_api()
    with TestClient(app) as test_client:
        yield test_client
