"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from shorturl.core.setting import Settings
from shorturl.main import create_app


@pytest.fixture
def database_url(tmp_path) -> str:
    """URL of a fresh SQLite file per test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'shorturl.db'}"


@pytest.fixture
def settings(database_url) -> Settings:
    """Settings pointing at the per-test database."""
    return Settings(DATABASE_URL=database_url, _env_file=None)


@pytest.fixture
def app(settings):
    """FastAPI application built from the test settings."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client; entering it runs startup (pool + migrations)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/page",
        "https://github.com/user/repo",
        "http://localhost:8080/path?query=value&other=1",
    ]
