"""Pytest fixtures for the tutorial site tests."""

import pytest
import tempfile
from pathlib import Path

from fastapi.testclient import TestClient


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_settings(temp_dir):
    """Override settings for tests."""
    from webtutor.settings import Settings

    return Settings(
        EXAMPLES_DIR=temp_dir / "examples",
        MATERIALIZE_EXAMPLES=True,
    )


@pytest.fixture
def patched_settings(test_settings, monkeypatch):
    """Point every module holding a settings reference at the test settings."""
    monkeypatch.setattr("webtutor.settings.settings", test_settings)
    monkeypatch.setattr("webtutor.main.settings", test_settings)
    monkeypatch.setattr("webtutor.services.downloads.settings", test_settings)
    yield test_settings


@pytest.fixture
def client(patched_settings):
    """Create test client with the application lifespan running."""
    from webtutor.main import app

    with TestClient(app) as test_client:
        yield test_client
