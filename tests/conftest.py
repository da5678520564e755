"""Pytest configuration and shared fixtures for asana-client tests."""

import pytest

from asana_client.config import ClientConfig


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear Asana environment variables before each test.

    This prevents a developer's real token or settings leaking into tests.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("ASANA_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def config() -> ClientConfig:
    """Explicit configuration, so no .env file is consulted."""
    return ClientConfig(token="test-token")
