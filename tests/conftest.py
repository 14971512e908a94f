"""Shared fixtures for ghostkit tests."""

import pytest

from ghostkit.client import GhostClient

SITE_URL = "https://example.ghost.io"
API_URL = f"{SITE_URL}/ghost/api/admin"

# 32-byte secret, hex encoded
ADMIN_KEY = "5f3d4a9b8c7e2f1a9b8c7e2f:8e1f3c5a7b9d2e4f6a8c0b1d3e5f7a9c8e1f3c5a7b9d2e4f6a8c0b1d3e5f7a9c"


@pytest.fixture
def api_url():
    """Base URL of the Admin API for the test site."""
    return API_URL


@pytest.fixture
def client():
    """Client pointed at the test site."""
    return GhostClient(SITE_URL, ADMIN_KEY)


@pytest.fixture(autouse=True)
def clear_ghost_env(monkeypatch):
    """Keep the caller's Ghost environment variables out of tests."""
    monkeypatch.delenv("GHOST_API_URL", raising=False)
    monkeypatch.delenv("GHOST_ADMIN_API_KEY", raising=False)
