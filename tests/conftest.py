"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock

import pytest

from fmp_mcp.client import FMPClient
from fmp_mcp.dispatcher import Dispatcher


@pytest.fixture
def api_key(monkeypatch):
    """Provide a credential through the environment."""
    monkeypatch.setenv("FMP_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch, tmp_path):
    """Make sure neither the environment nor a .env file supplies a credential."""
    monkeypatch.delenv("FMP_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def mock_client():
    """Provide a stub upstream client; set ``call.return_value`` per test."""
    client = AsyncMock(spec=FMPClient)
    client.call.return_value = []
    return client


@pytest.fixture
def dispatcher(mock_client):
    """Provide a dispatcher wired to the stub client."""
    return Dispatcher(client=mock_client)
