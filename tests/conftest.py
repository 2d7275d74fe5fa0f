"""Pytest configuration and fixtures for whispssh tests."""

import itertools

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

from whispssh.app import create_app
from whispssh.config import Settings
from whispssh.services import Channel, ChannelRegistry


@pytest.fixture
def id_factory():
    """Deterministic id generator yielding id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def registry():
    """Create a fresh ChannelRegistry instance."""
    return ChannelRegistry()


@pytest.fixture
def channel():
    """Create a channel protected by the password 'secret'."""
    return Channel("channel-1", "secret", send_timeout=0.5)


@pytest.fixture
def make_connection():
    """Factory for mock connection handles recording sent payloads."""

    def _make():
        conn = MagicMock()
        conn.send = AsyncMock()
        conn.recv = AsyncMock(return_value=None)
        conn.close = AsyncMock()
        return conn

    return _make


@pytest.fixture
def client():
    """TestClient sharing one event loop across requests and sessions."""
    app = create_app(Settings(send_timeout=1.0))
    with TestClient(app) as test_client:
        yield test_client
