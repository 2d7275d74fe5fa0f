"""Tests for the application factory and access logging."""

import logging

from fastapi.testclient import TestClient

from whispssh.app import create_app
from whispssh.config import Settings
from whispssh.middleware import AccessLogMiddleware
from whispssh.services import ChannelRegistry


class TestCreateApp:
    def test_state_wiring(self):
        """Test the registry and settings are stored on app state."""
        settings = Settings(send_timeout=3.0)
        app = create_app(settings)

        assert isinstance(app.state.registry, ChannelRegistry)
        assert app.state.settings is settings

    def test_separate_apps_have_separate_registries(self):
        """Test each app instance owns its own registry."""
        first = create_app(Settings())
        second = create_app(Settings())

        with TestClient(first) as client:
            client.post("/channel", json={"password": "x"})

        with TestClient(second) as client:
            assert client.get("/health").json()["channels"] == 0

    def test_access_log_middleware_toggle(self):
        """Test the access log middleware follows the setting."""
        enabled = create_app(Settings(access_log=True))
        disabled = create_app(Settings(access_log=False))

        assert any(m.cls is AccessLogMiddleware for m in enabled.user_middleware)
        assert not any(m.cls is AccessLogMiddleware for m in disabled.user_middleware)


class TestAccessLog:
    def test_logs_request_line(self, client: TestClient, caplog):
        """Test each HTTP request is logged with method, path and status."""
        with caplog.at_level(logging.INFO, logger="whispssh.middleware"):
            client.post("/channel", json={"password": "secret"})

        assert "POST /channel - 201" in caplog.text

    def test_logs_client_errors(self, client: TestClient, caplog):
        """Test rejected requests are logged with their status."""
        with caplog.at_level(logging.INFO, logger="whispssh.middleware"):
            client.post("/channel", json={})

        assert "POST /channel - 400" in caplog.text
