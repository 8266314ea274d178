"""
App-level tests: CORS config, health routes, and settings loading.
"""

import os
from unittest.mock import patch

import pytest

os.environ.setdefault("BREVO_API_KEY", "test-brevo-key")

from fastapi.testclient import TestClient


# ---------------------------------------------------------------------------
# CORS configuration tests
# ---------------------------------------------------------------------------

class TestCorsConfiguration:
    """CORS origins are read from env vars and always include localhost:3000."""

    def test_cors_includes_localhost_by_default(self):
        from request_relay.main import get_cors_origins
        with patch.dict(os.environ, {"CORS_ORIGINS": ""}):
            assert get_cors_origins() == ["http://localhost:3000"]

    def test_cors_includes_additional_origins_from_env(self):
        with patch.dict(os.environ, {"CORS_ORIGINS": "https://sccountertops.ca, https://www.sccountertops.ca"}):
            from request_relay.main import get_cors_origins
            origins = get_cors_origins()
        assert "https://sccountertops.ca" in origins
        assert "https://www.sccountertops.ca" in origins
        assert "http://localhost:3000" in origins

    def test_cors_origins_deduped(self):
        with patch.dict(os.environ, {"CORS_ORIGINS": "http://localhost:3000,https://sccountertops.ca,"}):
            from request_relay.main import get_cors_origins
            origins = get_cors_origins()
        assert origins.count("http://localhost:3000") == 1
        assert "" not in origins


# ---------------------------------------------------------------------------
# Health routes
# ---------------------------------------------------------------------------

class TestHealthRoutes:

    @pytest.fixture()
    def client(self):
        from request_relay.main import app
        return TestClient(app)

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["message"] == "Service Request Relay"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestEmailSettings:

    def test_defaults(self):
        from request_relay.config import DEFAULT_BREVO_API_URL, load_email_settings

        keys = [
            "SENDER_NAME", "SENDER_EMAIL", "RECIPIENT_NAME", "RECIPIENT_EMAIL",
            "BREVO_API_URL", "BREVO_TIMEOUT_SECONDS",
        ]
        env = {key: "" for key in keys}
        with patch.dict(os.environ, env):
            settings = load_email_settings()

        assert settings.sender_name == "FloForm Service Request"
        assert settings.sender_email == "sam@sccountertops.ca"
        assert settings.recipient_name == "FloForm Service Team"
        assert settings.recipient_email == "sbeaumont@floform.com"
        assert settings.api_url == DEFAULT_BREVO_API_URL
        assert settings.timeout == 30.0

    def test_timeout_from_env(self):
        from request_relay.config import load_email_settings
        with patch.dict(os.environ, {"BREVO_TIMEOUT_SECONDS": "12.5"}):
            assert load_email_settings().timeout == 12.5

    def test_bad_timeout_falls_back(self):
        from request_relay.config import load_email_settings
        with patch.dict(os.environ, {"BREVO_TIMEOUT_SECONDS": "soon"}):
            assert load_email_settings().timeout == 30.0

    def test_api_key_read_per_call(self):
        from request_relay.config import get_brevo_api_key
        with patch.dict(os.environ, {"BREVO_API_KEY": "rotated-key"}):
            assert get_brevo_api_key() == "rotated-key"
        with patch.dict(os.environ, {"BREVO_API_KEY": ""}):
            assert get_brevo_api_key() == ""
