"""Tests for settings loading."""

import pytest

from passkey_sdk.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.rp_id == "localhost"
        assert settings.timeout_ms == 60000
        assert settings.password_delay == 1.0
        assert settings.store_url == "memory"
        assert settings.virtual_authenticator

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PASSKEY_ORIGIN", "https://login.example.com:8443")
        monkeypatch.setenv("PASSKEY_RP_NAME", "Example")
        monkeypatch.setenv("PASSKEY_TIMEOUT_MS", "30000")
        monkeypatch.setenv("PASSKEY_PASSWORD_DELAY", "0.25")
        monkeypatch.setenv("PASSKEY_STORE_URL", "sqlite:///passkeys.db")
        monkeypatch.setenv("PASSKEY_VIRTUAL_AUTHENTICATOR", "false")
        monkeypatch.setenv("SDK_DEV_MODE", "TRUE")
        monkeypatch.setenv("SDK_PORT", "8080")

        settings = Settings.from_env()

        assert settings.rp_id == "login.example.com"
        assert settings.rp_name == "Example"
        assert settings.timeout_ms == 30000
        assert settings.password_delay == 0.25
        assert settings.store_url == "sqlite:///passkeys.db"
        assert not settings.virtual_authenticator
        assert settings.dev_mode
        assert settings.port == 8080

    def test_from_env_defaults(self, monkeypatch):
        for name in ("PASSKEY_ORIGIN", "PASSKEY_STORE_URL", "SDK_DEV_MODE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.origin == "https://localhost"
        assert not settings.dev_mode

    def test_origin_without_host(self):
        with pytest.raises(ValueError):
            Settings(origin="not-a-url").rp_id
