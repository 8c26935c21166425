from __future__ import annotations

import pytest

from app.shared.config import DEFAULT_ALLOWED_ORIGINS, load_settings


def test_load_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ("STRIPE_SECRET_KEY", "STRIPE_WEBHOOK_SECRET", "FRONTEND_URL", "PORT", "NODE_ENV", "APP_ENV", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.stripe_secret_key == ""
    assert settings.port == 4000
    assert settings.environment == "development"
    assert settings.log_level == "INFO"
    assert settings.allowed_origins == DEFAULT_ALLOWED_ORIGINS


def test_load_settings_adds_frontend_url_to_allowed_origins(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FRONTEND_URL", "https://app.pixelfit.io")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.frontend_url == "https://app.pixelfit.io"
    assert settings.port == 8080
    assert settings.environment == "production"
    assert settings.log_level == "DEBUG"
    assert settings.allowed_origins[-1] == "https://app.pixelfit.io"
    assert set(DEFAULT_ALLOWED_ORIGINS) <= set(settings.allowed_origins)


def test_load_settings_does_not_duplicate_known_origin(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FRONTEND_URL", "https://pixelfit.io")

    settings = load_settings()

    assert settings.allowed_origins.count("https://pixelfit.io") == 1
