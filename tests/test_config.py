"""
Startup configuration checks.
"""

import logging

import pytest

from careerion import main
from careerion.core.config import DEV_JWT_SECRET, Settings
from careerion.core.errors import ConfigurationError


def _use_settings(monkeypatch, **values):
    monkeypatch.setattr(main, "settings", Settings(**values))


def test_production_without_jwt_secret_fails(monkeypatch):
    _use_settings(monkeypatch, environment="production", jwt_secret="")

    with pytest.raises(ConfigurationError) as exc_info:
        main.check_configuration()

    assert "JWT_SECRET" in exc_info.value.message


def test_production_with_jwt_secret_starts(monkeypatch, caplog):
    _use_settings(monkeypatch, environment="production", jwt_secret="a-real-secret")

    with caplog.at_level(logging.WARNING, logger="careerion.main"):
        main.check_configuration()

    assert "JWT_SECRET is not set" not in caplog.text


def test_development_fallback_is_logged(monkeypatch, caplog):
    _use_settings(monkeypatch, environment="development", jwt_secret="")

    with caplog.at_level(logging.WARNING, logger="careerion.main"):
        main.check_configuration()

    assert "JWT_SECRET is not set" in caplog.text
    assert main.settings.signing_secret == DEV_JWT_SECRET


def test_missing_gemini_key_is_logged_not_fatal(monkeypatch, caplog):
    _use_settings(monkeypatch, environment="development", jwt_secret="x", gemini_api_key="")

    with caplog.at_level(logging.ERROR, logger="careerion.main"):
        main.check_configuration()

    assert "GEMINI_API_KEY is MISSING" in caplog.text
