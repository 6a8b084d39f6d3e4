from pathlib import Path

import pytest
from pydantic import ValidationError

from error_handler.config.settings import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.ERROR_RESPONSE_FORMAT == "json"
    assert settings.EXPOSE_REQUEST_ID is True
    assert isinstance(settings.LOG_DIR, Path)


def test_values_are_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "TEXT")
    monkeypatch.setenv("ERROR_RESPONSE_FORMAT", "Text")

    settings = Settings()

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "text"
    assert settings.ERROR_RESPONSE_FORMAT == "text"


def test_invalid_response_format_rejected(monkeypatch):
    monkeypatch.setenv("ERROR_RESPONSE_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
