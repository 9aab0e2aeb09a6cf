"""Pruebas de bliq.config.settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bliq.api.connectors.errors import ConfigurationError
from bliq.config.settings import HttpSettings, get_http_settings, mode_from_flag
from bliq.config.settings.http import _load_from_env


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_http_settings.cache_clear()
    yield
    get_http_settings.cache_clear()


def test_mode_from_flag() -> None:
    assert mode_from_flag(True) == "dev"
    assert mode_from_flag(False) == "prod"


def test_http_settings_defaults() -> None:
    settings = HttpSettings()
    assert settings.timeout_seconds == 30.0
    assert settings.verify_ssl is True
    assert settings.default_headers == {}


def test_http_settings_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValidationError):
        HttpSettings(timeout_seconds=0)


def test_load_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLIQ_HTTP_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("BLIQ_HTTP_VERIFY_SSL", "false")
    settings = _load_from_env()
    assert settings.timeout_seconds == 12.5
    assert settings.verify_ssl is False


@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_invalid_timeout_env_is_configuration_error(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv("BLIQ_HTTP_TIMEOUT_SECONDS", raw)
    with pytest.raises(ConfigurationError, match="BLIQ_HTTP_TIMEOUT_SECONDS") as exc_info:
        get_http_settings()
    assert exc_info.value.code == 10


def test_get_http_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BLIQ_HTTP_TIMEOUT_SECONDS", raising=False)
    assert get_http_settings() is get_http_settings()
