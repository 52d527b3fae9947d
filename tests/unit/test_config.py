"""Tests for environment configuration loading."""

from __future__ import annotations

import pytest

from pricebot.config import ConfigError, Settings


def test_defaults_when_env_empty() -> None:
    settings = Settings.from_env({})
    assert settings.bot_token == ""
    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.telegram_api_url == "https://api.telegram.org"
    assert settings.pricing_api_url == "https://yugiohprices.com"
    assert settings.shutdown_timeout == 30
    assert settings.keep_alive_timeout == 120


def test_reads_port_and_token() -> None:
    settings = Settings.from_env({"PORT": "9000", "TELEGRAM_BOT_API_TOKEN": "123:ABC"})
    assert settings.port == 9000
    assert settings.bot_token == "123:ABC"


def test_log_level_upper_cased() -> None:
    assert Settings.from_env({"LOG_LEVEL": "debug"}).log_level == "DEBUG"


def test_blank_port_uses_default() -> None:
    assert Settings.from_env({"PORT": ""}).port == 8080


def test_invalid_port_raises() -> None:
    with pytest.raises(ConfigError, match="PORT"):
        Settings.from_env({"PORT": "eighty"})


def test_invalid_shutdown_timeout_raises() -> None:
    with pytest.raises(ConfigError, match="SHUTDOWN_TIMEOUT"):
        Settings.from_env({"SHUTDOWN_TIMEOUT": "30s"})


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_API_TOKEN", "from-env")
    monkeypatch.setenv("PRICING_API_URL", "http://prices.local")
    settings = Settings.from_env()
    assert settings.bot_token == "from-env"
    assert settings.pricing_api_url == "http://prices.local"


def test_repr_hides_token() -> None:
    assert "123:ABC" not in repr(Settings(bot_token="123:ABC"))


def test_settings_are_frozen() -> None:
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.port = 1  # type: ignore[misc]
