"""Process configuration, read once from the environment at startup."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


def _parse_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    bot_token: str = field(default="", repr=False)
    port: int = 8080
    host: str = "0.0.0.0"
    telegram_api_url: str = "https://api.telegram.org"
    pricing_api_url: str = "https://yugiohprices.com"
    log_level: str = "INFO"
    shutdown_timeout: int = 30
    keep_alive_timeout: int = 120

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        A missing bot token is not an error; outbound reply URLs are
        simply malformed until one is provided.
        """
        if env is None:
            env = os.environ
        defaults = cls()
        return cls(
            bot_token=env.get("TELEGRAM_BOT_API_TOKEN", ""),
            port=_parse_int(env, "PORT", defaults.port),
            host=env.get("HOST", defaults.host),
            telegram_api_url=env.get("TELEGRAM_API_URL", defaults.telegram_api_url),
            pricing_api_url=env.get("PRICING_API_URL", defaults.pricing_api_url),
            log_level=env.get("LOG_LEVEL", defaults.log_level).upper(),
            shutdown_timeout=_parse_int(env, "SHUTDOWN_TIMEOUT", defaults.shutdown_timeout),
            keep_alive_timeout=_parse_int(
                env, "KEEP_ALIVE_TIMEOUT", defaults.keep_alive_timeout,
            ),
        )
