# country_stats/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional
import os

import httpx
from dotenv import load_dotenv

# -------------------------------------------------------------------
# CONFIG
# -------------------------------------------------------------------
URL_ENV = "URL"
DEFAULT_TIMEOUT = 10.0
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3030
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(ValueError):
    """Startup configuration is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    upstream_url: str
    timeout: float = DEFAULT_TIMEOUT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL


def parse_upstream_url(raw: Optional[str]) -> str:
    """Validate the upstream base URL; only absolute http(s) URLs are accepted."""
    raw = (raw or "").strip()
    if not raw:
        raise ConfigError(f"{URL_ENV} has to be provided")
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise ConfigError(f"{URL_ENV} is not a valid URL: {raw!r}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigError(f"{URL_ENV} must be an absolute http(s) URL: {raw!r}")
    return str(url)


def _number(env: Mapping[str, str], key: str, default, cast):
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from e


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the process environment (after loading `.env`)
    or from an explicit mapping. Raises ConfigError on bad input.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    timeout = _number(env, "UPSTREAM_TIMEOUT", DEFAULT_TIMEOUT, float)
    if timeout <= 0:
        raise ConfigError(f"UPSTREAM_TIMEOUT must be positive, got {timeout}")

    log_level = (env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Settings(
        upstream_url=parse_upstream_url(env.get(URL_ENV)),
        timeout=timeout,
        host=env.get("HOST") or DEFAULT_HOST,
        port=_number(env, "PORT", DEFAULT_PORT, int),
        log_level=log_level,
    )
