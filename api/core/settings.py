"""
Process settings read from the environment.

Values are read on each call so tests can change them with `monkeypatch.setenv`.
"""

from __future__ import annotations

import os

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def host() -> str:
    return _env_str("HOST", DEFAULT_HOST)


def port() -> int:
    value = _env_int("PORT", DEFAULT_PORT)
    if not 0 < value < 65536:
        return DEFAULT_PORT
    return value


def db_pool_min_size() -> int:
    return max(0, _env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(1, db_pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def db_command_timeout() -> int:
    return max(1, _env_int("DB_COMMAND_TIMEOUT", 30))


def cors_allow_origins() -> list[str]:
    raw = _env_str("CORS_ALLOW_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def log_level() -> str:
    value = _env_str("LOG_LEVEL", "WARNING").upper()
    if value == "WARN":
        return "WARNING"
    return value if value in LOG_LEVELS else "WARNING"
