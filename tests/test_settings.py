from __future__ import annotations

import logging

import pytest

from core import settings
from core.logging import configure_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "HOST",
        "PORT",
        "DB_POOL_MIN_SIZE",
        "DB_POOL_MAX_SIZE",
        "DB_COMMAND_TIMEOUT",
        "CORS_ALLOW_ORIGINS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert settings.host() == "0.0.0.0"
    assert settings.port() == 8080
    assert settings.db_pool_min_size() == 1
    assert settings.db_pool_max_size() == 5
    assert settings.db_command_timeout() == 30
    assert settings.cors_allow_origins() == ["*"]
    assert settings.log_level() == "WARNING"


@pytest.mark.parametrize("raw, expected", [("9000", 9000), ("abc", 8080), ("0", 8080), ("70000", 8080)])
def test_port(monkeypatch, raw, expected):
    monkeypatch.setenv("PORT", raw)
    assert settings.port() == expected


def test_pool_max_never_below_min(monkeypatch):
    monkeypatch.setenv("DB_POOL_MIN_SIZE", "4")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "2")
    assert settings.db_pool_max_size() == 4


def test_cors_origins_are_split(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
    assert settings.cors_allow_origins() == ["http://a.test", "http://b.test"]


@pytest.mark.parametrize("raw, expected", [("info", "INFO"), ("warn", "WARNING"), ("loud", "WARNING")])
def test_log_level(monkeypatch, raw, expected):
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert settings.log_level() == expected


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        configure_logging("nonsense")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_run_logs_listen_address_at_info(monkeypatch, caplog):
    import main

    started: dict = {}
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: started.update(kwargs))

    with caplog.at_level(logging.INFO, logger="main"):
        main.run()

    assert started["port"] == 9001
    records = [r for r in caplog.records if "server_starting" in r.getMessage()]
    assert records and records[0].levelno == logging.INFO
