from __future__ import annotations

import logging

from healthhub.config import DEFAULT_DATABASE_URL, Settings, configure_logging, get_settings


def test_defaults(monkeypatch):
    for name in ("HEALTHHUB_DATABASE_URL", "HEALTHHUB_SQL_ECHO", "HEALTHHUB_SEED_DEMO_SESSION", "HEALTHHUB_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.sql_echo is False
    assert settings.seed_demo_session is True
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HEALTHHUB_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("HEALTHHUB_SQL_ECHO", "yes")
    monkeypatch.setenv("HEALTHHUB_SEED_DEMO_SESSION", "0")
    monkeypatch.setenv("HEALTHHUB_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.sql_echo is True
    assert settings.seed_demo_session is False
    assert settings.log_level == "DEBUG"


def test_blank_flag_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("HEALTHHUB_SEED_DEMO_SESSION", "  ")
    assert get_settings().seed_demo_session is True


def test_configure_logging_sets_package_level():
    configure_logging(Settings(log_level="WARNING"))
    logger = logging.getLogger("healthhub")

    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1

    configure_logging(Settings(log_level="INFO"))
    assert len(logger.handlers) == 1
