"""Unit tests for src/core/settings.py and src/core/log_config.py"""

import logging
from typing import Generator

import pytest

from src.core.log_config import setup_logging
from src.core.settings import Settings, get_settings


@pytest.fixture
def clean_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    try:
        yield
    finally:
        get_settings.cache_clear()


def test_default_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CHESS_DATABASE_URL", "CHESS_DATABASE_ECHO", "CHESS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite:///./pieces.db"
    assert not settings.database_echo
    assert settings.log_level == "INFO"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Only variables with the CHESS_ prefix are picked up"""
    monkeypatch.setenv("CHESS_DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("CHESS_DATABASE_ECHO", "true")
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.delenv("CHESS_LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite:///:memory:"
    assert settings.database_echo
    assert settings.log_level == "INFO"


def test_get_settings_is_cached(clean_settings_cache: None) -> None:
    assert get_settings() is get_settings()


def test_setup_logging() -> None:
    root_logger = logging.getLogger()
    previous_level = root_logger.level
    previous_handlers = list(root_logger.handlers)
    try:
        setup_logging("debug")
        setup_logging("debug")
        assert root_logger.level == logging.DEBUG
        # calling it again should not stack handlers
        assert len(root_logger.handlers) == 1
    finally:
        root_logger.handlers[:] = previous_handlers
        root_logger.setLevel(previous_level)
