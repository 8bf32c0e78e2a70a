"""
Unit tests for settings and logging setup.
"""
import logging

import pytest

from roommate_backend.core.config import get_settings, reset_settings
from roommate_backend.core.logger import LOG_FORMAT, setup_logger

pytestmark = pytest.mark.usefixtures("restore_root_logger")


def test_settings_read_environment(mock_env):
    settings = get_settings()
    assert settings.database_url == mock_env["DATABASE_URL"]
    assert settings.database_echo is False
    assert settings.log_level == "DEBUG"


def test_settings_singleton(mock_env):
    assert get_settings() is get_settings()
    first = get_settings()
    reset_settings()
    assert get_settings() is not first


def test_echo_flag(monkeypatch):
    monkeypatch.setenv("DATABASE_ECHO", "true")
    reset_settings()
    try:
        assert get_settings().database_echo is True
    finally:
        reset_settings()


def test_setup_logger_uses_settings_level(mock_settings):
    mock_settings.log_level = "WARNING"
    setup_logger()
    assert logging.getLogger().level == logging.WARNING


def test_setup_logger_explicit_level():
    setup_logger("debug")
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logger_replaces_root_handlers(restore_root_logger):
    setup_logger("info")
    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert handlers[0].formatter._fmt == LOG_FORMAT
