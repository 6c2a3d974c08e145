"""
Logger factory tests - level resolution from DEBUG_LOGGING / LOG_LEVEL.
"""

import logging

import pytest

from util_logger import ComponentType, LogContext, LoggerFactory


@pytest.fixture
def log_env(monkeypatch):
    monkeypatch.delenv("DEBUG_LOGGING", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return monkeypatch


class TestLoggerLevel:

    def test_default_is_info(self, log_env):
        logger = LoggerFactory.create_logger(ComponentType.SERVICE, "LevelDefault")
        assert logger.level == logging.INFO

    def test_log_level_from_environment(self, log_env):
        log_env.setenv("LOG_LEVEL", "warning")
        logger = LoggerFactory.create_logger(ComponentType.SERVICE, "LevelWarning")
        assert logger.level == logging.WARNING

    def test_debug_logging_wins(self, log_env):
        log_env.setenv("LOG_LEVEL", "ERROR")
        log_env.setenv("DEBUG_LOGGING", "TRUE")
        logger = LoggerFactory.create_logger(ComponentType.SERVICE, "LevelDebug")
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, log_env):
        log_env.setenv("LOG_LEVEL", "LOUD")
        logger = LoggerFactory.create_logger(ComponentType.SERVICE, "LevelUnknown")
        assert logger.level == logging.INFO


def test_log_context_drops_unset_fields():
    assert LogContext(request_id="abc12345").to_dict() == {"request_id": "abc12345"}
