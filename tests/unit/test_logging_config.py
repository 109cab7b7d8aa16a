"""Tests for logging configuration."""

import logging

import pytest

from neo_files.config.logging_config import (
    FORMAT_STRINGS,
    LogFormat,
    LoggingConfig,
    get_log_level_from_verbosity,
)


@pytest.fixture
def clean_log_env(monkeypatch):
    for key in ("LOG_LEVEL", "LOG_VERBOSITY", "LOG_FORMAT", "ENABLE_FILE_URL_HANDLER_LOGGING"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestLoggingConfig:
    """Test cases for LoggingConfig."""

    @pytest.mark.parametrize("verbosity, level", [
        ("quiet", "ERROR"),
        ("NORMAL", "WARNING"),
        ("verbose", "INFO"),
        ("DEBUG", "DEBUG"),
        ("unknown", "WARNING"),
    ])
    def test_verbosity_mapping(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level

    def test_defaults(self, clean_log_env):
        config = LoggingConfig.build_config()

        assert config["root"]["level"] == "WARNING"
        assert config["formatters"]["default"]["format"] == FORMAT_STRINGS[LogFormat.SIMPLE]
        assert config["loggers"]["neo_files.files.application.handlers"]["level"] == "WARNING"
        assert config["loggers"]["httpx"]["level"] == "ERROR"

    def test_explicit_level_and_format(self, clean_log_env):
        clean_log_env.setenv("LOG_LEVEL", "debug")
        clean_log_env.setenv("LOG_FORMAT", "json")

        config = LoggingConfig.build_config()

        assert config["root"]["level"] == "DEBUG"
        assert config["formatters"]["default"]["format"] == FORMAT_STRINGS[LogFormat.JSON]
        assert config["loggers"]["neo_files.files.application.handlers"]["level"] == "DEBUG"

    def test_handler_logging_enabled(self, clean_log_env):
        clean_log_env.setenv("ENABLE_FILE_URL_HANDLER_LOGGING", "true")

        config = LoggingConfig.build_config()

        assert "neo_files.files.application.handlers" not in config["loggers"]

    def test_set_module_level(self):
        LoggingConfig.set_module_level("neo_files.tests.sample", "info")
        assert logging.getLogger("neo_files.tests.sample").level == logging.INFO

        LoggingConfig.silence_module("neo_files.tests.sample")
        assert logging.getLogger("neo_files.tests.sample").level == logging.CRITICAL
