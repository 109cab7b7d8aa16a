"""Configuration for neo-files: settings and logging."""

from .logging_config import (
    LogFormat,
    LoggingConfig,
    LogLevel,
    LogVerbosity,
    get_logger,
    setup_logging,
)
from .settings import FileUrlSettings, get_file_url_settings

__all__ = [
    "FileUrlSettings",
    "get_file_url_settings",
    "LogFormat",
    "LoggingConfig",
    "LogLevel",
    "LogVerbosity",
    "get_logger",
    "setup_logging",
]
