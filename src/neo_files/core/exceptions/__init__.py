"""Core exceptions for neo-files."""

from .base import (
    ConfigurationError,
    FileUrlError,
    NeoFilesError,
    create_error_response,
    get_http_status_code,
)
from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    "NeoFilesError",
    "ConfigurationError",
    "FileUrlError",
    "create_error_response",
    "get_http_status_code",
    "HTTP_STATUS_MAP",
]
