"""Core layer of neo-files: base exceptions and shared components."""

from .exceptions import (
    ConfigurationError,
    FileUrlError,
    NeoFilesError,
    create_error_response,
    get_http_status_code,
)
from .shared import Event, EventEmitter, subscribed

__all__ = [
    "NeoFilesError",
    "ConfigurationError",
    "FileUrlError",
    "create_error_response",
    "get_http_status_code",
    "Event",
    "EventEmitter",
    "subscribed",
]
