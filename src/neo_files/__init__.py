"""Neo-Files - fallback url resolution for NeoMultiTenant file entities.

Provides handlers for files whose url cannot be produced directly, a
configurable handler chain, and FastAPI error mapping.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__
from .config import FileUrlSettings, get_file_url_settings
from .core.exceptions import (
    ConfigurationError,
    FileUrlError,
    NeoFilesError,
)
from .core.shared import Event, EventEmitter, subscribed
from .files import (
    EVENT_CANNOT_GET_URL,
    EVENT_DATA_CHANGED,
    CannotGetUrl,
    CannotGetUrlCase,
    CannotGetUrlEvent,
    DataChangedEvent,
    FallbackChain,
    FileDataNotSaved,
    InvalidFallbackHandler,
    generate_format_on_the_fly,
    generate_format_on_the_fly_with_persistence,
    raise_error,
    return_about_blank,
    return_default_url,
    return_empty_string,
    return_hash,
    return_source_file_url,
)

__all__ = [
    "__version__",
    "FileUrlSettings",
    "get_file_url_settings",
    "NeoFilesError",
    "ConfigurationError",
    "FileUrlError",
    "Event",
    "EventEmitter",
    "subscribed",
    "EVENT_CANNOT_GET_URL",
    "EVENT_DATA_CHANGED",
    "CannotGetUrl",
    "CannotGetUrlCase",
    "CannotGetUrlEvent",
    "DataChangedEvent",
    "FallbackChain",
    "FileDataNotSaved",
    "InvalidFallbackHandler",
    "raise_error",
    "generate_format_on_the_fly",
    "generate_format_on_the_fly_with_persistence",
    "return_default_url",
    "return_source_file_url",
    "return_empty_string",
    "return_hash",
    "return_about_blank",
]
