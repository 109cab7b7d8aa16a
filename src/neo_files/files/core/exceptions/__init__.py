"""File url resolution exceptions."""

from .cannot_get_url import CannotGetUrl
from .file_data_not_saved import FileDataNotSaved
from .invalid_fallback_handler import InvalidFallbackHandler

__all__ = [
    "CannotGetUrl",
    "FileDataNotSaved",
    "InvalidFallbackHandler",
]
