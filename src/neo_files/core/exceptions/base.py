"""Base exceptions for neo-files.

This module defines the base exception hierarchy for the neo-files library.
All exceptions inherit from NeoFilesError and include error codes, details,
and HTTP status code mappings for API responses.
"""

from typing import Any, Dict, Optional


class NeoFilesError(Exception):
    """Base exception for all neo-files errors.

    All exceptions in the neo-files library inherit from this base class
    and include structured error information for better debugging and API responses.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(NeoFilesError):
    """Raised when there's a configuration issue."""
    pass


class FileUrlError(NeoFilesError):
    """Base class for file url resolution errors."""
    pass


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: NeoFilesError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-files exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
