"""HTTP status code mapping for exceptions.

Static exception-to-status-code mapping with an instance-level override:
exceptions exposing a ``status_code`` attribute take precedence over the map.
"""

from typing import Dict, Type

from .base import ConfigurationError, FileUrlError, NeoFilesError


# Static HTTP Status Code mapping for exceptions
HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 404 Not Found
    FileUrlError: 404,

    # 500 Internal Server Error
    ConfigurationError: 500,

    # Default for NeoFilesError
    NeoFilesError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Resolution order: the exception's own ``status_code``, then the closest
    class in its MRO present in ``HTTP_STATUS_MAP``, then 500.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    status_code = getattr(exception, "status_code", None)
    if isinstance(status_code, int):
        return status_code

    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]

    return 500
