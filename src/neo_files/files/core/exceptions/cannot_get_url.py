"""Cannot get url exception for file url resolution.

ONLY cannot get url - represents the final failure of a file url lookup
after fallback handlers gave up.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Optional

from ....core.exceptions import FileUrlError
from ..value_objects import CannotGetUrlCase


class CannotGetUrl(FileUrlError):
    """Raised when a url for a file cannot be produced.

    Missing-resource cases map to HTTP 404, a wrapped error or an unknown
    case maps to HTTP 500.
    """

    def __init__(
        self,
        message: str,
        case: Optional[CannotGetUrlCase] = None,
        file_name: Optional[str] = None,
        format: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize cannot get url exception.

        Args:
            message: Human-readable error message
            case: Reason the url lookup failed
            file_name: Name of the file the url was requested for
            format: Requested formatted version, None for the source file
            error_code: Specific error code, defaults to CANNOT_GET_URL
            details: Additional details about the failure
        """
        enhanced_details = dict(details or {})
        if case is not None:
            enhanced_details["case"] = str(case)
        if file_name:
            enhanced_details["file_name"] = file_name
        if format:
            enhanced_details["format"] = format

        super().__init__(
            message=message,
            error_code=error_code or "CANNOT_GET_URL",
            details=enhanced_details
        )

        self.case = case
        self.file_name = file_name
        self.format = format

    @property
    def status_code(self) -> int:
        """HTTP status code for API responses."""
        if isinstance(self.case, CannotGetUrlCase) and self.case.is_missing_resource:
            return 404
        return 500
