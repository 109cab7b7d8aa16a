"""File data not saved exception for file url resolution.

ONLY file data not saved - represents a failure to write regenerated file
data back into the owning record.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Optional

from ....core.exceptions import NeoFilesError


class FileDataNotSaved(NeoFilesError):
    """Raised when regenerated file data cannot be persisted to its record."""

    def __init__(
        self,
        message: str,
        file_name: Optional[str] = None,
        attribute: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = dict(details or {})
        if file_name:
            enhanced_details["file_name"] = file_name
        if attribute:
            enhanced_details["attribute"] = attribute

        super().__init__(
            message=message,
            error_code=error_code or "FILE_DATA_NOT_SAVED",
            details=enhanced_details
        )

        self.file_name = file_name
        self.attribute = attribute
