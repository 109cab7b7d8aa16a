"""Url resolution case value object.

ONLY the reason a file url lookup could not complete directly.

Following maximum separation architecture - one file = one purpose.
"""

from enum import Enum


class CannotGetUrlCase(Enum):
    """Reason a file url could not be produced directly.

    - EMPTY_FILE: The file entity holds no data
    - FILE_JUST_UPLOADED: The file was uploaded but not stored yet
    - FILE_NOT_FOUND: The source file is missing in storage
    - FORMAT_NOT_FOUND: The requested formatted version is missing in storage
    - EXCEPTION_THROWN: The lookup (or a fallback handler) raised an error
    """

    EMPTY_FILE = "empty_file"
    FILE_JUST_UPLOADED = "file_just_uploaded"
    FILE_NOT_FOUND = "file_not_found"
    FORMAT_NOT_FOUND = "format_not_found"
    EXCEPTION_THROWN = "exception_thrown"

    def __str__(self) -> str:
        """String representation."""
        return self.value

    @property
    def is_missing_resource(self) -> bool:
        """Check if this case reports something absent rather than a failure."""
        return self is not CannotGetUrlCase.EXCEPTION_THROWN
