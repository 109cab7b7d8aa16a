"""File entity protocol.

ONLY the file contract consumed by cannot-get-url fallback handlers.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Callable, Optional, Union
from typing_extensions import Protocol, runtime_checkable

from .model_behavior import ModelBehavior


@runtime_checkable
class FileEntity(Protocol):
    """File entity protocol.

    Defines what fallback handlers need from a file:
    - Generating a formatted version of the source on demand
    - Fetching the url of the source or of a formatted version
    - Fetching the configured default url
    - Optional linkage to a persisted record through a model behavior
    - Subscribing to the file's own events (``data_changed``)
    """

    name: str
    data_attribute: Optional[str]
    owner: Optional[ModelBehavior]

    def generate_format(self, format: str) -> None:
        """Generate and store a formatted version of the file.

        Raises:
            Exception: Implementation-defined error if generation fails
        """
        ...

    def get_url(
        self,
        format: Optional[str] = None,
        scheme: Optional[Union[str, bool]] = None
    ) -> Optional[str]:
        """Get url of the source file (format None) or of a formatted version."""
        ...

    def get_default_url(
        self,
        format: Optional[str] = None,
        scheme: Optional[Union[str, bool]] = None
    ) -> Optional[str]:
        """Get configured default url, None when not configured."""
        ...

    def on(self, name: str, handler: Callable[[Any], None]) -> None:
        """Attach a handler to a file event."""
        ...

    def off(self, name: str, handler: Optional[Callable[[Any], None]] = None) -> bool:
        """Detach a handler from a file event."""
        ...
