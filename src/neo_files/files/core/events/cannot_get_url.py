"""Cannot-get-url event for file url resolution.

ONLY the event describing why a file url lookup failed.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ....core.shared import Event
from ..value_objects import CannotGetUrlCase


EVENT_CANNOT_GET_URL = "cannot_get_url"


@dataclass
class CannotGetUrlEvent(Event):
    """Event triggered when a file url cannot be produced directly.

    Fallback handlers read ``case``, ``sender``, ``format`` and ``scheme``, and
    either set ``url`` with ``handled`` True, raise, or escalate ``case`` to
    EXCEPTION_THROWN with ``exception`` recorded for later handlers.
    """

    case: Optional[CannotGetUrlCase] = None
    format: Optional[str] = None
    scheme: Optional[Union[str, bool]] = None
    exception: Optional[BaseException] = None
    url: Optional[str] = None

    def resolve(self, url: str) -> None:
        """Mark the event handled with ``url`` as the authoritative result."""
        self.url = url
        self.handled = True

    def escalate(self, exception: BaseException) -> None:
        """Record ``exception`` and switch the case to EXCEPTION_THROWN."""
        self.case = CannotGetUrlCase.EXCEPTION_THROWN
        self.exception = exception
