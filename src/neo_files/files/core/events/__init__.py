"""File url resolution events."""

from .cannot_get_url import EVENT_CANNOT_GET_URL, CannotGetUrlEvent
from .data_changed import EVENT_DATA_CHANGED, DataChangedEvent

__all__ = [
    "EVENT_CANNOT_GET_URL",
    "EVENT_DATA_CHANGED",
    "CannotGetUrlEvent",
    "DataChangedEvent",
]
