"""Data changed event for file entities.

ONLY the event a file triggers when its persisted data is rewritten.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import Any

from ....core.shared import Event


EVENT_DATA_CHANGED = "data_changed"


@dataclass
class DataChangedEvent(Event):
    """Triggered by a file after storing a formatted version changed its data."""

    old_file_data: Any = None
    new_file_data: Any = None
