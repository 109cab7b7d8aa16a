"""File url resolution core domain layer.

Value objects, events, exceptions and the contracts consumed from the
host file framework. No business logic.
"""

from .events import *
from .exceptions import *
from .protocols import *
from .value_objects import *

__all__ = [
    # Value Objects
    "CannotGetUrlCase",
    "PersistenceTarget",

    # Events
    "EVENT_CANNOT_GET_URL",
    "EVENT_DATA_CHANGED",
    "CannotGetUrlEvent",
    "DataChangedEvent",

    # Exceptions
    "CannotGetUrl",
    "FileDataNotSaved",
    "InvalidFallbackHandler",

    # Protocols
    "FileEntity",
    "ModelBehavior",
    "PersistableRecord",
]
