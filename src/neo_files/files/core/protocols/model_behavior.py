"""Model behavior protocol.

ONLY the link between a file entity and the record it is attached to.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional
from typing_extensions import Protocol, runtime_checkable

from .persistable_record import PersistableRecord


@runtime_checkable
class ModelBehavior(Protocol):
    """Behavior attaching file entities to a model record."""

    owner: Optional[PersistableRecord]
