"""Persistable record protocol.

ONLY the record contract needed to store regenerated file data.

Following maximum separation architecture - one file = one purpose.
"""

from typing import List, Optional
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class PersistableRecord(Protocol):
    """Active-record style model owning a file attribute.

    Only existing records (``is_new_record`` is False) receive partial updates.
    """

    is_new_record: bool

    def update(self, validate: bool = True, attributes: Optional[List[str]] = None) -> None:
        """Persist the given attributes of the record.

        Args:
            validate: Whether to run model validation before saving
            attributes: Attribute names to write, all attributes when None

        Raises:
            Exception: Implementation-defined persistence error
        """
        ...
