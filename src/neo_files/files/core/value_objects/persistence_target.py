"""Persistence target value object.

ONLY the record attribute that receives regenerated file data.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..protocols.persistable_record import PersistableRecord


@dataclass(frozen=True)
class PersistenceTarget:
    """Persisted record attribute holding a file's data.

    Produced by ``try_get_persistence_target`` only when the file is linked
    through a model behavior to a record that already exists in storage.
    """

    attribute: str
    record: "PersistableRecord"

    def __post_init__(self):
        """Validate attribute name."""
        if not self.attribute or not self.attribute.strip():
            raise ValueError("Persistence target attribute cannot be empty")

    def save(self, file_data) -> None:
        """Write ``file_data`` into the record and update only that attribute."""
        setattr(self.record, self.attribute, file_data)
        self.record.update(validate=False, attributes=[self.attribute])
