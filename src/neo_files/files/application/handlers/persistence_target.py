"""Persistence target lookup for file entities.

ONLY resolves where regenerated file data must be saved, if anywhere.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional

from ...core.protocols import FileEntity, ModelBehavior, PersistableRecord
from ...core.value_objects import PersistenceTarget


def try_get_persistence_target(file: FileEntity) -> Optional[PersistenceTarget]:
    """Get the record attribute that stores ``file`` data.

    Returns None when there is nothing to save into: the file has no data
    attribute or no owning behavior, the behavior is not a ModelBehavior or
    has no record, or the record does not exist in storage yet.
    """
    attribute = getattr(file, "data_attribute", None)
    if not isinstance(attribute, str) or not attribute.strip():
        return None

    behavior = getattr(file, "owner", None)
    if behavior is None or not isinstance(behavior, ModelBehavior):
        return None

    record = behavior.owner
    if record is None or not isinstance(record, PersistableRecord):
        return None

    if record.is_new_record:
        return None

    return PersistenceTarget(attribute=attribute, record=record)
