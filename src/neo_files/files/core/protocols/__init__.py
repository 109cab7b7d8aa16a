"""File url resolution protocols.

Contracts consumed from the host file framework.
"""

from .file_entity import FileEntity
from .model_behavior import ModelBehavior
from .persistable_record import PersistableRecord

__all__ = [
    "FileEntity",
    "ModelBehavior",
    "PersistableRecord",
]
