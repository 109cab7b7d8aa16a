"""File url resolution value objects."""

from .persistence_target import PersistenceTarget
from .url_resolution_case import CannotGetUrlCase

__all__ = [
    "CannotGetUrlCase",
    "PersistenceTarget",
]
