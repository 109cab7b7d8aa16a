"""File url resolution feature.

Fallback handling for file urls that cannot be produced directly:
- Raising descriptive errors per failure case
- Generating missing formatted versions on the fly, optionally saving the
  changed file data to the owning record
- Substituting default, source or placeholder urls
- Configurable handler chains
"""

from .core import *
from .application import *

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

    # Handlers
    "raise_error",
    "generate_format_on_the_fly",
    "generate_format_on_the_fly_with_persistence",
    "return_default_url",
    "return_source_file_url",
    "return_empty_string",
    "return_hash",
    "return_about_blank",
    "try_get_persistence_target",

    # Services
    "FallbackChain",
    "create_fallback_chain",
    "available_handlers",
    "register_handler",
    "resolve_handler",
    "unregister_handler",
]
