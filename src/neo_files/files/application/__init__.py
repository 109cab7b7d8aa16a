"""File url resolution application layer.

Fallback handlers and the services that configure and run them.
"""

from .handlers import *
from .services import *

__all__ = [
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
    "FallbackHandler",
    "HandlerRef",
    "available_handlers",
    "register_handler",
    "resolve_handler",
    "unregister_handler",
]
