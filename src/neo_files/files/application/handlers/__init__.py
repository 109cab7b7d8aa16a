"""Cannot-get-url fallback handlers."""

from .cannot_get_url_handlers import (
    generate_format_on_the_fly,
    generate_format_on_the_fly_with_persistence,
    raise_error,
    return_about_blank,
    return_default_url,
    return_empty_string,
    return_hash,
    return_source_file_url,
)
from .persistence_target import try_get_persistence_target

__all__ = [
    "raise_error",
    "generate_format_on_the_fly",
    "generate_format_on_the_fly_with_persistence",
    "return_default_url",
    "return_source_file_url",
    "return_empty_string",
    "return_hash",
    "return_about_blank",
    "try_get_persistence_target",
]
