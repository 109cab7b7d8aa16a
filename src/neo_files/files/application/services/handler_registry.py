"""Fallback handler registry.

ONLY resolves handler references from configuration into callables.

Following maximum separation architecture - one file = one purpose.
"""

import importlib
import logging
from typing import Callable, Dict, List, Union

from ...core.events import CannotGetUrlEvent
from ...core.exceptions import InvalidFallbackHandler
from ..handlers import (
    generate_format_on_the_fly,
    generate_format_on_the_fly_with_persistence,
    raise_error,
    return_about_blank,
    return_default_url,
    return_empty_string,
    return_hash,
    return_source_file_url,
)

logger = logging.getLogger(__name__)

FallbackHandler = Callable[[CannotGetUrlEvent], None]
HandlerRef = Union[str, FallbackHandler]


_HANDLERS: Dict[str, FallbackHandler] = {
    "raise_error": raise_error,
    "generate_format_on_the_fly": generate_format_on_the_fly,
    "generate_format_on_the_fly_with_persistence": generate_format_on_the_fly_with_persistence,
    "return_default_url": return_default_url,
    "return_source_file_url": return_source_file_url,
    "return_empty_string": return_empty_string,
    "return_hash": return_hash,
    "return_about_blank": return_about_blank,
}


def register_handler(name: str, handler: FallbackHandler) -> None:
    """Register a handler under a short name usable in configuration.

    Args:
        name: Short name, replaces an existing registration
        handler: Callable taking a CannotGetUrlEvent
    """
    if not name or not name.strip():
        raise ValueError("Handler name cannot be empty")
    if not callable(handler):
        raise InvalidFallbackHandler(f"Handler '{name}' is not callable", handler_ref=handler)

    if name in _HANDLERS:
        logger.warning(f"Fallback handler '{name}' already registered, replacing")
    _HANDLERS[name] = handler


def unregister_handler(name: str) -> bool:
    """Remove a short-name registration.

    Returns:
        True if the name was registered
    """
    return _HANDLERS.pop(name, None) is not None


def available_handlers() -> List[str]:
    """Get registered short names."""
    return sorted(_HANDLERS)


def _import_handler(path: str) -> FallbackHandler:
    """Import ``package.module:attr`` or ``package.module.attr``."""
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")

    # Relative imports cannot be resolved without a package
    if not module_name or module_name.startswith(".") or not attr_path:
        raise InvalidFallbackHandler(f"Unknown fallback handler '{path}'", handler_ref=path)

    try:
        target = importlib.import_module(module_name)
    except (ImportError, TypeError, ValueError) as e:
        raise InvalidFallbackHandler(
            f"Cannot import module '{module_name}' for fallback handler '{path}'",
            handler_ref=path
        ) from e

    # attr path may address a class attribute, e.g. "module:Handlers.method"
    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise InvalidFallbackHandler(
                f"Fallback handler '{path}' does not exist",
                handler_ref=path
            ) from e
    return target


def resolve_handler(ref: HandlerRef) -> FallbackHandler:
    """Resolve a handler reference into a callable.

    Args:
        ref: Callable, registered short name, or dotted import path

    Returns:
        Handler callable

    Raises:
        InvalidFallbackHandler: If the reference cannot be resolved
    """
    if callable(ref):
        return ref

    if not isinstance(ref, str) or not ref.strip():
        raise InvalidFallbackHandler(f"Invalid fallback handler reference: {ref!r}", handler_ref=ref)

    name = ref.strip()
    if name in _HANDLERS:
        return _HANDLERS[name]

    handler = _import_handler(name)
    if not callable(handler):
        raise InvalidFallbackHandler(f"Fallback handler '{name}' is not callable", handler_ref=ref)
    return handler
