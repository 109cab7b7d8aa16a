"""File url resolution application services."""

from .fallback_chain import FallbackChain, create_fallback_chain
from .handler_registry import (
    FallbackHandler,
    HandlerRef,
    available_handlers,
    register_handler,
    resolve_handler,
    unregister_handler,
)

__all__ = [
    "FallbackChain",
    "create_fallback_chain",
    "FallbackHandler",
    "HandlerRef",
    "available_handlers",
    "register_handler",
    "resolve_handler",
    "unregister_handler",
]
