"""Shared components used across neo-files features."""

from .event_emitter import Event, EventEmitter, EventHandler, subscribed

__all__ = [
    "Event",
    "EventEmitter",
    "EventHandler",
    "subscribed",
]
