"""
Event emitter component for file entities.

ONLY named-event subscription and synchronous dispatch.
"""

import logging
from collections import defaultdict
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional


logger = logging.getLogger(__name__)


@dataclass
class Event:
    """Base event passed to handlers registered on an EventEmitter.

    ``name`` and ``sender`` are assigned by ``EventEmitter.trigger``.
    Setting ``handled`` stops the remaining handlers from being called.
    """
    name: Optional[str] = None
    sender: Any = None
    handled: bool = False


EventHandler = Callable[[Event], None]


class EventEmitter:
    """Mixin providing ``on``/``off``/``trigger`` for named events.

    Handlers are called synchronously in registration order.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._event_handlers: Dict[str, List[EventHandler]] = defaultdict(list)

    def _registry(self) -> Dict[str, List[EventHandler]]:
        # Mixed into dataclasses and other classes that may skip __init__
        if not hasattr(self, "_event_handlers"):
            self._event_handlers = defaultdict(list)
        return self._event_handlers

    def on(self, name: str, handler: EventHandler) -> None:
        """Attach a handler to the named event.

        Args:
            name: Event name
            handler: Callable receiving the event
        """
        self._registry()[name].append(handler)
        logger.debug(f"Attached handler {getattr(handler, '__name__', handler)!r} to '{name}'")

    def off(self, name: str, handler: Optional[EventHandler] = None) -> bool:
        """Detach a handler, or all handlers when ``handler`` is None.

        Returns:
            True if at least one handler was removed
        """
        registry = self._registry()
        handlers = registry.get(name)
        if not handlers:
            return False

        if handler is None:
            del registry[name]
            return True

        # Remove the most recently attached registration first
        for index in range(len(handlers) - 1, -1, -1):
            if handlers[index] == handler:
                del handlers[index]
                if not handlers:
                    del registry[name]
                return True
        return False

    def has_handlers(self, name: str) -> bool:
        """Check whether the named event has any handlers attached."""
        return bool(self._registry().get(name))

    def trigger(self, name: str, event: Optional[Event] = None) -> Event:
        """Trigger the named event.

        Handlers run in registration order until one marks the event handled.
        Exceptions raised by a handler propagate to the caller.

        Args:
            name: Event name
            event: Event instance, a plain Event is created when omitted

        Returns:
            The dispatched event
        """
        if event is None:
            event = Event()
        event.name = name
        if event.sender is None:
            event.sender = self
        event.handled = False

        # Copy so handlers may detach themselves while running
        for handler in list(self._registry().get(name, ())):
            handler(event)
            if event.handled:
                break
        return event


@contextmanager
def subscribed(emitter: EventEmitter, name: str, handler: EventHandler) -> Iterator[EventHandler]:
    """Attach ``handler`` to ``emitter`` for the duration of the block.

    The handler is detached on every exit path, including when the block raises.
    """
    emitter.on(name, handler)
    try:
        yield handler
    finally:
        emitter.off(name, handler)
