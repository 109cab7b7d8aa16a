"""Fallback chain service.

ONLY ordered execution of cannot-get-url handlers over a single event.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Iterable, List, Optional, Union

from ....config import FileUrlSettings, get_file_url_settings
from ....core.shared import EventEmitter
from ...core.events import EVENT_CANNOT_GET_URL, CannotGetUrlEvent
from ...core.protocols import FileEntity
from ...core.value_objects import CannotGetUrlCase
from ..handlers import raise_error
from .handler_registry import FallbackHandler, HandlerRef, resolve_handler

logger = logging.getLogger(__name__)


class FallbackChain:
    """Ordered list of cannot-get-url handlers.

    Handlers run one at a time and the chain stops at the first handler that
    marks the event handled or raises.
    """

    def __init__(
        self,
        handlers: Iterable[HandlerRef] = (),
        raise_when_unhandled: bool = True
    ):
        """Initialize fallback chain.

        Args:
            handlers: Handler callables, short names or dotted import paths
            raise_when_unhandled: Raise CannotGetUrl from ``resolve`` when no
                handler resolved the event
        """
        self._handlers: List[FallbackHandler] = [resolve_handler(ref) for ref in handlers]
        self.raise_when_unhandled = raise_when_unhandled

    @classmethod
    def from_settings(cls, settings: Optional[FileUrlSettings] = None) -> "FallbackChain":
        """Create a chain from FileUrlSettings, the cached settings by default."""
        settings = settings or get_file_url_settings()
        return cls(settings.handler_names, raise_when_unhandled=settings.raise_when_unhandled)

    @property
    def handlers(self) -> List[FallbackHandler]:
        """Resolved handlers in execution order."""
        return list(self._handlers)

    def append(self, handler: HandlerRef) -> "FallbackChain":
        """Add a handler at the end of the chain."""
        self._handlers.append(resolve_handler(handler))
        return self

    def dispatch(self, event: CannotGetUrlEvent) -> CannotGetUrlEvent:
        """Run handlers over ``event`` until it is handled.

        Errors raised by a handler abort the chain and propagate.
        """
        for handler in self._handlers:
            if event.handled:
                break
            logger.debug(
                f"Running fallback handler {getattr(handler, '__name__', handler)!r} "
                f"for case {event.case}"
            )
            handler(event)
        return event

    def resolve(
        self,
        sender: FileEntity,
        case: Optional[CannotGetUrlCase],
        format: Optional[str] = None,
        scheme: Optional[Union[str, bool]] = None,
        exception: Optional[BaseException] = None
    ) -> Optional[str]:
        """Resolve a url for ``sender`` after a failed lookup.

        Returns:
            The url of the handler that resolved the event, or None when the
            chain left it unhandled and ``raise_when_unhandled`` is False

        Raises:
            CannotGetUrl: When unhandled and ``raise_when_unhandled`` is True
        """
        event = CannotGetUrlEvent(
            name=EVENT_CANNOT_GET_URL,
            sender=sender,
            case=case,
            format=format,
            scheme=scheme,
            exception=exception
        )
        self.dispatch(event)

        if event.handled:
            return event.url

        if self.raise_when_unhandled:
            raise_error(event)
        logger.debug(f"Url for file '{getattr(sender, 'name', None)}' left unresolved")
        return None

    def attach(self, emitter: EventEmitter) -> None:
        """Run this chain whenever ``emitter`` triggers the cannot-get-url event."""
        emitter.on(EVENT_CANNOT_GET_URL, self.dispatch)

    def detach(self, emitter: EventEmitter) -> bool:
        """Stop running this chain for ``emitter``."""
        return emitter.off(EVENT_CANNOT_GET_URL, self.dispatch)

    def __len__(self) -> int:
        return len(self._handlers)


def create_fallback_chain(settings: Optional[FileUrlSettings] = None) -> FallbackChain:
    """Create fallback chain from settings."""
    return FallbackChain.from_settings(settings)
