"""
Note lifecycle events and a handler-registration event source.

The catalog (or host) publishes; the list manager subscribes. Handlers must
tolerate duplicate delivery.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from notehome.utils.logger import logger


@dataclass(frozen=True)
class NoteOpened:
    ref: str


@dataclass(frozen=True)
class NoteRenamed:
    old_ref: str
    new_ref: str


@dataclass(frozen=True)
class NoteDeleted:
    ref: str


class NoteEventSource:
    """Push-based publisher of note lifecycle events."""

    def __init__(self):
        self._handlers: Dict[Type, List[Callable]] = {}

    def subscribe(self, event_type: Type, handler: Callable) -> Callable[[], None]:
        """
        Register handler for event_type.

        Returns:
            A callable that removes the registration.
        """
        self._handlers.setdefault(event_type, []).append(handler)

        def unsubscribe():
            handlers = self._handlers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def publish(self, event) -> None:
        """Deliver event to its handlers in registration order."""
        for handler in list(self._handlers.get(type(event), [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Handler failed for {event!r}", component="EVENTS",
                             details=str(e))

    def handler_count(self, event_type: Type) -> int:
        return len(self._handlers.get(event_type, []))
