"""Synchronous event bus for domain event dispatch.

The EventBus decouples the simulation from whatever consumes its events
(console output, renderers, statistics collectors).

- Zero overhead when no subscribers (single dict lookup)
- Synchronous, so handlers run inside the tick that produced the event
- Dispatch by exact event type
"""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, DefaultDict, List, Type, TypeVar

T = TypeVar("T")


class EventBus:
    """Synchronous pub/sub for domain events.

    Example:
        bus = EventBus()
        bus.subscribe(AnimalDiedEvent, handle_death)
        bus.emit(AnimalDiedEvent(animal_id=42, position=Vector2d(1, 2), lifespan=7, day=9))
    """

    def __init__(self) -> None:
        self._handlers: DefaultDict[type, List[Callable]] = defaultdict(list)

    def emit(self, event: object) -> None:
        """Deliver ``event`` to its handlers in registration order."""
        handlers = self._handlers.get(type(event))
        if handlers:
            for handler in list(handlers):
                handler(event)

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> bool:
        """Remove a handler.

        Returns:
            True if the handler was registered and has been removed
        """
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def clear_subscribers(self) -> None:
        self._handlers.clear()

    def has_subscribers(self, event_type: type) -> bool:
        return bool(self._handlers.get(event_type))

    def subscriber_count(self, event_type: type) -> int:
        return len(self._handlers.get(event_type, []))
