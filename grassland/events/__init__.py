"""Events module for domain event dispatch.

Provides the EventBus used to publish what happens during a day, plus the
typed event definitions.
"""

from grassland.events.domain_events import (
    AnimalBornEvent,
    AnimalDiedEvent,
    GrassGrownEvent,
    MapChangedEvent,
)
from grassland.events.event_bus import EventBus

__all__ = [
    "AnimalBornEvent",
    "AnimalDiedEvent",
    "EventBus",
    "GrassGrownEvent",
    "MapChangedEvent",
]
