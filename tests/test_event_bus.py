"""Tests for the EventBus domain event dispatch system."""

from grassland.events import AnimalBornEvent, AnimalDiedEvent, EventBus, GrassGrownEvent
from grassland.genetics import Genome
from grassland.math_utils import Vector2d


def _died(animal_id: int = 1) -> AnimalDiedEvent:
    return AnimalDiedEvent(animal_id=animal_id, position=Vector2d(1, 2), lifespan=3, children=0, day=4)


class TestEventBus:
    """Test suite for EventBus functionality."""

    def test_emit_reaches_subscriber(self) -> None:
        bus = EventBus()
        received: list = []
        bus.subscribe(AnimalDiedEvent, received.append)

        event = _died(42)
        bus.emit(event)

        assert received == [event]
        assert received[0].animal_id == 42

    def test_no_subscribers_no_crash(self) -> None:
        bus = EventBus()
        bus.emit(GrassGrownEvent(requested=3, grown=3, on_equator=2, day=1))
        assert bus.subscriber_count(GrassGrownEvent) == 0
        assert not bus.has_subscribers(GrassGrownEvent)

    def test_multiple_handlers_run_in_registration_order(self) -> None:
        bus = EventBus()
        results: list = []
        bus.subscribe(AnimalDiedEvent, lambda e: results.append(("h1", e.animal_id)))
        bus.subscribe(AnimalDiedEvent, lambda e: results.append(("h2", e.animal_id)))

        bus.emit(_died(99))

        assert results == [("h1", 99), ("h2", 99)]

    def test_dispatch_is_by_exact_type(self) -> None:
        bus = EventBus()
        deaths: list = []
        bus.subscribe(AnimalDiedEvent, deaths.append)

        bus.emit(
            AnimalBornEvent(
                animal_id=5,
                parent_ids=(1, 2),
                position=Vector2d(0, 0),
                genome=Genome((1, 2)),
                energy=20,
                day=3,
            )
        )

        assert deaths == []

    def test_unsubscribe(self) -> None:
        bus = EventBus()
        received: list = []
        bus.subscribe(AnimalDiedEvent, received.append)

        assert bus.unsubscribe(AnimalDiedEvent, received.append) is True
        assert bus.unsubscribe(AnimalDiedEvent, received.append) is False
        bus.emit(_died())
        assert received == []

    def test_handler_may_unsubscribe_during_emit(self) -> None:
        bus = EventBus()
        calls: list = []

        def once(event: AnimalDiedEvent) -> None:
            calls.append(event.animal_id)
            bus.unsubscribe(AnimalDiedEvent, once)

        bus.subscribe(AnimalDiedEvent, once)
        bus.emit(_died(1))
        bus.emit(_died(2))

        assert calls == [1]

    def test_clear_subscribers(self) -> None:
        bus = EventBus()
        bus.subscribe(AnimalDiedEvent, lambda e: None)
        bus.subscribe(GrassGrownEvent, lambda e: None)
        assert bus.subscriber_count(AnimalDiedEvent) == 1

        bus.clear_subscribers()

        assert not bus.has_subscribers(AnimalDiedEvent)
        assert not bus.has_subscribers(GrassGrownEvent)
