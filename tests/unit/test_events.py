"""Unit tests for Event system."""

from compendium_translator.core.events import (
    EventBus,
    Event,
    EventType,
    create_batch_completed_event,
    create_document_failed_event
)


class TestEventBus:
    """Test EventBus functionality."""

    def test_subscribe_and_publish(self):
        """Subscribe to event and receive it when published."""
        bus = EventBus()
        received_events = []

        def handler(event: Event):
            received_events.append(event)

        bus.subscribe(EventType.DOCUMENT_TRANSLATED, handler)
        bus.publish(Event(type=EventType.DOCUMENT_TRANSLATED, data={"name": "Dagger"}))
        bus.publish(Event(type=EventType.RUN_STARTED))  # Not subscribed

        assert len(received_events) == 1
        assert received_events[0].data["name"] == "Dagger"

    def test_unsubscribe(self):
        """Unsubscribe from event type."""
        bus = EventBus()
        received_count = [0]

        def handler(event: Event):
            received_count[0] += 1

        bus.subscribe(EventType.BATCH_COMPLETED, handler)
        bus.publish(Event(type=EventType.BATCH_COMPLETED))
        bus.unsubscribe(EventType.BATCH_COMPLETED, handler)
        bus.publish(Event(type=EventType.BATCH_COMPLETED))

        assert received_count[0] == 1

    def test_unsubscribe_unknown_callback(self):
        bus = EventBus()
        bus.subscribe(EventType.RUN_STARTED, lambda e: None)
        bus.unsubscribe(EventType.RUN_STARTED, print)

    def test_event_history(self):
        """History is recorded only once enabled."""
        bus = EventBus()

        bus.publish(Event(type=EventType.RUN_STARTED))
        assert len(bus.get_history()) == 0

        bus.enable_history()
        bus.publish(Event(type=EventType.BATCH_STARTED))
        bus.publish(Event(type=EventType.BATCH_COMPLETED))

        history = bus.get_history()
        assert [e.type for e in history] == [EventType.BATCH_STARTED, EventType.BATCH_COMPLETED]
        assert len(bus.get_events_by_type(EventType.BATCH_STARTED)) == 1

    def test_listener_error_does_not_propagate(self):
        """A failing listener must not stop other listeners."""
        bus = EventBus()
        received = []

        def broken(event):
            raise RuntimeError("listener bug")

        bus.subscribe(EventType.DOCUMENT_FAILED, broken)
        bus.subscribe(EventType.DOCUMENT_FAILED, received.append)
        bus.publish(Event(type=EventType.DOCUMENT_FAILED))

        assert len(received) == 1


class TestEventBuilders:
    """Test convenience event builders."""

    def test_batch_completed_event(self):
        event = create_batch_completed_event(
            batch_index=1, total_batches=3, processed=10, total=12, failed=2
        )

        assert event.type == EventType.BATCH_COMPLETED
        assert event.data["processed"] == 10
        assert event.data["failed"] == 2
        assert abs(event.data["progress"] - 10 / 12) < 1e-9
        assert event.source == "batch_scheduler"

    def test_batch_completed_event_empty_run(self):
        event = create_batch_completed_event(0, 0, 0, 0, 0)
        assert event.data["progress"] == 0

    def test_document_failed_event(self):
        event = create_document_failed_event("Longsword", ValueError("bad response"))

        assert event.type == EventType.DOCUMENT_FAILED
        assert event.data["name"] == "Longsword"
        assert event.data["error"] == "bad response"
        assert event.data["error_type"] == "ValueError"
