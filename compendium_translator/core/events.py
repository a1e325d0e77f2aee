"""
Event system for translation run observability.

Provides decoupled event publishing and subscription for monitoring
batch progress and debugging.
"""

import logging
from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List
import time

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Translation run event types."""

    # Run-level events
    RUN_STARTED = "run_started"
    RUN_COMPLETED = "run_completed"

    # Batch-level events
    BATCH_STARTED = "batch_started"
    BATCH_COMPLETED = "batch_completed"

    # Document-level events
    DOCUMENT_TRANSLATED = "document_translated"
    DOCUMENT_FAILED = "document_failed"


@dataclass
class Event:
    """Translation run event.

    Attributes:
        type: Event type
        data: Event-specific data dictionary
        timestamp: Unix timestamp when event occurred
        source: Optional source identifier (e.g., "batch_scheduler")
    """
    type: EventType
    data: Dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)
    source: str = "unknown"


class EventBus:
    """Central event bus for translation runs."""

    def __init__(self):
        self._listeners: Dict[EventType, List[Callable]] = {}
        self._history: List[Event] = []
        self._record_history = False

    def subscribe(self, event_type: EventType, callback: Callable[[Event], None]) -> None:
        """Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            callback: Function to call when event occurs (receives Event object)
        """
        self._listeners.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: EventType, callback: Callable) -> None:
        if event_type in self._listeners:
            try:
                self._listeners[event_type].remove(callback)
            except ValueError:
                pass  # Callback not found

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribers.

        Args:
            event: Event to publish
        """
        if self._record_history:
            self._history.append(event)

        for listener in self._listeners.get(event.type, []):
            try:
                listener(event)
            except Exception:
                # Listener errors must not crash the run
                logger.exception("Event listener failed for %s", event.type.value)

    def enable_history(self) -> None:
        """Enable event history recording."""
        self._record_history = True

    def get_history(self) -> List[Event]:
        """Get recorded event history.

        Returns:
            List of events in chronological order
        """
        return self._history.copy()

    def get_events_by_type(self, event_type: EventType) -> List[Event]:
        """Get all events of a specific type from history."""
        return [e for e in self._history if e.type == event_type]


# === Convenience Event Builders ===

def create_batch_completed_event(
    batch_index: int,
    total_batches: int,
    processed: int,
    total: int,
    failed: int
) -> Event:
    """Create batch completion event.

    Args:
        batch_index: Index of the completed batch
        total_batches: Total number of batches
        processed: Documents attempted so far
        total: Total number of documents
        failed: Failed documents in this batch

    Returns:
        Event object
    """
    return Event(
        type=EventType.BATCH_COMPLETED,
        data={
            "batch_index": batch_index,
            "total_batches": total_batches,
            "processed": processed,
            "total": total,
            "failed": failed,
            "progress": processed / total if total > 0 else 0
        },
        source="batch_scheduler"
    )


def create_document_failed_event(name: str, error: Exception) -> Event:
    """Create document failure event."""
    return Event(
        type=EventType.DOCUMENT_FAILED,
        data={
            "name": name,
            "error": str(error),
            "error_type": type(error).__name__
        },
        source="batch_scheduler"
    )
