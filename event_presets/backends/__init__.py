"""Calendar backends implementing the event store protocol."""

from event_presets.backends.base import (
    BaseEventStore,
    BaseStoreEvent,
    EventRecord,
    EventStore,
    StoreEvent,
)
from event_presets.backends.ics_store import IcsEvent, IcsEventStore
from event_presets.backends.mock_store import MockEvent, MockEventStore

__all__ = [
    "BaseEventStore",
    "BaseStoreEvent",
    "EventRecord",
    "EventStore",
    "StoreEvent",
    "IcsEvent",
    "IcsEventStore",
    "MockEvent",
    "MockEventStore",
]
