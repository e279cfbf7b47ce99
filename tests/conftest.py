from datetime import datetime

import pytest

from event_presets.backends.mock_store import MockEventStore
from event_presets.coordinator import EventCoordinator
from event_presets.identifiers import new_identifier
from event_presets.models.preset import Preset


@pytest.fixture
def now():
    """Fixed reference time."""
    return datetime(2026, 3, 14, 9, 30)


@pytest.fixture
def store():
    """Mock event store with access authorized."""
    return MockEventStore()


@pytest.fixture
def coordinator(store):
    """Coordinator bound to the mock store."""
    return EventCoordinator(store)


@pytest.fixture
def preset(now):
    """Preset without a calendar event."""
    return Preset(title="TestPreset", date=now)


@pytest.fixture
def identifier():
    """A well-formed event identifier."""
    return new_identifier()
