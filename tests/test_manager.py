"""Tests for the preset manager."""

from datetime import timedelta

import pytest

from event_presets.backends.mock_store import MockEventStore
from event_presets.coordinator import EventCoordinator
from event_presets.exceptions import (
    AuthorizationDeniedError,
    EmptyTitleError,
    EventNotFoundError,
    InvalidEventError,
    MalformedIdentifierError,
    UnexpectedError,
)
from event_presets.manager import SAMPLE_PRESETS, PresetManager
from event_presets.models.authorization import AuthorizationStatus
from event_presets.models.calendar import CalendarRef
from event_presets.models.preset import Preset
from event_presets.storage.preset_repository import PresetRepository


@pytest.fixture
def repository(tmp_path):
    return PresetRepository(tmp_path / "presets.json")


@pytest.fixture
def manager(coordinator, repository):
    return PresetManager(coordinator, repository)


@pytest.mark.asyncio
async def test_add(manager, store, repository, now):
    """Test adding creates the event and archives the preset."""
    result = await manager.add("Dentist", now)

    preset = result.unwrap()
    assert manager.presets == (preset,)
    assert store.fetch(preset.external_identifier).title == "Dentist"
    assert repository.load() == [preset]


@pytest.mark.asyncio
async def test_add_empty_title(manager, store, now):
    """Test empty titles are refused before touching the store."""
    with pytest.raises(EmptyTitleError):
        await manager.add("", now)
    assert manager.presets == ()
    assert len(store) == 0


@pytest.mark.asyncio
async def test_add_denied(repository, now):
    """Test presets are not kept when their event cannot be created."""
    store = MockEventStore(authorization_status=AuthorizationStatus.DENIED)
    manager = PresetManager(EventCoordinator(store), repository)

    result = await manager.add("Dentist", now)

    assert isinstance(result.error, AuthorizationDeniedError)
    assert manager.presets == ()
    assert not repository.path.exists()


@pytest.mark.asyncio
async def test_edit(manager, store, repository, now):
    """Test edits change the preset and its event."""
    original = (await manager.add("Dentist", now)).unwrap()

    result = await manager.edit(0, title="Orthodontist")

    edited = result.unwrap()
    assert edited.title == "Orthodontist"
    assert edited.date == now
    assert edited.external_identifier == original.external_identifier
    assert store.fetch(original.external_identifier).title == "Orthodontist"
    assert repository.load()[0].title == "Orthodontist"


@pytest.mark.asyncio
async def test_edit_failure_keeps_preset(manager, store, now):
    """Test a failed edit leaves the preset unchanged."""
    original = (await manager.add("Dentist", now)).unwrap()
    store.delete_external_event(original.external_identifier)

    result = await manager.edit(0, date=now + timedelta(days=1))

    assert isinstance(result.error, EventNotFoundError)
    assert manager.get(0) == original


@pytest.mark.asyncio
async def test_edit_unknown_position(manager):
    """Test editing outside the list."""
    with pytest.raises(IndexError):
        await manager.edit(3, title="Nothing")


@pytest.mark.asyncio
async def test_delete(manager, store, repository, now):
    """Test deleting removes the event and the preset."""
    preset = (await manager.add("Dentist", now)).unwrap()

    result = await manager.delete(0)

    assert result.unwrap() == preset
    assert manager.presets == ()
    assert len(store) == 0
    assert repository.load() == []


@pytest.mark.asyncio
async def test_delete_event_already_gone(manager, store, now):
    """Test presets are dropped when their event was deleted elsewhere."""
    preset = (await manager.add("Dentist", now)).unwrap()
    store.delete_external_event(preset.external_identifier)

    result = await manager.delete(0)

    assert result.ok
    assert manager.presets == ()


@pytest.mark.asyncio
async def test_delete_denied_keeps_preset(manager, store, now):
    """Test presets stay when their event may not be removed."""
    await manager.add("Dentist", now)
    store.set_authorization_status(AuthorizationStatus.DENIED)

    result = await manager.delete(0)

    assert isinstance(result.error, AuthorizationDeniedError)
    assert len(manager.presets) == 1
    assert len(store) == 1


@pytest.mark.asyncio
async def test_reconcile(manager, store, repository, now):
    """Test reconciling pulls changes and tags deleted events."""
    changed = (await manager.add("Changed", now)).unwrap()
    deleted = (await manager.add("Deleted", now)).unwrap()
    untouched = (await manager.add("Untouched", now)).unwrap()
    store.edit_external_event(changed.external_identifier, title="Changed elsewhere")
    store.delete_external_event(deleted.external_identifier)

    report = await manager.reconcile()

    assert report.updated == [changed]
    assert report.orphaned == [deleted]
    assert report.failed == []
    assert report.changed
    assert [p.title for p in manager.presets] == [
        "Changed elsewhere",
        "Deleted - deleted!",
        "Untouched",
    ]
    assert repository.load() == list(manager.presets)
    assert untouched.title == "Untouched"


@pytest.mark.asyncio
async def test_reconcile_tags_once(manager, store, now):
    """Test orphaned presets are not tagged again."""
    preset = (await manager.add("Deleted", now)).unwrap()
    store.delete_external_event(preset.external_identifier)

    await manager.reconcile()
    report = await manager.reconcile()

    assert report.orphaned == []
    assert not report.changed
    assert manager.get(0).title == "Deleted - deleted!"


@pytest.mark.asyncio
async def test_reconcile_reports_failures(manager, store, repository, now):
    """Test authorization failures are collected, not raised."""
    await manager.add("Dentist", now)
    store.set_authorization_status(AuthorizationStatus.RESTRICTED)

    report = await manager.reconcile()

    assert len(report.failed) == 1
    assert report.updated == []


@pytest.mark.asyncio
async def test_reconcile_skips_presets_without_event(manager, repository, now):
    """Test presets loaded without an identifier are skipped."""
    repository.save([Preset.create("Imported", now)])
    manager.load()

    report = await manager.reconcile()

    assert [p.title for p in report.skipped] == ["Imported"]


@pytest.mark.asyncio
async def test_load_samples(manager, store, now):
    """Test the sample presets are created with their offsets."""
    added = await manager.load_samples(now)

    assert [p.title for p in added] == [title for title, _ in SAMPLE_PRESETS]
    assert [p.date for p in added] == [
        (now + offset).replace(microsecond=0) for _, offset in SAMPLE_PRESETS
    ]
    assert len(store) == len(SAMPLE_PRESETS)


@pytest.mark.asyncio
async def test_reconcile_keeps_preset_when_event_title_emptied(manager, store, repository, now):
    """Test an event renamed to an empty title does not wipe the preset."""
    preset = (await manager.add("Dentist", now)).unwrap()
    store.edit_external_event(preset.external_identifier, title="")

    report = await manager.reconcile()

    assert [p.title for p, _ in report.failed] == ["Dentist"]
    assert isinstance(report.failed[0][1], InvalidEventError)
    assert manager.get(0).title == "Dentist"
    assert [p.title for p in repository.load()] == ["Dentist"]


@pytest.mark.asyncio
async def test_add_with_malformed_store_identifier(repository, now):
    """Test an event whose identifier cannot be kept is removed again."""
    store = MockEventStore(calendar=CalendarRef(identifier="work-calendar", title="Work"))
    manager = PresetManager(EventCoordinator(store), repository)

    result = await manager.add("Dentist", now)

    assert isinstance(result.error, UnexpectedError)
    assert isinstance(result.error.cause, MalformedIdentifierError)
    assert manager.presets == ()
    assert len(store) == 0
