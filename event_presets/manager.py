"""Preset collection kept in sync with calendar events."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Sequence

from event_presets.coordinator import CoordinatorResult, EventCoordinator
from event_presets.exceptions import (
    EventNotFoundError,
    MalformedIdentifierError,
    UnexpectedError,
)
from event_presets.models.preset import Preset
from event_presets.storage.preset_repository import PresetRepository

logger = logging.getLogger(__name__)

SAMPLE_PRESETS = (
    ("Geheimes Haus", timedelta(hours=1)),
    ("Die größte Gemeinheit der Welt", timedelta(days=1)),
    ("Like Me, Hotzenplotz", timedelta(seconds=172.8)),
)


@dataclass
class ReconcileReport:
    """Outcome of reconciling presets with the event store."""

    updated: list[Preset] = field(default_factory=list)
    orphaned: list[Preset] = field(default_factory=list)
    failed: list[tuple[Preset, Exception]] = field(default_factory=list)
    skipped: list[Preset] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.updated or self.orphaned)


class PresetManager:
    """Owns the ordered preset list and mirrors changes into the event store.

    Presets are saved to the repository after every successful change.
    Operations return the coordinator's result so callers decide how to
    report failures.
    """

    def __init__(self, coordinator: EventCoordinator[Any], repository: PresetRepository):
        self.coordinator = coordinator
        self.repository = repository
        self._presets: list[Preset] = []

    @property
    def presets(self) -> Sequence[Preset]:
        return tuple(self._presets)

    def load(self) -> Sequence[Preset]:
        """Load presets from the repository."""
        self._presets = self.repository.load()
        return self.presets

    def save(self) -> None:
        self.repository.save(self._presets)

    def get(self, index: int) -> Preset:
        """Preset at index; raises IndexError for unknown positions."""
        if not 0 <= index < len(self._presets):
            raise IndexError(f"No preset at position {index}")
        return self._presets[index]

    async def add(self, title: str, date: datetime) -> CoordinatorResult[Preset]:
        """Create a preset and its calendar event.

        The preset is only kept if the event could be created.

        Raises:
            EmptyTitleError: If title is empty.
        """
        preset = Preset.create(title, date)
        result = await self.coordinator.create_event(preset)
        if not result.ok:
            logger.error(f"Could not create event for '{title}': {result.error}")
            return CoordinatorResult.failure(result.error)

        try:
            preset.set_external_identifier(result.value)
        except MalformedIdentifierError as e:
            logger.error(f"Store returned malformed identifier for '{title}', removing event")
            created = preset.model_copy(update={"external_identifier": result.value})
            removal = await self.coordinator.remove_event(created)
            if not removal.ok:
                logger.error(f"Could not remove event {result.value}: {removal.error}")
            return CoordinatorResult.failure(UnexpectedError(e))

        self._presets.append(preset)
        self.save()
        return CoordinatorResult.success(preset)

    async def edit(
        self, index: int, title: str | None = None, date: datetime | None = None
    ) -> CoordinatorResult[Preset]:
        """Change a preset and its calendar event.

        The preset is only changed if the calendar event could be edited.
        """
        preset = self.get(index)
        changed = Preset.create(
            title if title is not None else preset.title,
            date if date is not None else preset.date,
            preset.external_identifier,
        )

        result = await self.coordinator.edit_event(changed)
        if not result.ok:
            logger.error(f"Could not edit event for '{preset.title}': {result.error}")
            return CoordinatorResult.failure(result.error)

        self._presets[index] = changed
        self.save()
        return CoordinatorResult.success(changed)

    async def delete(self, index: int) -> CoordinatorResult[Preset]:
        """Remove the calendar event of a preset, then the preset.

        A preset whose event is already gone from the store is dropped too.
        """
        preset = self.get(index)
        result = await self.coordinator.remove_event(preset)
        if not result.ok and not isinstance(result.error, EventNotFoundError):
            logger.error(f"Could not remove event for '{preset.title}': {result.error}")
            return CoordinatorResult.failure(result.error)

        del self._presets[index]
        self.save()
        return CoordinatorResult.success(preset)

    async def reconcile(self) -> ReconcileReport:
        """Pull changes made to calendar events outside this application.

        Presets whose event disappeared are tagged as orphaned.
        """
        report = ReconcileReport()
        for preset in self._presets:
            if preset.external_identifier is None:
                report.skipped.append(preset)
                continue

            result = await self.coordinator.needs_update(preset)
            if result.ok and result.value:
                result = await self.coordinator.apply_backend_changes(preset)
                if result.ok:
                    report.updated.append(preset)

            if result.ok:
                continue
            if isinstance(result.error, EventNotFoundError):
                if not preset.is_orphaned:
                    preset.mark_orphaned()
                    report.orphaned.append(preset)
            else:
                report.failed.append((preset, result.error))

        if report.changed:
            self.save()
        logger.info(
            f"Reconciled presets: {len(report.updated)} updated, "
            f"{len(report.orphaned)} orphaned, {len(report.failed)} failed"
        )
        return report

    async def load_samples(self, now: datetime | None = None) -> list[Preset]:
        """Add the sample presets and create their events."""
        now = now or datetime.now()
        added = []
        for title, offset in SAMPLE_PRESETS:
            result = await self.add(title, now + offset)
            if result.ok:
                added.append(result.value)
            else:
                logger.error(f"Unable to create sample '{title}': {result.error}")
        return added
