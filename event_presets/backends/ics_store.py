"""Event store backed by an iCalendar file.

The file plays the role of the system calendar: other applications may
edit or delete its events, and :meth:`IcsEventStore.reset` picks those
changes up. Each ``VEVENT`` carries the composite event identifier in its
``UID``; the calendar identifier lives in ``X-WR-RELCALID``.
"""

import asyncio
import logging
import os
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Callable, Mapping, Optional

from icalendar import Calendar, Event

from event_presets.backends.base import BaseEventStore, BaseStoreEvent, EventRecord
from event_presets.constants import DEFAULT_CALENDAR_NAME, EVENT_DURATION
from event_presets.exceptions import CalendarFileError
from event_presets.identifiers import is_uuid_shaped, new_uuid_string
from event_presets.models.authorization import (
    AuthorizationState,
    EntityType,
    process_authorization_state,
)
from event_presets.models.calendar import CalendarRef

logger = logging.getLogger(__name__)

AccessPrompt = Callable[[EntityType], Optional[bool]]


class IcsEvent(BaseStoreEvent):
    """Event record of an IcsEventStore."""


def _as_datetime(value: date | datetime) -> datetime:
    """All-day values become midnight of that day."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


class IcsEventStore(BaseEventStore[IcsEvent]):
    """Event store reading and writing a single .ics file.

    Args:
        path: Calendar file; created on first commit.
        calendar_name: Name given to a newly created calendar.
        authorization: Explicit authorization state. Defaults to the state
            loaded from authorization_file, or the process-wide state.
        authorization_file: Where decisions are persisted, if anywhere.
        prompt: Blocking callable asking the user for access. It runs in a
            worker thread; None answers mean the prompt was dismissed.
    """

    event_class = IcsEvent

    def __init__(
        self,
        path: Path,
        calendar_name: str = DEFAULT_CALENDAR_NAME,
        authorization: AuthorizationState | None = None,
        authorization_file: Path | None = None,
        prompt: AccessPrompt | None = None,
    ):
        self.path = path
        self.calendar_name = calendar_name
        self.authorization_file = authorization_file
        self._prompt = prompt
        self._calendar = CalendarRef(identifier=new_uuid_string(), title=calendar_name)

        if authorization is None:
            if authorization_file is not None:
                authorization = AuthorizationState.load(authorization_file)
            else:
                authorization = process_authorization_state()
        super().__init__(authorization)

    @property
    def default_target_calendar(self) -> CalendarRef:
        return self._calendar

    async def _prompt_user(self, entity_type: EntityType) -> Optional[bool]:
        if self._prompt is None:
            logger.warning(f"No way to ask for access to {entity_type.value} data")
            return None
        return await asyncio.to_thread(self._prompt, entity_type)

    def _authorization_decided(self) -> None:
        if self.authorization_file is None:
            return
        try:
            self.authorization.save(self.authorization_file)
        except OSError as e:
            logger.warning(f"Failed to save authorization decision: {e}")

    def _read_persisted(self) -> Mapping[str, EventRecord]:
        """Read events from the calendar file."""
        if not self.path.exists() or self.path.stat().st_size == 0:
            logger.debug(f"Calendar file does not exist yet: {self.path}")
            return {}

        try:
            cal = Calendar.from_ical(self.path.read_bytes())
        except (OSError, ValueError) as e:
            raise CalendarFileError(f"Failed to read calendar file {self.path}: {e}") from e

        identifier = cal.get("X-WR-RELCALID")
        if identifier and not is_uuid_shaped(str(identifier)):
            # New event identifiers embed the calendar identifier
            logger.warning(
                f"Ignoring calendar identifier {str(identifier)!r} in {self.path}, "
                f"using {self._calendar.identifier}"
            )
            identifier = None
        title = cal.get("X-WR-CALNAME")
        self._calendar = CalendarRef(
            identifier=str(identifier) if identifier else self._calendar.identifier,
            title=str(title) if title else self.calendar_name,
        )

        records: dict[str, EventRecord] = {}
        for component in cal.walk("VEVENT"):
            uid = component.get("uid")
            dtstart = component.get("dtstart")
            if not uid or not dtstart:
                logger.warning("Skipping calendar entry without UID or start")
                continue

            start = _as_datetime(dtstart.dt)
            dtend = component.get("dtend")
            end = _as_datetime(dtend.dt) if dtend else start + EVENT_DURATION
            records[str(uid)] = EventRecord(
                title=str(component.get("summary", "")),
                start_date=start,
                end_date=end,
                calendar=self._calendar,
            )

        logger.debug(f"Read {len(records)} events from {self.path}")
        return records

    def _write_persisted(self, records: Mapping[str, EventRecord]) -> None:
        """Write all events to the calendar file."""
        cal = Calendar()
        cal.add("prodid", "-//Event Presets//EN")
        cal.add("version", "2.0")
        cal.add("X-WR-CALNAME", self._calendar.title)
        cal.add("X-WR-RELCALID", self._calendar.identifier)

        stamp = datetime.now(timezone.utc)
        for identifier, record in records.items():
            event = Event()
            event.add("uid", identifier)
            event.add("summary", record.title)
            event.add("dtstart", record.start_date)
            event.add("dtend", record.end_date)
            event.add("dtstamp", stamp)
            cal.add_component(event)

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(cal.to_ical())
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise CalendarFileError(f"Failed to write calendar file {self.path}: {e}") from e

        logger.debug(f"Wrote {len(records)} events to {self.path}")
