"""In-memory event store for tests and dry runs."""

import asyncio
import logging
from datetime import datetime
from typing import Mapping, Optional

from event_presets.constants import EVENT_DURATION
from event_presets.exceptions import BackendError, EventNotInStoreError
from event_presets.identifiers import new_identifier, new_uuid_string
from event_presets.models.authorization import (
    AuthorizationState,
    AuthorizationStatus,
    EntityType,
)
from event_presets.models.calendar import CalendarRef
from event_presets.backends.base import BaseEventStore, BaseStoreEvent, EventRecord

logger = logging.getLogger(__name__)


class MockEvent(BaseStoreEvent):
    """Event record of a MockEventStore."""


class MockEventStore(BaseEventStore[MockEvent]):
    """Event store that keeps everything in memory.

    Each instance has its own authorization state, so tests can put the
    store in any of the four states without touching process-wide state.

    Args:
        authorization_status: Initial status for every entity type.
        grant_on_request: Answer given when access is requested while the
            status is undetermined. None dismisses the prompt.
    """

    event_class = MockEvent

    def __init__(
        self,
        authorization_status: AuthorizationStatus = AuthorizationStatus.AUTHORIZED,
        grant_on_request: Optional[bool] = True,
        calendar: CalendarRef | None = None,
    ):
        self._persisted: dict[str, EventRecord] = {}
        self._calendar = calendar or CalendarRef(
            identifier=new_uuid_string(), title="Mock Calendar"
        )
        self.grant_on_request = grant_on_request
        self.access_requests = 0
        self.fail_with: BackendError | None = None

        authorization = AuthorizationState()
        if authorization_status != AuthorizationStatus.NOT_DETERMINED:
            for entity_type in EntityType:
                authorization.set_status(entity_type, authorization_status)
        super().__init__(authorization)

    @property
    def default_target_calendar(self) -> CalendarRef:
        return self._calendar

    def set_authorization_status(self, status: AuthorizationStatus) -> None:
        """Put the event entity type into status."""
        self.authorization.set_status(EntityType.EVENT, status)

    def _read_persisted(self) -> Mapping[str, EventRecord]:
        return self._persisted

    def _write_persisted(self, records: Mapping[str, EventRecord]) -> None:
        self._persisted = dict(records)

    async def _prompt_user(self, entity_type: EntityType) -> Optional[bool]:
        self.access_requests += 1
        # Let other tasks run, like a real prompt would
        await asyncio.sleep(0)
        return self.grant_on_request

    def save(self, event: MockEvent, commit: bool = True) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        super().save(event, commit=commit)

    def remove(self, event: MockEvent, commit: bool = True) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        super().remove(event, commit=commit)

    # Helpers simulating changes made outside this application

    def add_external_event(
        self,
        title: str,
        start_date: datetime,
        end_date: datetime | None = None,
        identifier: str | None = None,
    ) -> str:
        """Persist an event directly and return its identifier."""
        identifier = identifier or new_identifier(self._calendar.identifier)
        record = EventRecord(
            title=title,
            start_date=start_date,
            end_date=end_date or start_date + EVENT_DURATION,
            calendar=self._calendar,
        )
        self._records[identifier] = record
        self._persisted[identifier] = record
        return identifier

    def edit_external_event(
        self,
        identifier: str,
        title: str | None = None,
        start_date: datetime | None = None,
    ) -> None:
        """Change a persisted event as another application would."""
        record = self._records.get(identifier)
        if record is None:
            raise EventNotInStoreError(f"Event is not in the store: {identifier}")
        start = start_date or record.start_date
        changed = EventRecord(
            title=record.title if title is None else title,
            start_date=start,
            end_date=start + (record.end_date - record.start_date),
            calendar=record.calendar,
        )
        self._records[identifier] = changed
        self._persisted[identifier] = changed

    def delete_external_event(self, identifier: str) -> None:
        """Delete a persisted event as another application would."""
        self._records.pop(identifier, None)
        self._persisted.pop(identifier, None)
