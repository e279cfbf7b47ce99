"""Capability interfaces for calendar backends.

``EventStore`` describes everything the event coordinator needs from a
calendar backend, ``StoreEvent`` the event records it hands out. A store
is generic in its event type and only ever builds records of that type,
so a coordinator bound to a store can never receive another backend's
records.

``BaseEventStore`` implements the bookkeeping shared by the concrete
backends (authorization, identifier assignment, batching, invalidation on
reset). Subclasses provide persistence and the access prompt.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Generic, Mapping, Optional, Protocol, TypeVar

from event_presets.exceptions import (
    BackendError,
    EventNotInStoreError,
    ForeignEventError,
    StaleEventError,
)
from event_presets.identifiers import new_identifier
from event_presets.models.authorization import (
    AuthorizationState,
    AuthorizationStatus,
    EntityType,
)
from event_presets.models.calendar import CalendarRef

logger = logging.getLogger(__name__)


class StoreEvent(Protocol):
    """Protocol for mutable event records handed out by an event store."""

    title: Optional[str]
    start_date: Optional[datetime]
    end_date: Optional[datetime]
    calendar: Optional[CalendarRef]

    @property
    def identifier(self) -> Optional[str]:
        """Assigned by the store on first save, None before that."""
        ...

    @property
    def store(self) -> Any:
        """The store this record belongs to."""
        ...


EventT = TypeVar("EventT", bound=StoreEvent)


class EventStore(Protocol[EventT]):
    """Protocol for calendar backends."""

    def authorization_status(self, entity_type: EntityType) -> AuthorizationStatus:
        """Current access decision for entity_type."""
        ...

    async def request_access(self, entity_type: EntityType) -> bool:
        """Ask the user for access; returns True if access is authorized.

        The user is asked at most once. Later calls return the existing
        decision.
        """
        ...

    def save(self, event: EventT, commit: bool = True) -> None:
        """Create or update event. With commit=False the change is batched."""
        ...

    def commit(self) -> None:
        """Persist batched changes."""
        ...

    def fetch(self, identifier: str) -> Optional[EventT]:
        """Event with identifier, or None."""
        ...

    def remove(self, event: EventT, commit: bool = True) -> None:
        """Remove event from the store."""
        ...

    def reset(self) -> None:
        """Drop unsaved changes and invalidate every handed-out record."""
        ...

    @property
    def default_target_calendar(self) -> CalendarRef:
        """Calendar new events are added to."""
        ...

    def create_event(self) -> EventT:
        """New unsaved record bound to this store."""
        ...


@dataclass(frozen=True)
class EventRecord:
    """Persisted field values of one event."""

    title: str
    start_date: datetime
    end_date: datetime
    calendar: CalendarRef


class BaseStoreEvent:
    """Event record bound to the store that created it."""

    def __init__(self, store: "BaseEventStore[Any]"):
        self._store = store
        self._generation = store.generation
        self._identifier: Optional[str] = None
        self.title: Optional[str] = None
        self.start_date: Optional[datetime] = None
        self.end_date: Optional[datetime] = None
        self.calendar: Optional[CalendarRef] = None

    @property
    def identifier(self) -> Optional[str]:
        return self._identifier

    @property
    def store(self) -> "BaseEventStore[Any]":
        return self._store

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(identifier={self._identifier!r}, "
            f"title={self.title!r}, start_date={self.start_date!r})"
        )


StoreEventT = TypeVar("StoreEventT", bound=BaseStoreEvent)


class BaseEventStore(Generic[StoreEventT]):
    """Shared implementation of the EventStore protocol."""

    event_class: ClassVar[type]

    def __init__(self, authorization: AuthorizationState):
        self.authorization = authorization
        self.generation = 0
        self._records: dict[str, EventRecord] = dict(self._read_persisted())
        self._dirty = False
        self._pending_requests: dict[EntityType, asyncio.Future] = {}

    # Persistence hooks

    def _read_persisted(self) -> Mapping[str, EventRecord]:
        """Load committed records."""
        raise NotImplementedError

    def _write_persisted(self, records: Mapping[str, EventRecord]) -> None:
        """Persist records."""
        raise NotImplementedError

    async def _prompt_user(self, entity_type: EntityType) -> Optional[bool]:
        """Ask for access; None if the prompt was dismissed without an answer."""
        raise NotImplementedError

    def _authorization_decided(self) -> None:
        """Called after a new decision was recorded."""

    # Authorization

    def authorization_status(self, entity_type: EntityType) -> AuthorizationStatus:
        return self.authorization.status(entity_type)

    async def request_access(self, entity_type: EntityType) -> bool:
        status = self.authorization.status(entity_type)
        if status != AuthorizationStatus.NOT_DETERMINED:
            return status == AuthorizationStatus.AUTHORIZED

        # Concurrent callers share the prompt already on screen
        pending = self._pending_requests.get(entity_type)
        if pending is None:
            pending = asyncio.ensure_future(self._ask_for_access(entity_type))
            self._pending_requests[entity_type] = pending
            pending.add_done_callback(
                lambda _: self._pending_requests.pop(entity_type, None)
            )
        return await pending

    async def _ask_for_access(self, entity_type: EntityType) -> bool:
        granted = await self._prompt_user(entity_type)
        if granted is None:
            logger.info(f"Access prompt for {entity_type.value} data was dismissed")
            return False

        status = self.authorization.decide(entity_type, granted)
        self._authorization_decided()
        return status == AuthorizationStatus.AUTHORIZED

    # Events

    def create_event(self) -> StoreEventT:
        return self.event_class(self)

    def save(self, event: StoreEventT, commit: bool = True) -> None:
        self._check_owned(event)
        if event.start_date is None or event.end_date is None:
            raise BackendError("Event needs a start and an end date")
        if event.end_date < event.start_date:
            raise BackendError("Event ends before it starts")
        if event.calendar is None:
            raise BackendError("Event has no calendar")

        previous_records = dict(self._records)
        previous_identifier = event.identifier

        # Saving a record deleted elsewhere re-creates it under its identifier
        identifier = event.identifier or new_identifier(event.calendar.identifier)
        self._records[identifier] = EventRecord(
            title=event.title or "",
            start_date=event.start_date,
            end_date=event.end_date,
            calendar=event.calendar,
        )
        event._identifier = identifier
        self._dirty = True
        logger.debug(f"Saved event {identifier}")

        if commit:
            try:
                self.commit()
            except BackendError:
                self._records = previous_records
                event._identifier = previous_identifier
                raise

    def commit(self) -> None:
        if not self._dirty:
            return
        self._write_persisted(self._records)
        self._dirty = False

    def fetch(self, identifier: str) -> Optional[StoreEventT]:
        record = self._records.get(identifier)
        if record is None:
            return None

        event = self.event_class(self)
        event._identifier = identifier
        event.title = record.title
        event.start_date = record.start_date
        event.end_date = record.end_date
        event.calendar = record.calendar
        return event

    def remove(self, event: StoreEventT, commit: bool = True) -> None:
        self._check_owned(event)
        if event.identifier is None or event.identifier not in self._records:
            raise EventNotInStoreError(f"Event is not in the store: {event.identifier}")

        previous_records = dict(self._records)
        del self._records[event.identifier]
        self._dirty = True
        logger.debug(f"Removed event {event.identifier}")

        if commit:
            try:
                self.commit()
            except BackendError:
                self._records = previous_records
                raise

    def reset(self) -> None:
        self._records = dict(self._read_persisted())
        self._dirty = False
        self.generation += 1
        logger.info("Event store reset")

    def _check_owned(self, event: StoreEventT) -> None:
        if not isinstance(event, self.event_class) or event.store is not self:
            raise ForeignEventError(f"{event!r} belongs to a different event store")
        if event._generation != self.generation:
            raise StaleEventError(f"{event!r} was obtained before the store was reset")

    def __len__(self) -> int:
        return len(self._records)
