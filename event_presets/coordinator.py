"""Coordinates presets with the events of an event store."""

import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from event_presets.backends.base import EventStore, EventT
from event_presets.constants import EVENT_DURATION
from event_presets.exceptions import (
    AuthorizationDeniedError,
    AuthorizationRestrictedError,
    BackendError,
    CoordinatorError,
    EventNotFoundError,
    InvalidEventError,
    MissingIdentifierError,
    UnexpectedError,
    UnknownAuthorizationStatusError,
)
from event_presets.models.authorization import AuthorizationStatus, EntityType
from event_presets.models.preset import Preset

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class CoordinatorResult(Generic[T]):
    """Outcome of a coordinator operation: a value or an error."""

    value: Optional[T] = None
    error: Optional[CoordinatorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the error if the operation failed."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: Optional[T] = None) -> "CoordinatorResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: CoordinatorError) -> "CoordinatorResult[T]":
        return cls(error=error)


class EventCoordinator(Generic[EventT]):
    """Creates, edits, removes and reconciles the calendar events of presets.

    The coordinator is bound to one store for its lifetime and works only
    with that store's event records. Every operation checks authorization
    first, asking the user if no decision was made yet. Expected failures
    are returned in a :class:`CoordinatorResult`, never raised.

    Args:
        store: Event store to operate on.
        entity_type: Entity type access is checked for.
        max_access_requests: How often access is requested while the status
            stays undetermined before the operation is refused.
    """

    def __init__(
        self,
        store: EventStore[EventT],
        entity_type: EntityType = EntityType.EVENT,
        max_access_requests: int = 1,
    ):
        self.store = store
        self.entity_type = entity_type
        self.max_access_requests = max_access_requests

    async def create_event(self, preset: Preset) -> CoordinatorResult[str]:
        """Create a calendar event for preset.

        The preset is not modified; store the returned identifier on it.

        Returns:
            Result holding the identifier of the new event.
        """
        error = await self._confirm_authorization()
        if error:
            return CoordinatorResult.failure(error)

        event = self.store.create_event()
        event.title = preset.title
        event.start_date = preset.date
        event.end_date = preset.date + EVENT_DURATION
        event.calendar = self.store.default_target_calendar

        try:
            self.store.save(event, commit=True)
        except BackendError as e:
            logger.error(f"Failed to save event for '{preset.title}': {e}")
            return CoordinatorResult.failure(UnexpectedError(e))

        logger.info(f"Saved event with identifier: {event.identifier}")
        return CoordinatorResult.success(event.identifier)

    async def remove_event(self, preset: Preset) -> CoordinatorResult[None]:
        """Remove the calendar event created from preset."""
        lookup = await self._lookup(preset)
        if not lookup.ok:
            return CoordinatorResult.failure(lookup.error)
        event = lookup.value

        try:
            self.store.remove(event, commit=True)
        except BackendError as e:
            logger.error(f"Failed to remove event {preset.external_identifier}: {e}")
            return CoordinatorResult.failure(UnexpectedError(e))

        logger.info(f"Removed event with identifier: {preset.external_identifier}")
        return CoordinatorResult.success()

    async def edit_event(self, preset: Preset) -> CoordinatorResult[None]:
        """Overwrite the calendar event of preset with the preset's values."""
        lookup = await self._lookup(preset)
        if not lookup.ok:
            return CoordinatorResult.failure(lookup.error)
        event = lookup.value

        event.title = preset.title
        event.start_date = preset.date
        event.end_date = preset.date + EVENT_DURATION

        try:
            self.store.save(event, commit=True)
        except BackendError as e:
            logger.error(f"Failed to edit event {preset.external_identifier}: {e}")
            return CoordinatorResult.failure(UnexpectedError(e))

        logger.info(f"Edited event with identifier: {preset.external_identifier}")
        return CoordinatorResult.success()

    async def needs_update(self, preset: Preset) -> CoordinatorResult[bool]:
        """Check whether the calendar event was changed outside the preset.

        Only title and start date are compared.
        """
        lookup = await self._lookup(preset)
        if not lookup.ok:
            return CoordinatorResult.failure(lookup.error)

        diverged = self._diverged(preset, lookup.value)
        if diverged:
            logger.info(f"Preset '{preset.title}' needs update")
        else:
            logger.debug(f"Preset '{preset.title}' is up to date")
        return CoordinatorResult.success(diverged)

    async def apply_backend_changes(self, preset: Preset) -> CoordinatorResult[bool]:
        """Copy title and date from the calendar event onto preset if they differ.

        Returns:
            Result holding True if the preset was changed.
        """
        lookup = await self._lookup(preset)
        if not lookup.ok:
            return CoordinatorResult.failure(lookup.error)
        event = lookup.value

        if not self._diverged(preset, event):
            return CoordinatorResult.success(False)

        if not event.title or event.start_date is None:
            logger.warning(
                f"Event {preset.external_identifier} has no title or start, "
                f"keeping preset '{preset.title}'"
            )
            return CoordinatorResult.failure(
                InvalidEventError(
                    f"Event {preset.external_identifier} has no title or start date"
                )
            )

        logger.info(
            f"Updating preset '{preset.title}' from event {preset.external_identifier}"
        )
        preset.title = event.title
        preset.date = event.start_date
        return CoordinatorResult.success(True)

    def reset_store(self) -> None:
        """Reset the store; previously fetched events become invalid."""
        self.store.reset()

    # Private methods

    @staticmethod
    def _diverged(preset: Preset, event: EventT) -> bool:
        return preset.title != event.title or preset.date != event.start_date

    async def _lookup(self, preset: Preset) -> CoordinatorResult[EventT]:
        """Authorize, then find the event stored for preset."""
        error = await self._confirm_authorization()
        if error:
            return CoordinatorResult.failure(error)

        identifier = preset.external_identifier
        if identifier is None:
            logger.warning(f"Preset '{preset.title}' has no event identifier")
            return CoordinatorResult.failure(
                MissingIdentifierError(f"Preset '{preset.title}' has no event identifier")
            )

        event = self.store.fetch(identifier)
        if event is None:
            logger.warning(f"No event found with identifier: {identifier}")
            return CoordinatorResult.failure(EventNotFoundError(identifier))
        return CoordinatorResult.success(event)

    async def _determine_authorization(self) -> AuthorizationStatus:
        """Current status, requesting access while it is undetermined."""
        status = self._status()
        requests = 0
        while status == AuthorizationStatus.NOT_DETERMINED and requests < self.max_access_requests:
            await self.store.request_access(self.entity_type)
            requests += 1
            status = self._status()
        return status

    def _status(self) -> AuthorizationStatus:
        status = self.store.authorization_status(self.entity_type)
        try:
            return AuthorizationStatus(status)
        except ValueError:
            raise UnknownAuthorizationStatusError(
                f"Unknown authorization status: {status!r}"
            ) from None

    async def _confirm_authorization(self) -> Optional[CoordinatorError]:
        """None if access is authorized, otherwise the error to report."""
        status = await self._determine_authorization()

        if status == AuthorizationStatus.AUTHORIZED:
            return None
        if status == AuthorizationStatus.DENIED:
            logger.warning(f"Access to {self.entity_type.value} data was denied")
            return AuthorizationDeniedError(
                f"Access to {self.entity_type.value} data was denied"
            )
        if status == AuthorizationStatus.RESTRICTED:
            logger.warning(f"Access to {self.entity_type.value} data is restricted")
            return AuthorizationRestrictedError(
                f"Access to {self.entity_type.value} data is restricted"
            )
        logger.warning(
            f"Access to {self.entity_type.value} data still undetermined "
            f"after {self.max_access_requests} request(s)"
        )
        return AuthorizationDeniedError(
            f"Access to {self.entity_type.value} data was not granted"
        )
