"""Exception hierarchy for preset and event store operations."""


class PresetError(Exception):
    """Base exception for preset operations."""

    pass


class EmptyTitleError(PresetError):
    """Preset creation refused because the title is empty."""

    pass


class MalformedIdentifierError(PresetError):
    """String does not have the shape of an event store identifier."""

    def __init__(self, candidate: str):
        self.candidate = candidate
        super().__init__(f"Not an event identifier: {candidate!r}")


class PresetArchiveError(PresetError):
    """Error while writing the preset archive."""

    pass


class CoordinatorError(PresetError):
    """Base exception for event coordinator operations."""

    pass


class AuthorizationDeniedError(CoordinatorError):
    """Access to the event store was denied."""

    pass


class AuthorizationRestrictedError(CoordinatorError):
    """Access to the event store is restricted."""

    pass


class MissingIdentifierError(CoordinatorError):
    """Preset has no event identifier to act on."""

    pass


class EventNotFoundError(CoordinatorError):
    """No event in the store matches the preset's identifier.

    Usually the event was deleted outside of this application.
    """

    def __init__(self, identifier: str | None):
        self.identifier = identifier
        super().__init__(f"No event found with identifier: {identifier}")


class InvalidEventError(CoordinatorError):
    """Event in the store cannot be copied onto a preset."""

    pass


class UnexpectedError(CoordinatorError):
    """Backend failure that the coordinator cannot classify."""

    def __init__(self, cause: BaseException | None = None):
        self.cause = cause
        message = f"Unexpected event store error: {cause}" if cause else "Unexpected event store error"
        super().__init__(message)


class BackendError(PresetError):
    """Base exception for event store backends."""

    pass


class ForeignEventError(BackendError):
    """Event belongs to a different event store."""

    pass


class StaleEventError(BackendError):
    """Event was obtained before the store was reset."""

    pass


class EventNotInStoreError(BackendError):
    """Event is not persisted in the store."""

    pass


class CalendarFileError(BackendError):
    """Calendar file could not be read or written."""

    pass


class UnknownAuthorizationStatusError(RuntimeError):
    """Backend reported an authorization status outside the known values."""

    pass
