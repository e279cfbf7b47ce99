"""Validation and creation of composite event store identifiers.

An identifier is two UUID-shaped strings joined by a colon, e.g.
``6A0F1C52-3B8E-4F4B-9E4B-1B1C2D3E4F50:0C5E7A90-1D2B-4C3D-8E9F-A0B1C2D3E4F5``.
The first half names the calendar, the second the event. Validation only
checks the shape (group counts and lengths), it does not parse UUIDs.
"""

import uuid

from event_presets.constants import GROUP_LENGTHS, GROUP_SEPARATOR, IDENTIFIER_SEPARATOR
from event_presets.exceptions import MalformedIdentifierError


def validate_identifier(candidate: str) -> None:
    """Check that candidate has the composite identifier shape.

    Raises:
        MalformedIdentifierError: If candidate does not match.
    """
    if not isinstance(candidate, str):
        raise MalformedIdentifierError(str(candidate))

    halves = candidate.split(IDENTIFIER_SEPARATOR)
    if len(halves) != 2:
        raise MalformedIdentifierError(candidate)

    if not all(is_uuid_shaped(half) for half in halves):
        raise MalformedIdentifierError(candidate)


def is_uuid_shaped(candidate: str) -> bool:
    """Return True if candidate has five dash-separated groups of UUID lengths."""
    groups = candidate.split(GROUP_SEPARATOR)
    if len(groups) != len(GROUP_LENGTHS):
        return False
    return all(len(group) == expected for group, expected in zip(groups, GROUP_LENGTHS))


def is_valid_identifier(candidate: str) -> bool:
    """Return True if candidate has the composite identifier shape."""
    try:
        validate_identifier(candidate)
    except MalformedIdentifierError:
        return False
    return True


def new_uuid_string() -> str:
    """Upper-case UUID string, as used by platform calendars."""
    return str(uuid.uuid4()).upper()


def new_identifier(calendar_identifier: str | None = None) -> str:
    """Build a fresh composite identifier for an event.

    Args:
        calendar_identifier: UUID string of the owning calendar. A random
            one is used if not given.
    """
    calendar_part = calendar_identifier or new_uuid_string()
    return f"{calendar_part}{IDENTIFIER_SEPARATOR}{new_uuid_string()}"
