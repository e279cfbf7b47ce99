"""Shared constants for event presets."""

from datetime import timedelta

# Length of every event created from a preset
EVENT_DURATION = timedelta(hours=2)

# Composite identifier shape: "<uuid>:<uuid>"
IDENTIFIER_SEPARATOR = ":"
GROUP_SEPARATOR = "-"
GROUP_LENGTHS = (8, 4, 4, 4, 12)

# Appended to presets whose calendar event disappeared
DELETED_SUFFIX = " - deleted!"

# Default file names
PRESETS_FILENAME = "presets.json"
CALENDAR_FILENAME = "calendar.ics"
AUTHORIZATION_FILENAME = "authorization.json"

DEFAULT_CALENDAR_NAME = "Presets"
