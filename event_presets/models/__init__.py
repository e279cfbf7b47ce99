"""Pydantic models for event presets."""

from event_presets.models.authorization import (
    AuthorizationState,
    AuthorizationStatus,
    EntityType,
    process_authorization_state,
)
from event_presets.models.calendar import CalendarRef
from event_presets.models.preset import Preset

__all__ = [
    "AuthorizationState",
    "AuthorizationStatus",
    "CalendarRef",
    "EntityType",
    "Preset",
    "process_authorization_state",
]
