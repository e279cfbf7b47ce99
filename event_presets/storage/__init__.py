"""Storage layer for preset archives."""

from event_presets.storage.preset_repository import PresetRepository

__all__ = [
    "PresetRepository",
]
