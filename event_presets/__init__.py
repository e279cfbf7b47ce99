"""Event creation presets kept in sync with a calendar backend."""

__version__ = "0.1.0"
