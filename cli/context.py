"""Shared CLI context with lazy-initialized dependencies."""

import typer

from event_presets.backends.ics_store import IcsEventStore
from event_presets.config import PresetConfig
from event_presets.coordinator import EventCoordinator
from event_presets.manager import PresetManager
from event_presets.models.authorization import EntityType
from event_presets.storage.preset_repository import PresetRepository


def confirm_access(entity_type: EntityType) -> bool:
    """Ask on the terminal whether calendar access may be used."""
    return typer.confirm(
        f"Allow event-presets to access your {entity_type.value} calendar data?",
        default=False,
    )


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        ctx.manager.load()
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: PresetConfig | None = None
        self._store: IcsEventStore | None = None
        self._coordinator: EventCoordinator | None = None
        self._repository: PresetRepository | None = None
        self._manager: PresetManager | None = None

    @property
    def config(self) -> PresetConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = PresetConfig.from_env()
        return self._config

    @property
    def store(self) -> IcsEventStore:
        """Get the calendar event store (lazy-loaded)."""
        if self._store is None:
            if self.config.assume_access_granted:
                prompt = lambda entity_type: True  # noqa: E731
            else:
                prompt = confirm_access
            self._store = IcsEventStore(
                self.config.calendar_file,
                calendar_name=self.config.calendar_name,
                authorization_file=self.config.authorization_file,
                prompt=prompt,
            )
        return self._store

    @property
    def coordinator(self) -> EventCoordinator:
        """Get the event coordinator (lazy-loaded)."""
        if self._coordinator is None:
            self._coordinator = EventCoordinator(self.store)
        return self._coordinator

    @property
    def repository(self) -> PresetRepository:
        """Get the preset repository (lazy-loaded)."""
        if self._repository is None:
            self._repository = PresetRepository(self.config.presets_file)
        return self._repository

    @property
    def manager(self) -> PresetManager:
        """Get the preset manager with presets loaded (lazy-loaded)."""
        if self._manager is None:
            self._manager = PresetManager(self.coordinator, self.repository)
            self._manager.load()
        return self._manager


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
