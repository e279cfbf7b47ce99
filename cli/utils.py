"""CLI utilities for argument parsing and result handling."""

import logging
from datetime import datetime
from typing import TypeVar

import typer

from cli.display.console import error_console
from event_presets.coordinator import CoordinatorResult
from event_presets.exceptions import (
    AuthorizationDeniedError,
    AuthorizationRestrictedError,
    EventNotFoundError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DATETIME_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M", "%Y-%m-%d")

_HINTS = {
    AuthorizationDeniedError: "Calendar access was denied. Remove the authorization file to be asked again.",
    AuthorizationRestrictedError: "Calendar access is restricted on this system.",
    EventNotFoundError: "The calendar event was deleted outside this tool. Run 'sync' to mark it.",
}


def parse_datetime(value: str) -> datetime:
    """Parse 'YYYY-MM-DD HH:MM', 'YYYY-MM-DDTHH:MM' or 'YYYY-MM-DD'.

    Raises:
        typer.BadParameter: If the format is invalid.
    """
    for fmt in _DATETIME_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise typer.BadParameter(f"Invalid date: {value}. Use YYYY-MM-DD HH:MM.")


def to_index(position: int, count: int) -> int:
    """Convert a 1-based position shown by 'ls' to a list index."""
    if not 1 <= position <= count:
        logger.error(f"No preset at position {position} (have {count})")
        raise typer.Exit(1)
    return position - 1


def unwrap_or_exit(result: CoordinatorResult[T]) -> T:
    """Return the result value, or report the error and exit with code 1."""
    if result.ok:
        return result.value
    logger.error(str(result.error))
    hint = _HINTS.get(type(result.error))
    if hint:
        error_console.print(f"[dim]{hint}[/dim]")
    raise typer.Exit(1)
