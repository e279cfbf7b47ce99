"""Add a preset and create its calendar event."""

import asyncio
import logging

import typer
from rich.markup import escape
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console, format_datetime
from cli.utils import parse_datetime, unwrap_or_exit
from event_presets.exceptions import EmptyTitleError

logger = logging.getLogger(__name__)


def add(
    title: Annotated[
        str,
        typer.Argument(help="Event title"),
    ],
    when: Annotated[
        str,
        typer.Argument(help="Start of the event (YYYY-MM-DD HH:MM)"),
    ],
) -> None:
    """Add a preset and create a two-hour calendar event for it.

    Example:
        event-presets add "Team lunch" "2026-11-02 12:30"
    """
    ctx = get_context()
    date = parse_datetime(when)

    try:
        result = asyncio.run(ctx.manager.add(title, date))
    except EmptyTitleError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    preset = unwrap_or_exit(result)
    console.print(f"\n[bold green]✓[/bold green] Preset '{escape(preset.title)}' added")
    console.print(f"  Date: {format_datetime(preset.date)}")
    console.print(f"  Event: {preset.external_identifier}")
