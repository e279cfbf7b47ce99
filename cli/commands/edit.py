"""Edit a preset and its calendar event."""

import asyncio
import logging

import typer
from rich.markup import escape
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console, format_datetime
from cli.utils import parse_datetime, to_index, unwrap_or_exit
from event_presets.exceptions import EmptyTitleError

logger = logging.getLogger(__name__)


def edit(
    position: Annotated[
        int,
        typer.Argument(help="Preset number as shown by 'ls'"),
    ],
    title: Annotated[
        str | None,
        typer.Option("--title", "-t", help="New title"),
    ] = None,
    when: Annotated[
        str | None,
        typer.Option("--date", "-d", help="New start (YYYY-MM-DD HH:MM)"),
    ] = None,
) -> None:
    """Change a preset and update its calendar event."""
    if title is None and when is None:
        logger.error("Nothing to change. Pass --title and/or --date.")
        raise typer.Exit(1)

    ctx = get_context()
    manager = ctx.manager
    index = to_index(position, len(manager.presets))
    date = parse_datetime(when) if when is not None else None

    try:
        result = asyncio.run(manager.edit(index, title=title, date=date))
    except EmptyTitleError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    preset = unwrap_or_exit(result)
    console.print(f"\n[bold green]✓[/bold green] Preset '{escape(preset.title)}' updated")
    console.print(f"  Date: {format_datetime(preset.date)}")
