"""Delete a preset and its calendar event."""

import asyncio
import logging

import typer
from rich.markup import escape
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from cli.utils import to_index, unwrap_or_exit

logger = logging.getLogger(__name__)


def delete(
    position: Annotated[
        int,
        typer.Argument(help="Preset number as shown by 'ls'"),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Delete a preset after removing its calendar event."""
    ctx = get_context()
    manager = ctx.manager
    index = to_index(position, len(manager.presets))
    preset = manager.get(index)

    if not force:
        console.print(f"\nDelete preset '{escape(preset.title)}'")
        console.print("  Its calendar event will be removed as well.")
        console.print()
        if not typer.confirm("Continue?"):
            typer.echo("Delete cancelled.")
            return

    removed = unwrap_or_exit(asyncio.run(manager.delete(index)))
    console.print(f"\n[bold green]✓[/bold green] Preset '{escape(removed.title)}' deleted")
