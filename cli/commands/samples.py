"""Create sample presets."""

import asyncio
import logging

import typer
from rich.markup import escape

from cli.context import get_context
from cli.display import console
from event_presets.manager import SAMPLE_PRESETS

logger = logging.getLogger(__name__)


def samples() -> None:
    """Add three sample presets and their calendar events."""
    ctx = get_context()
    added = asyncio.run(ctx.manager.load_samples())

    for preset in added:
        console.print(f"[bold green]✓[/bold green] {escape(preset.title)}")

    if len(added) < len(SAMPLE_PRESETS):
        logger.error(f"Only {len(added)} of {len(SAMPLE_PRESETS)} samples were created")
        raise typer.Exit(1)
