"""Pull calendar changes into presets."""

import asyncio
import logging

import typer

from cli.context import get_context
from cli.display import TableRenderer

logger = logging.getLogger(__name__)


def sync() -> None:
    """Update presets from calendar events changed outside this tool.

    Presets whose event was deleted are tagged with " - deleted!".
    """
    ctx = get_context()
    report = asyncio.run(ctx.manager.reconcile())
    TableRenderer().render_reconcile_report(report)

    if report.failed:
        raise typer.Exit(1)
