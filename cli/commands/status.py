"""Show or request calendar access."""

import asyncio
import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import TableRenderer
from event_presets.models.authorization import EntityType

logger = logging.getLogger(__name__)


def status(
    request: Annotated[
        bool,
        typer.Option("--request", "-r", help="Ask for access if not decided yet"),
    ] = False,
) -> None:
    """Show whether calendar access was granted."""
    ctx = get_context()
    store = ctx.store

    if request:
        asyncio.run(store.request_access(EntityType.EVENT))

    statuses = {
        entity_type.value: store.authorization_status(entity_type)
        for entity_type in EntityType
    }
    TableRenderer().render_authorization(statuses, ctx.config.calendar_file)
