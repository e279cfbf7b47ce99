"""List presets."""

import logging

from cli.context import get_context
from cli.display import TableRenderer

logger = logging.getLogger(__name__)


def ls() -> None:
    """List all presets with their dates and calendar events.

    Presets whose calendar event was deleted elsewhere are shown in red.
    """
    ctx = get_context()
    presets = ctx.manager.presets
    TableRenderer().render_preset_list(presets, ctx.config.presets_file)
