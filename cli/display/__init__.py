"""Display module for rendering CLI output.

It provides:
- console: Shared Rich console instance
- TableRenderer: Preset lists, sync reports and access status
- Formatting functions for dates and identifiers
"""

from cli.display.console import console
from cli.display.formatters import (
    format_datetime,
    format_identifier,
    format_relative_time,
)
from cli.display.table_renderer import TableRenderer

__all__ = [
    # Console
    "console",
    # Renderers
    "TableRenderer",
    # Formatters
    "format_datetime",
    "format_identifier",
    "format_relative_time",
]
