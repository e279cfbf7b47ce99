"""Shared Rich consoles for terminal output."""

from rich.console import Console

# Regular output of all commands
console = Console()

# Confirmation and failure messages that must not mix with piped output
error_console = Console(stderr=True)
