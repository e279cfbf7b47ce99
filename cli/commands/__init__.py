"""CLI commands package."""

from cli.commands.add import add
from cli.commands.delete import delete
from cli.commands.edit import edit
from cli.commands.ls import ls
from cli.commands.samples import samples
from cli.commands.status import status
from cli.commands.sync import sync

__all__ = [
    "add",
    "delete",
    "edit",
    "ls",
    "samples",
    "status",
    "sync",
]
