"""CLI application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import add, delete, edit, ls, samples, status, sync
from cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="event-presets",
    help="Manage event creation presets and their calendar events.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up logging and the shared context for every command."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)


app.command("ls")(ls)
app.command("add")(add)
app.command("edit")(edit)
app.command("rm")(delete)
app.command("sync")(sync)
app.command("status")(status)
app.command("samples")(samples)
