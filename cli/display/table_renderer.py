"""Table renderer for preset lists and sync reports."""

from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from cli.display.console import console
from cli.display.formatters import format_datetime, format_identifier
from event_presets.manager import ReconcileReport
from event_presets.models.authorization import AuthorizationStatus
from event_presets.models.preset import Preset

_STATUS_STYLES = {
    AuthorizationStatus.AUTHORIZED: "green",
    AuthorizationStatus.DENIED: "red",
    AuthorizationStatus.RESTRICTED: "red",
    AuthorizationStatus.NOT_DETERMINED: "yellow",
}


class TableRenderer:
    """Render presets and reports as Rich tables."""

    def render_preset_list(self, presets: Sequence[Preset], presets_file: Path) -> None:
        """Render presets as a numbered table.

        Args:
            presets: Presets in archive order.
            presets_file: Archive the presets were loaded from.
        """
        if not presets:
            console.print("No presets found")
            return

        console.print(f"Listing presets at {presets_file.resolve()}:")
        console.print()

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("#", justify="right", style="dim")
        table.add_column("TITLE", style="cyan")
        table.add_column("DATE")
        table.add_column("EVENT", style="dim")

        for position, preset in enumerate(presets, start=1):
            title = escape(preset.title)
            if preset.is_orphaned:
                title = f"[red]{title}[/red]"
            table.add_row(
                str(position),
                title,
                format_datetime(preset.date),
                format_identifier(preset.external_identifier),
            )

        console.print(table)

    def render_reconcile_report(self, report: ReconcileReport) -> None:
        """Render the outcome of a sync."""
        if not (report.changed or report.failed):
            console.print("[dim]All presets are up to date[/dim]")
            return

        for preset in report.updated:
            console.print(f"[green]↻[/green] Updated '{escape(preset.title)}' from calendar")
        for preset in report.orphaned:
            console.print(f"[yellow]⚠[/yellow] Event of '{escape(preset.title)}' was deleted")
        for preset, error in report.failed:
            console.print(f"[red]✗[/red] '{escape(preset.title)}': {escape(str(error))}")

    def render_authorization(
        self, statuses: dict[str, AuthorizationStatus], calendar_file: Path
    ) -> None:
        """Render authorization status per entity type."""
        console.print(f"Calendar: {calendar_file.resolve()}")
        console.print()

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("DATA")
        table.add_column("ACCESS")
        for name, status in statuses.items():
            style = _STATUS_STYLES.get(status, "")
            table.add_row(name, f"[{style}]{status.value}[/{style}]")

        console.print(table)
