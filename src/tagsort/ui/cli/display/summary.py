"""src/tagsort/ui/cli/display/summary.py
What: Render the end-of-run counters as a Rich table.
Why: Give verbose runs a one-glance account of what happened.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.table import Table

from tagsort.application.services import RunSummary


@final
class SummaryDisplay:
    """Handles summary display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_summary(self, summary: RunSummary, *, dry_run: bool) -> None:
        """Print outcome counters and the list of failed files.

        Args:
            summary: Counters collected by the sort service.
            dry_run: Whether the run only planned placements.
        """
        title = "Dry-run Summary" if dry_run else "Sort Summary"
        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("Outcome")
        table.add_column("Files", justify="right")

        rows = [
            ("Planned" if dry_run else "Placed", summary.planned if dry_run else summary.placed, "green"),
            ("Already in place", summary.unchanged, "cyan"),
            ("Skipped", summary.skipped, "yellow"),
            ("Unreadable", summary.unreadable, "red"),
            ("Failed", summary.failed, "red"),
        ]
        for label, count, style in rows:
            table.add_row(label, str(count), style=style if count else None)
        table.add_row("Total", str(summary.total), style="bold")

        self.console.print(table)
        self.console.print(f"Finished in {summary.duration_seconds:.2f}s")

        for failed in summary.failures:
            self.console.print(f"[red]  • {failed}[/red]")
