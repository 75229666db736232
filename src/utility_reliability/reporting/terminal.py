"""Rich terminal renderer for building scores and ranked listings."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from utility_reliability.data.models import (
    BuildingListing,
    BuildingScore,
    Status,
    UtilityScore,
    UtilityType,
)
from utility_reliability.reporting.ascii_charts import mini_gauge, score_gauge
from utility_reliability.scoring.thresholds import score_to_rating, status_to_variant

_VARIANT_STYLES = {
    "stable": "green",
    "caution": "yellow",
    "critical": "red",
    "neutral": "dim",
}


class TerminalRenderer:
    """Renders scoring results to the terminal using Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_building(self, result: BuildingScore, title: str = "Building") -> None:
        """Render the composite score and per-utility breakdown."""
        header = Text()
        header.append("RELIABILITY", style="bold cyan")
        header.append(" | ", style="dim")
        header.append(title, style="bold")

        self.console.print()
        self.console.print(Panel(header, title="Utility Reliability Score"))
        self.console.print()
        self.console.print(f"  [bold]COMPOSITE SCORE[/bold]: {score_gauge(result.composite, width=30)}")

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Utility", style="bold", min_width=10)
        table.add_column("Score", justify="center", min_width=15)
        table.add_column("Latest Status", justify="center", min_width=12)
        table.add_column("Last Report", justify="right", min_width=16)

        for utility in UtilityType:
            table.add_row(utility.value, *self._utility_cells(result.utilities[utility]))

        self.console.print()
        self.console.print(table)
        if not result.has_data:
            self.console.print("\n  [dim]No reports recent enough to score.[/dim]")

    def render_ranking(self, listings: list[BuildingListing], start: int = 1) -> None:
        """Render ranked buildings, best first, numbering from *start*."""
        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("#", justify="right", style="bold", width=3)
        table.add_column("Building", min_width=20)
        table.add_column("Neighbourhood", min_width=12)
        table.add_column("Score", justify="center", min_width=15)
        table.add_column("Rating", justify="center", width=9)
        for utility in UtilityType:
            table.add_column(utility.value.title(), justify="center", width=10)
        table.add_column("Reports", justify="right", width=7)

        for rank, listing in enumerate(listings, start=start):
            rating = score_to_rating(listing.score)
            statuses = [
                self._status_cell(listing.utility_scores.get(u, UtilityScore()))
                for u in UtilityType
            ]
            name = listing.name + (" [red]![/red]" if listing.suspicious else "")
            table.add_row(
                str(rank),
                name,
                listing.neighbourhood,
                mini_gauge(listing.score),
                f"[{rating.style}]{rating.value}[/{rating.style}]",
                *statuses,
                str(listing.report_count),
            )

        self.console.print()
        self.console.print(table)

    # ------------------------------------------------------------------
    # Private rendering methods
    # ------------------------------------------------------------------

    def _utility_cells(self, utility: UtilityScore) -> tuple[str, str, str]:
        return (
            mini_gauge(utility.score),
            self._status_cell(utility),
            _format_time(utility.last_report_at),
        )

    @staticmethod
    def _status_cell(utility: UtilityScore) -> str:
        style = _VARIANT_STYLES[status_to_variant(utility.status)]
        label = utility.status.value if isinstance(utility.status, Status) else utility.status
        return f"[{style}]{label or 'No data'}[/{style}]"


def _format_time(value: Optional[datetime]) -> str:
    if value is None:
        return "[dim]--[/dim]"
    return value.strftime("%Y-%m-%d %H:%M")
