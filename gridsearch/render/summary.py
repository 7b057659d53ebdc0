"""Rich tables for search results."""

from __future__ import annotations

from typing import Iterable

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridsearch.search.contracts import SearchSummary
from gridsearch.search.strategies import parse_strategy

STATE_STYLES = {
    "solved": "green",
    "failed": "red",
    "running": "yellow",
}


def render_summaries(
    summaries: Iterable[SearchSummary], *, title: str = "Search Results"
) -> RenderableType:
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Strategy")
    table.add_column("State")
    table.add_column("Steps", justify="right")
    table.add_column("Visited", justify="right")
    table.add_column("Path length", justify="right")

    rows = list(summaries)
    for summary in rows:
        state = summary.state.value
        table.add_row(
            parse_strategy(summary.strategy).label,
            Text(state, style=STATE_STYLES.get(state, "")),
            str(summary.steps),
            str(summary.visited),
            str(summary.path_length) if summary.path else "-",
        )
    if not rows:
        table.add_row("-", "None", "-", "-", "-")
    return table


def render_path(summary: SearchSummary, *, max_cells: int = 40) -> RenderableType:
    if not summary.path:
        return Panel(Text("No path."), title="Path")
    cells = [f"({cell.row},{cell.col})" for cell in summary.path]
    if len(cells) > max_cells:
        hidden = len(cells) - max_cells
        half = max_cells // 2
        cells = cells[:half] + [f"... {hidden} more ..."] + cells[-half:]
    return Panel(Text(" -> ".join(cells)), title="Path")
