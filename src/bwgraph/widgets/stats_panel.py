"""Bottom panel with RX/TX statistics."""

from __future__ import annotations

from textual.widgets import Static

from bwgraph.models import DirectionStats
from bwgraph.stats import render_stats


class StatsPanel(Static):
    """Current, average, max and total for both directions."""

    DEFAULT_CSS = """
    StatsPanel {
        height: 1fr;
        width: 100%;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.lines: list[str] = []

    def on_mount(self) -> None:
        self.update_stats(DirectionStats(), DirectionStats(), cols=self.app.size.width)

    def update_stats(
        self,
        rx: DirectionStats,
        tx: DirectionStats,
        si_units: bool = False,
        cols: int = 80,
    ) -> None:
        self.lines = render_stats(rx, tx, si_units=si_units, cols=cols)
        self.update("\n".join(self.lines))
