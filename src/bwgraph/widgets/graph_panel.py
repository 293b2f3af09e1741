"""Scrolling bar graph widget for one traffic direction."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from bwgraph.graph import grid_to_lines, render_graph, scale_labels
from bwgraph.history import RateHistory

AXIS_CHAR = "-"


class GraphPanel(Static):
    """Draws a RateHistory as columns of '*' growing from the bottom."""

    DEFAULT_CSS = """
    GraphPanel {
        width: 100%;
    }
    """

    def __init__(self, color: str | None = None, id: str | None = None) -> None:
        super().__init__(id=id)
        self.color = color
        self.lines: list[str] = []
        self.graph_text = Text()

    def draw(
        self,
        history: RateHistory,
        scale_max: int,
        rows: int,
        si_units: bool = False,
        hide_scale: bool = False,
    ) -> None:
        grid = render_graph(history.samples, scale_max, rows)
        self.lines = grid_to_lines(grid)

        overlay: dict[int, str] = {}
        if not hide_scale and rows > 0:
            top, bottom = scale_labels(scale_max, si_units)
            overlay[rows - 1] = bottom
            overlay[0] = top

        text = Text(no_wrap=True, overflow="crop")
        for y, line in enumerate(self.lines):
            label = overlay.get(y, "")
            if not label and not hide_scale and line.startswith(" "):
                # Left edge axis, hidden under filled cells
                label = AXIS_CHAR
            if label:
                text.append(label)
            text.append(line[len(label):], style=self.color or "")
            if y < rows - 1:
                text.append("\n")
        self.graph_text = text
        self.update(text)
