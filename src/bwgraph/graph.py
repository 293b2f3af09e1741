"""Maps rate histories onto a fixed-height character grid."""

from __future__ import annotations

from collections.abc import Sequence

from bwgraph.history import RateHistory
from bwgraph.utils import format_rate

FILL_CHAR = "*"


def render_graph(samples: Sequence[int], scale_max: int, rows: int) -> list[list[bool]]:
    """Build a ``rows`` x ``len(samples)`` grid of filled cells.

    Row 0 is the top. A column is filled from the bottom up in proportion
    to ``sample / scale_max``. Nothing is filled while ``scale_max`` is 0.
    """
    if scale_max <= 0:
        return [[False] * len(samples) for _ in range(rows)]
    heights = [rows - 1 - sample / scale_max * rows for sample in samples]
    return [[h < y for h in heights] for y in range(rows)]


def grid_to_lines(grid: list[list[bool]], fill: str = FILL_CHAR, empty: str = " ") -> list[str]:
    return ["".join(fill if cell else empty for cell in row) for row in grid]


def scale_labels(scale_max: int, si_units: bool = False) -> tuple[str, str]:
    """Top and bottom legend text for a graph."""
    return format_rate(scale_max, si_units), format_rate(0, si_units)


def scale_max(rx: RateHistory, tx: RateHistory, synchronized: bool = False) -> tuple[int, int]:
    """Return the (RX, TX) graph scale for this frame.

    When ``synchronized`` both graphs share the larger of the two maxima.
    """
    rx_max, tx_max = rx.max(), tx.max()
    if synchronized:
        rx_max = tx_max = max(rx_max, tx_max)
    return rx_max, tx_max
