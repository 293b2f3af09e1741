"""Two-column RX/TX statistics panel."""

from __future__ import annotations

from bwgraph.models import DirectionStats
from bwgraph.utils import format_bytes, format_rate

LABEL_WIDTH = 6


def render_stats(
    rx: DirectionStats,
    tx: DirectionStats,
    si_units: bool = False,
    cols: int = 80,
) -> list[str]:
    """Lay out current/avg/max/total for RX (left) and TX (right).

    Returns four lines. Totals are cumulative byte counts and carry no
    ``/s`` suffix.
    """
    rx_col = max(0, cols // 4 - 8)
    tx_col = rx_col + cols // 2 + 1

    rows = [
        ("RX:", format_rate(rx.current, si_units), "TX:", format_rate(tx.current, si_units)),
        ("avg:", format_rate(rx.average, si_units), "avg:", format_rate(tx.average, si_units)),
        ("max:", format_rate(rx.maximum, si_units), "max:", format_rate(tx.maximum, si_units)),
        ("total:", format_bytes(rx.total, si_units), "total:", format_bytes(tx.total, si_units)),
    ]

    lines = []
    for rx_label, rx_value, tx_label, tx_value in rows:
        left = f"{rx_label:>{LABEL_WIDTH}} {rx_value}"
        right = f"{tx_label:>{LABEL_WIDTH}} {tx_value}"
        line = " " * rx_col + left
        line = line.ljust(tx_col - 1) + " " + right
        lines.append(line.rstrip())
    return lines
