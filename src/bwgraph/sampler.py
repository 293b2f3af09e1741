"""Turns cumulative RX/TX byte counters into rate histories."""

from __future__ import annotations

import logging

from bwgraph.history import RateHistory
from bwgraph.models import DirectionStats, TickResult

logger = logging.getLogger(__name__)


class Sampler:
    """Differences successive counter readings and feeds two histories.

    The first reading only establishes a baseline. Each later reading pushes
    ``(raw - previous) / elapsed`` into the RX and TX histories.
    """

    def __init__(self, width: int) -> None:
        self.rx_history = RateHistory(width)
        self.tx_history = RateHistory(width)
        self._prev_rx: int | None = None
        self._prev_tx: int | None = None
        self.rx_total = 0
        self.tx_total = 0

    @property
    def has_baseline(self) -> bool:
        return self._prev_rx is not None and self._prev_tx is not None

    def tick(self, raw_rx: int, raw_tx: int, elapsed: float) -> TickResult | None:
        """Record a counter reading taken ``elapsed`` seconds after the last.

        Returns None for the baseline reading, which pushes no sample.
        Counter resets are not special-cased and yield a negative rate.
        """
        if not self.has_baseline:
            self.rebase(raw_rx, raw_tx)
            return None
        if elapsed <= 0:
            raise ValueError(f"elapsed must be positive, got {elapsed}")

        rx_rate = int((raw_rx - self._prev_rx) / elapsed)
        tx_rate = int((raw_tx - self._prev_tx) / elapsed)
        if rx_rate < 0 or tx_rate < 0:
            logger.debug("Counter went backwards (rx=%d tx=%d)", rx_rate, tx_rate)

        self.rx_history.push(rx_rate)
        self.tx_history.push(tx_rate)
        self._prev_rx, self._prev_tx = raw_rx, raw_tx
        self.rx_total, self.tx_total = raw_rx, raw_tx
        return TickResult(rx_rate=rx_rate, tx_rate=tx_rate)

    def rebase(self, raw_rx: int, raw_tx: int) -> None:
        """Take a new baseline without pushing a sample."""
        self._prev_rx, self._prev_tx = raw_rx, raw_tx
        self.rx_total, self.tx_total = raw_rx, raw_tx

    def resize(self, width: int) -> None:
        self.rx_history.resize(width)
        self.tx_history.resize(width)

    def snapshot(self) -> tuple[DirectionStats, DirectionStats]:
        """Current/average/max/total for RX and TX."""
        return (
            _stats(self.rx_history, self.rx_total),
            _stats(self.tx_history, self.tx_total),
        )


def _stats(history: RateHistory, total: int) -> DirectionStats:
    return DirectionStats(
        current=history.current,
        average=history.average(),
        maximum=history.max(),
        total=total,
    )
