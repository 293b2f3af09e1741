"""Main dashboard screen: RX/TX graphs and statistics on a sampling timer."""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Protocol

from textual import events
from textual.app import ComposeResult
from textual.geometry import Size
from textual.screen import Screen

from bwgraph.config import AppConfig
from bwgraph.errors import CounterUnavailable
from bwgraph.graph import scale_max
from bwgraph.history import MIN_WIDTH
from bwgraph.sampler import Sampler
from bwgraph.widgets.graph_panel import GraphPanel
from bwgraph.widgets.header_bar import HeaderBar
from bwgraph.widgets.stats_panel import StatsPanel

logger = logging.getLogger(__name__)

# Header line plus the four stats lines
RESERVED_LINES = 5


class CounterSource(Protocol):
    interface: str

    def read(self) -> tuple[int, int]: ...


def graph_height(rows: int, fixed_lines: int = 0) -> int:
    """Rows per graph: the fixed height if set, else half the spare lines."""
    if fixed_lines > 0:
        return fixed_lines
    return max(1, (rows - RESERVED_LINES) // 2)


class DashboardScreen(Screen):
    """Samples the counter source each interval and redraws both graphs."""

    def __init__(self, config: AppConfig, counters: CounterSource) -> None:
        super().__init__()
        self.config = config
        self.counters = counters
        self.sampler = Sampler(MIN_WIDTH)
        self.graph_lines = graph_height(0, config.graph_lines)
        self.clock = time.monotonic
        self._last_read: float | None = None
        # Written by the resize handler, consumed by the next redraw
        self._pending_size: Size | None = None
        self._started = False

    def compose(self) -> ComposeResult:
        rx_color = self.config.rx_color if self.config.colors else None
        tx_color = self.config.tx_color if self.config.colors else None
        yield HeaderBar(self.counters.interface, self.config.delay)
        yield GraphPanel(color=rx_color, id="rx-graph")
        yield GraphPanel(color=tx_color, id="tx-graph")
        yield StatsPanel()

    def on_mount(self) -> None:
        self._pending_size = self.app.size
        self._started = True
        if not self._sample():
            return
        self.set_interval(self.config.delay, self._tick)
        self.redraw()

    @property
    def _header(self) -> HeaderBar:
        return self.query_one(HeaderBar)

    @property
    def _rx_graph(self) -> GraphPanel:
        return self.query_one("#rx-graph", GraphPanel)

    @property
    def _tx_graph(self) -> GraphPanel:
        return self.query_one("#tx-graph", GraphPanel)

    @property
    def _stats(self) -> StatsPanel:
        return self.query_one(StatsPanel)

    # --- Sampling ---

    def _tick(self) -> None:
        if self._sample():
            self.redraw()

    def _sample(self) -> bool:
        """Read counters and advance the sampler. Returns False on fatal error."""
        try:
            rx, tx = self.counters.read()
        except CounterUnavailable as e:
            logger.debug("Counter read failed: %s", e)
            self.app.fail(str(e))
            return False

        now = self.clock()
        elapsed = now - self._last_read if self._last_read is not None else self.config.delay
        self._last_read = now
        if self.sampler.tick(rx, tx, max(elapsed, 1e-6)) is not None:
            self._header.mark_ready()
        return True

    # --- Resize ---

    def on_resize(self, event: events.Resize) -> None:
        self._pending_size = event.size
        if self._started:
            self.redraw()

    def _apply_pending_resize(self) -> None:
        size, self._pending_size = self._pending_size, None
        if size is None:
            return
        width = max(MIN_WIDTH, size.width)
        self.sampler.resize(width)
        self.graph_lines = graph_height(size.height, self.config.graph_lines)
        self._rx_graph.styles.height = self.graph_lines
        self._tx_graph.styles.height = self.graph_lines
        logger.debug("Resized to %dx%d (graph lines %d)", width, size.height, self.graph_lines)

    # --- Drawing ---

    def redraw(self) -> None:
        self._apply_pending_resize()
        rx_hist = self.sampler.rx_history
        tx_hist = self.sampler.tx_history
        rx_max, tx_max = scale_max(rx_hist, tx_hist, synchronized=self.config.sync_scale)

        for panel, history, top in (
            (self._rx_graph, rx_hist, rx_max),
            (self._tx_graph, tx_hist, tx_max),
        ):
            panel.draw(
                history,
                top,
                self.graph_lines,
                si_units=self.config.si_units,
                hide_scale=self.config.hide_scale,
            )

        rx_stats, tx_stats = self.sampler.snapshot()
        if self.config.sync_scale:
            # Shared scale also shows as the max: row of both columns
            rx_stats = replace(rx_stats, maximum=rx_max)
            tx_stats = replace(tx_stats, maximum=tx_max)
        self._stats.update_stats(
            rx_stats, tx_stats, si_units=self.config.si_units, cols=rx_hist.width
        )

    # --- Actions ---

    def action_toggle_sync(self) -> None:
        self.config.sync_scale = not self.config.sync_scale
        self.redraw()

    def action_toggle_units(self) -> None:
        self.config.si_units = not self.config.si_units
        self.redraw()

    def action_toggle_scale(self) -> None:
        self.config.hide_scale = not self.config.hide_scale
        self.redraw()
