"""bwgraph Textual application."""

from __future__ import annotations

import logging

from textual.app import App

from bwgraph.collectors.counters import InterfaceCounters
from bwgraph.config import AppConfig
from bwgraph.screens.dashboard import CounterSource, DashboardScreen

logger = logging.getLogger(__name__)


class BwgraphApp(App):
    """Main bwgraph TUI application."""

    TITLE = "bwgraph"

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("m", "toggle_sync", "Sync scale"),
        ("u", "toggle_units", "Units"),
        ("h", "toggle_scale", "Scale"),
        ("question_mark", "help", "Help"),
    ]

    def __init__(self, config: AppConfig, counters: CounterSource | None = None) -> None:
        super().__init__()
        self.config = config
        self.counters = counters or InterfaceCounters(config.interface)
        self.error_message: str | None = None

    def on_mount(self) -> None:
        self.push_screen(DashboardScreen(config=self.config, counters=self.counters))

    def fail(self, message: str) -> None:
        """Stop the app because sampling can't continue."""
        logger.info("Stopping: %s", message)
        self.error_message = message
        self.exit(return_code=1)

    def _delegate(self, action: str) -> None:
        """Delegate an action to the current screen if it supports it."""
        screen = self.screen
        method = getattr(screen, action, None)
        if method:
            method()

    def action_toggle_sync(self) -> None:
        self._delegate("action_toggle_sync")

    def action_toggle_units(self) -> None:
        self._delegate("action_toggle_units")

    def action_toggle_scale(self) -> None:
        self._delegate("action_toggle_scale")

    def action_help(self) -> None:
        from bwgraph.screens.help_screen import HelpScreen

        self.push_screen(HelpScreen())
