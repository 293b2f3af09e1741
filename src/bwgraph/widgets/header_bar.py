"""Header bar widget showing the monitored interface."""

from __future__ import annotations

from textual.widgets import Static


class HeaderBar(Static):
    """Top bar: interface name, or a collecting notice before the first sample."""

    DEFAULT_CSS = """
    HeaderBar {
        dock: top;
        height: 1;
        text-align: center;
        text-style: bold;
    }
    """

    def __init__(self, interface: str, delay: float) -> None:
        super().__init__()
        self._interface = interface
        self._delay = delay
        self._collecting = True

    def on_mount(self) -> None:
        self._refresh_display()

    @property
    def collecting(self) -> bool:
        return self._collecting

    def mark_ready(self) -> None:
        if self._collecting:
            self._collecting = False
            self._refresh_display()

    def _refresh_display(self) -> None:
        if self._collecting:
            self.update(
                f"collecting data from {self._interface} for {self._delay:.2f} seconds"
            )
        else:
            self.update(f"interface: {self._interface}")
