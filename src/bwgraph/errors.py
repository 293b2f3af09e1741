"""Exceptions raised by bwgraph collectors."""

from __future__ import annotations


class BwgraphError(Exception):
    """Base class for fatal bwgraph errors."""


class CounterUnavailable(BwgraphError):
    """Byte counters for an interface could not be read."""

    def __init__(self, interface: str, reason: str = "") -> None:
        self.interface = interface
        self.reason = reason
        msg = f"can't read rx and tx bytes for {interface}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class NoInterfaceFound(BwgraphError):
    """No interface is up, running and non-loopback."""

    def __init__(self) -> None:
        super().__init__("can't detect network interface")
