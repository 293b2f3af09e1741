"""Interface byte counters from /proc/net/dev and interface discovery from /sys."""

from __future__ import annotations

import logging
from pathlib import Path

from bwgraph.errors import CounterUnavailable, NoInterfaceFound

logger = logging.getLogger(__name__)

# Interface flag bits from <linux/if.h>, as exposed in /sys/class/net/*/flags
IFF_UP = 0x1
IFF_LOOPBACK = 0x8
IFF_RUNNING = 0x40


def read_counters(interface: str, proc_path: str = "/proc") -> tuple[int, int]:
    """Read cumulative (rx_bytes, tx_bytes) for ``interface``.

    Raises CounterUnavailable if /proc/net/dev can't be read or has no
    usable line for the interface.
    """
    dev_file = Path(proc_path) / "net" / "dev"
    try:
        lines = dev_file.read_text().splitlines()
    except OSError as e:
        raise CounterUnavailable(interface, str(e)) from e

    for line in lines[2:]:  # Skip the two header lines
        if ":" not in line:
            continue
        name, data = line.split(":", 1)
        if name.strip() != interface:
            continue
        fields = data.split()
        try:
            rx, tx = int(fields[0]), int(fields[8])
        except (ValueError, IndexError) as e:
            raise CounterUnavailable(interface, "malformed /proc/net/dev entry") from e
        logger.debug("Counters for %s: rx=%d tx=%d", interface, rx, tx)
        return rx, tx

    raise CounterUnavailable(interface)


def detect_default_interface(sys_path: str = "/sys") -> str:
    """Return the first interface that is up, running and not loopback.

    Interfaces are checked in name order. Raises NoInterfaceFound if none
    qualify.
    """
    net_dir = Path(sys_path) / "class" / "net"
    try:
        candidates = sorted(net_dir.iterdir())
    except OSError as e:
        raise NoInterfaceFound() from e

    for iface_dir in candidates:
        try:
            flags = int((iface_dir / "flags").read_text().strip(), 16)
        except (OSError, ValueError):
            continue
        if flags & IFF_LOOPBACK:
            continue
        if flags & IFF_UP and flags & IFF_RUNNING:
            logger.debug("Detected interface %s (flags=%#x)", iface_dir.name, flags)
            return iface_dir.name

    raise NoInterfaceFound()


class InterfaceCounters:
    """Counter source bound to one interface."""

    def __init__(self, interface: str, proc_path: str = "/proc") -> None:
        self.interface = interface
        self._proc_path = proc_path

    def read(self) -> tuple[int, int]:
        return read_counters(self.interface, proc_path=self._proc_path)
