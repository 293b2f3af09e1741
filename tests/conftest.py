"""Shared test fixtures for bwgraph tests."""

from __future__ import annotations

import textwrap

import pytest

from bwgraph.config import AppConfig
from bwgraph.errors import CounterUnavailable


@pytest.fixture
def tmp_proc(tmp_path):
    """Create a mock /proc/net/dev."""
    net_dir = tmp_path / "proc" / "net"
    net_dir.mkdir(parents=True)

    dev_content = textwrap.dedent("""\
        Inter-|   Receive                                                |  Transmit
         face |bytes    packets errs drop fifo frame compressed multicast|bytes    packets errs drop fifo colls carrier compressed
            lo:  123456     100    0    0    0     0          0         0   123456     100    0    0    0     0       0          0
          eth0: 9876543    5000    0    0    0     0          0         0  1234567    4000    0    0    0     0       0          0
        wlan0:0 0 0 0 0 0 0 0 42 0 0 0 0 0 0 0
    """)
    (net_dir / "dev").write_text(dev_content)
    return tmp_path / "proc"


@pytest.fixture
def tmp_sys(tmp_path):
    """Create a mock /sys/class/net with interface flags."""
    net_dir = tmp_path / "sys" / "class" / "net"
    net_dir.mkdir(parents=True)

    def add(name: str, flags: str) -> None:
        iface = net_dir / name
        iface.mkdir()
        (iface / "flags").write_text(flags + "\n")

    add("lo", "0x49")  # UP | LOOPBACK | RUNNING
    add("docker0", "0x1003")  # UP, not RUNNING
    add("eth0", "0x1043")  # UP | RUNNING
    add("wlan0", "0x1003")
    return tmp_path / "sys"


@pytest.fixture
def sample_config(tmp_path):
    """Create a sample config file and return its path."""
    config_content = textwrap.dedent("""\
        interface = "ens3"

        [refresh]
        delay = 1.5

        [display]
        graph_lines = 6
        si_units = true
        sync_scale = true
        tx_color = "magenta"
    """)
    config_file = tmp_path / "config.toml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def default_config():
    """Return a default AppConfig."""
    return AppConfig()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the user's config files and BWGRAPH_ variables out of tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for var in (
        "BWGRAPH_INTERFACE",
        "BWGRAPH_DELAY",
        "BWGRAPH_SI_UNITS",
        "BWGRAPH_COLORS",
        "BWGRAPH_LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)


class FakeCounters:
    """Counter source returning scripted readings."""

    def __init__(self, readings, interface: str = "eth0") -> None:
        self.interface = interface
        self._readings = list(readings)
        self.calls = 0

    def read(self) -> tuple[int, int]:
        self.calls += 1
        if not self._readings:
            raise CounterUnavailable(self.interface)
        if len(self._readings) == 1:
            return self._readings[0]
        return self._readings.pop(0)
