"""Tests for bwgraph.collectors.counters."""

import pytest

from bwgraph.collectors.counters import (
    InterfaceCounters,
    detect_default_interface,
    read_counters,
)
from bwgraph.errors import CounterUnavailable, NoInterfaceFound


class TestReadCounters:
    def test_reads_rx_and_tx(self, tmp_proc):
        assert read_counters("eth0", proc_path=str(tmp_proc)) == (9876543, 1234567)

    def test_loopback(self, tmp_proc):
        assert read_counters("lo", proc_path=str(tmp_proc)) == (123456, 123456)

    def test_no_space_after_colon(self, tmp_proc):
        assert read_counters("wlan0", proc_path=str(tmp_proc)) == (0, 42)

    def test_missing_interface(self, tmp_proc):
        with pytest.raises(CounterUnavailable) as exc:
            read_counters("eth9", proc_path=str(tmp_proc))
        assert exc.value.interface == "eth9"
        assert "eth9" in str(exc.value)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CounterUnavailable):
            read_counters("eth0", proc_path=str(tmp_path))

    def test_malformed_line(self, tmp_path):
        net_dir = tmp_path / "net"
        net_dir.mkdir()
        (net_dir / "dev").write_text("header\nheader\n  eth0: 1 2 3\n")
        with pytest.raises(CounterUnavailable):
            read_counters("eth0", proc_path=str(tmp_path))

    def test_interface_counters_source(self, tmp_proc):
        source = InterfaceCounters("eth0", proc_path=str(tmp_proc))
        assert source.interface == "eth0"
        assert source.read() == (9876543, 1234567)


class TestDetectDefaultInterface:
    def test_skips_loopback_and_down(self, tmp_sys):
        assert detect_default_interface(sys_path=str(tmp_sys)) == "eth0"

    def test_none_running(self, tmp_sys):
        (tmp_sys / "class" / "net" / "eth0" / "flags").write_text("0x1003\n")
        with pytest.raises(NoInterfaceFound):
            detect_default_interface(sys_path=str(tmp_sys))

    def test_unreadable_flags_skipped(self, tmp_sys):
        (tmp_sys / "class" / "net" / "docker0" / "flags").write_text("garbage\n")
        assert detect_default_interface(sys_path=str(tmp_sys)) == "eth0"

    def test_missing_sys(self, tmp_path):
        with pytest.raises(NoInterfaceFound):
            detect_default_interface(sys_path=str(tmp_path))
