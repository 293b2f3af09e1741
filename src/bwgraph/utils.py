"""Utility functions for formatting byte counts and rates."""

from __future__ import annotations

IEC_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")
SI_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def format_bytes(value: int | float, si_units: bool = False) -> str:
    """Format a byte count to a human-readable string.

    Uses binary prefixes (powers of 1024) by default and decimal prefixes
    (powers of 1000) when ``si_units`` is set.

    Examples:
        format_bytes(0) -> "0 B"
        format_bytes(1024) -> "1.00 KiB"
        format_bytes(1500, si_units=True) -> "1.50 kB"
        format_bytes(999, si_units=True) -> "999 B"
    """
    units = SI_UNITS if si_units else IEC_UNITS
    base = 1000.0 if si_units else 1024.0

    i = 0
    while value >= base and i < len(units) - 1:
        value /= base
        i += 1

    if i == 0:
        return f"{value:.0f} {units[i]}"
    return f"{value:.2f} {units[i]}"


def format_rate(value: int | float, si_units: bool = False) -> str:
    """Format a bytes/second value, e.g. "1.00 KiB/s"."""
    return f"{format_bytes(value, si_units)}/s"
