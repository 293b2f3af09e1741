"""Data models for bwgraph."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectionStats:
    """Per-frame statistics for one traffic direction (RX or TX)."""

    current: int = 0
    average: int = 0
    maximum: int = 0
    total: int = 0


@dataclass(frozen=True)
class TickResult:
    """Rates pushed into the histories by one sampler tick, in bytes/s."""

    rx_rate: int
    tx_rate: int
