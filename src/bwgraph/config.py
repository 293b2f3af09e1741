"""Configuration loading and management."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path


def _env_bool(value: str) -> bool:
    return value.lower() in ("1", "true", "yes")


@dataclass
class AppConfig:
    """Application configuration with sensible defaults."""

    # Network interface to graph; empty means autodetect
    interface: str = ""

    # Sampling and redraw interval (seconds)
    delay: float = 0.5

    # Display
    graph_lines: int = 0  # 0 = fit both graphs to the terminal height
    colors: bool = True
    si_units: bool = False
    hide_scale: bool = False
    sync_scale: bool = False
    rx_color: str = "green"
    tx_color: str = "red"

    # Debug log destination; logging is off when empty
    log_file: str = ""

    @classmethod
    def load(
        cls,
        config_path: str | None = None,
        cli_overrides: dict | None = None,
    ) -> AppConfig:
        """Load config from TOML file with CLI overrides.

        Resolution order: CLI flag > env var > config file > defaults
        """
        config = cls()

        toml_path = _resolve_config_path(config_path)
        if toml_path and toml_path.exists():
            with open(toml_path, "rb") as f:
                data = tomllib.load(f)
            _apply_toml(config, data)

        _apply_env(config)

        if cli_overrides:
            _apply_overrides(config, cli_overrides)

        return config


def _resolve_config_path(explicit_path: str | None) -> Path | None:
    """Resolve config file path."""
    if explicit_path:
        return Path(explicit_path)
    xdg = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    candidates = [
        Path(xdg) / "bwgraph" / "config.toml",
        Path.home() / ".bwgraph.toml",
    ]
    for p in candidates:
        if p.exists():
            return p
    return None


def _apply_toml(config: AppConfig, data: dict) -> None:
    """Apply TOML data to config."""
    for key in ("interface", "log_file"):
        if key in data:
            setattr(config, key, data[key])

    if "refresh" in data and "delay" in data["refresh"]:
        config.delay = float(data["refresh"]["delay"])

    if "display" in data:
        display = data["display"]
        if "graph_lines" in display:
            config.graph_lines = int(display["graph_lines"])
        for key in ("colors", "si_units", "hide_scale", "sync_scale"):
            if key in display:
                setattr(config, key, bool(display[key]))
        for key in ("rx_color", "tx_color"):
            if key in display:
                setattr(config, key, str(display[key]))


def _apply_env(config: AppConfig) -> None:
    """Apply environment variable overrides (BWGRAPH_ prefix)."""
    env_map = {
        "BWGRAPH_INTERFACE": ("interface", str),
        "BWGRAPH_DELAY": ("delay", float),
        "BWGRAPH_SI_UNITS": ("si_units", _env_bool),
        "BWGRAPH_COLORS": ("colors", _env_bool),
        "BWGRAPH_LOG_FILE": ("log_file", str),
    }
    for env_key, (attr, converter) in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            setattr(config, attr, converter(val))


def _apply_overrides(config: AppConfig, overrides: dict) -> None:
    """Apply CLI argument overrides."""
    for key, value in overrides.items():
        if value is not None and hasattr(config, key):
            setattr(config, key, value)
