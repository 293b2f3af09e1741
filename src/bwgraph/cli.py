"""CLI entry point for bwgraph."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib

from bwgraph import __version__
from bwgraph.collectors.counters import InterfaceCounters, detect_default_interface
from bwgraph.config import AppConfig
from bwgraph.errors import BwgraphError


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value}") from None
    if not number > 0:
        raise argparse.ArgumentTypeError(f"invalid number: {value}")
    return number


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"invalid number: {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="bwgraph",
        description="Live network interface bandwidth graph",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"bwgraph {__version__}",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to TOML config file",
    )
    parser.add_argument(
        "-d",
        "--delay",
        type=positive_float,
        metavar="SECS",
        help="Redraw delay in seconds (default: 0.5)",
    )
    parser.add_argument(
        "-i",
        "--interface",
        metavar="IFACE",
        help="Network interface (default: first interface that is up)",
    )
    parser.add_argument(
        "-l",
        "--lines",
        type=positive_int,
        metavar="N",
        help="Fixed graph height in lines",
    )
    parser.add_argument(
        "-C",
        "--no-colors",
        action="store_true",
        help="Disable colors",
    )
    parser.add_argument(
        "-s",
        "--si-units",
        action="store_true",
        help="Use SI (powers of 1000) units",
    )
    parser.add_argument(
        "-S",
        "--hide-scale",
        action="store_true",
        help="Hide the graph scale",
    )
    parser.add_argument(
        "-m",
        "--sync-max",
        action="store_true",
        help="Use the same scale for the RX and TX graphs",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write debug logs to PATH",
    )
    return parser.parse_args(argv)


def configure_logging(log_file: str) -> None:
    """Send debug logs to a file; the terminal belongs to the TUI."""
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _die(message: str) -> None:
    print(f"bwgraph: {message}", file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    overrides: dict = {}
    if args.delay:
        overrides["delay"] = args.delay
    if args.interface:
        overrides["interface"] = args.interface
    if args.lines:
        overrides["graph_lines"] = args.lines
    if args.no_colors:
        overrides["colors"] = False
    if args.si_units:
        overrides["si_units"] = True
    if args.hide_scale:
        overrides["hide_scale"] = True
    if args.sync_max:
        overrides["sync_scale"] = True
    if args.log_file:
        overrides["log_file"] = args.log_file

    try:
        config = AppConfig.load(config_path=args.config, cli_overrides=overrides)
    except (ValueError, tomllib.TOMLDecodeError) as e:
        _die(f"invalid config: {e}")
    configure_logging(config.log_file)

    if config.delay <= 0:
        _die(f"invalid delay: {config.delay}")

    if not config.interface:
        try:
            config.interface = detect_default_interface()
        except BwgraphError as e:
            _die(str(e))

    from bwgraph.app import BwgraphApp

    app = BwgraphApp(config, counters=InterfaceCounters(config.interface))
    app.run()

    if app.error_message:
        _die(app.error_message)
    if app.return_code:
        sys.exit(app.return_code)


if __name__ == "__main__":
    main()
