"""
oceancruises CLI - subcommand interface for cruise track ordering.

This module provides the main command-line interface, implementing a
git-style subcommand pattern.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

try:
    from oceancruises._version import __version__
except ImportError:
    __version__ = "unknown"


def _add_logging_flags(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    group.add_argument(
        "-q", "--quiet", action="store_true", help="Only report warnings and errors"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="oceancruises",
        description="Oceanographic cruise track ordering",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  oceancruises order -c track.yaml
  oceancruises order -c track.yaml --start west -o ordered.yaml
  oceancruises distances -c track.yaml

For detailed help on a subcommand:
  oceancruises <subcommand> --help
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(
        dest="subcommand",
        title="Available commands",
        description="Choose a subcommand to run",
        help="Available subcommands",
    )

    # --- 1. Order Subcommand ---
    order_parser = subparsers.add_parser(
        "order",
        help="Put the stations of a cruise track in route order",
        description="Find a short route through all stations and orient it",
        epilog="""
The start end is the southern one unless the stations spread more in
longitude than in latitude, in which case it is the western one.
Use --start to force either.
        """,
    )
    order_parser.add_argument(
        "-c",
        "--config-file",
        required=True,
        type=Path,
        help="YAML cruise track file",
    )
    order_parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        help="Write the ordered track to this YAML file",
    )
    order_parser.add_argument(
        "--start",
        choices=["south", "west"],
        help="Force the orientation of the ordered track",
    )
    order_parser.add_argument(
        "--exact-threshold",
        type=int,
        help="Largest problem size solved exactly (stations + 1)",
    )
    _add_logging_flags(order_parser)

    # --- 2. Distances Subcommand ---
    distances_parser = subparsers.add_parser(
        "distances", help="Print leg distances of a cruise track as listed"
    )
    distances_parser.add_argument(
        "-c",
        "--config-file",
        required=True,
        type=Path,
        help="YAML cruise track file",
    )
    _add_logging_flags(distances_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point following git-style subcommand pattern."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.subcommand == "order":
        from oceancruises.cli.order import main as order_main

        return order_main(args)
    if args.subcommand == "distances":
        from oceancruises.cli.distances import main as distances_main

        return distances_main(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
