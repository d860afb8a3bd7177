"""
Station ordering CLI command.

Reads a cruise track YAML file, puts its stations in route order and prints
the ordered stations with their leg distances.
"""

import argparse
import logging

import oceancruises
from oceancruises.cli.cli_utils import (
    CLIError,
    format_track_listing,
    setup_logging,
    validate_track_file,
)
from oceancruises.validation.exceptions import OceanCruisesError

logger = logging.getLogger(__name__)


def main(args: argparse.Namespace) -> int:
    """
    Order the stations of a cruise track.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments containing config_file and optional
        output_file, start, exact_threshold, verbose, quiet.
    """
    setup_logging(
        verbose=getattr(args, "verbose", False), quiet=getattr(args, "quiet", False)
    )

    try:
        config_file = validate_track_file(args.config_file)
        logger.info(f"Loading cruise track from {config_file}")

        ordered, distances = oceancruises.order(
            config_file,
            output_file=getattr(args, "output_file", None),
            start=getattr(args, "start", None),
            exact_threshold=getattr(args, "exact_threshold", None),
        )

        print(f"🚢 Cruise {ordered.name or '(unnamed)'}: {len(ordered)} stations")
        for line in format_track_listing(ordered, distances):
            print(line)
        print(f"📏 Total distance: {sum(distances):.1f} km")

    except (CLIError, OceanCruisesError) as e:
        logger.error(f"❌ {e}")
        return 1

    except KeyboardInterrupt:
        logger.info("\n⚠️ Operation cancelled by user.")
        return 1

    return 0
