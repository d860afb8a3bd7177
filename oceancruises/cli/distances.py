"""
Leg distance CLI command.

Prints the great-circle distance between consecutive stations of a cruise
track, in the order the file lists them.
"""

import argparse
import logging

from oceancruises.cli.cli_utils import (
    CLIError,
    format_track_listing,
    setup_logging,
    validate_track_file,
)
from oceancruises.utils.config import load_cruise_track
from oceancruises.validation.exceptions import OceanCruisesError

logger = logging.getLogger(__name__)


def main(args: argparse.Namespace) -> int:
    setup_logging(
        verbose=getattr(args, "verbose", False), quiet=getattr(args, "quiet", False)
    )

    try:
        config_file = validate_track_file(args.config_file)
        track, settings = load_cruise_track(config_file)
        distances = track.distances(settings.radius_km)

        for line in format_track_listing(track, distances):
            print(line)
        print(f"📏 Total distance: {sum(distances):.1f} km")

    except (CLIError, OceanCruisesError) as e:
        logger.error(f"❌ {e}")
        return 1

    except KeyboardInterrupt:
        logger.info("\n⚠️ Operation cancelled by user.")
        return 1

    return 0
