"""
Common utilities for CLI commands.

This module provides shared functionality across CLI modules including
logging setup, track file validation and station listing.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from oceancruises.core.cruise import CruiseTrack

logger = logging.getLogger(__name__)


class CLIError(Exception):
    """Custom exception for CLI-related errors."""

    pass


TRACK_SUFFIXES = (".yaml", ".yml")


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Send oceancruises log records to stdout for a CLI run.

    ``quiet`` keeps warnings and errors only, ``verbose`` adds the engine's
    debug records (solver choice, tour, orientation).
    """
    level = logging.WARNING if quiet else logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger("oceancruises").setLevel(level)


def validate_track_file(file_path: Path) -> Path:
    """
    Resolve the path of a YAML cruise track and check it can be read.

    Raises
    ------
    CLIError
        If the path is missing, not a regular file, empty, or not a YAML file.
    """
    resolved_path = file_path.resolve()

    if not resolved_path.is_file():
        raise CLIError(f"Cruise track file not found: {resolved_path}")
    if resolved_path.suffix.lower() not in TRACK_SUFFIXES:
        raise CLIError(
            f"Cruise track must be a .yaml or .yml file, got: {resolved_path.name}"
        )
    if not resolved_path.stat().st_size:
        raise CLIError(f"Cruise track file has no stations: {resolved_path}")

    return resolved_path


def format_track_listing(
    track: CruiseTrack, distances: Optional[List[float]] = None
) -> List[str]:
    """
    One line per station, with the leg distance from the previous station.

    Parameters
    ----------
    track : CruiseTrack
        Stations to list.
    distances : list of float, optional
        Leg distances in km, ``len(track) - 1`` entries.
    """
    lines = []
    for i, station in enumerate(track.stations):
        line = f"{i + 1:4d}  {station}"
        if distances is not None and i > 0:
            line += f"  [+{distances[i - 1]:.1f} km]"
        lines.append(line)
    return lines
