"""
OceanCruises: oceanographic cruise tracks and route ordering

This package models geo-located stations, cruise tracks and depth-resolved
tracer measurements along a track, and infers a geographically sensible
order for stations given in arbitrary order.

Notebook-Friendly API
=====================

    import oceancruises

    # Order the stations of a YAML track (mirrors: oceancruises order)
    track, distances = oceancruises.order("track.yaml", start="west")

    # Work with the models directly
    from oceancruises import CruiseTrack, Station
    ct = CruiseTrack(name="MSM-123", stations=[Station(latitude=1, longitude=2)])
    ordered = ct.sort()

For lower-level access use the engine itself:

    from oceancruises.calculators.ordering import order_points, reorder
    from oceancruises.calculators.distance import segment_distances
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from oceancruises.calculators.distance import (
    build_distance_matrix,
    haversine_distance,
    segment_distances,
)
from oceancruises.calculators.ordering import OrientationEnum, order_points, reorder
from oceancruises.calculators.solver import solve_closed_tour
from oceancruises.core.cruise import CruiseTrack, Station, interpolate_stations
from oceancruises.core.profiles import DepthProfile, Transect, Transects
from oceancruises.utils.config import (
    OrderingSettings,
    load_cruise_track,
    save_cruise_track,
)
from oceancruises.utils.coordinates import auto_shift, normalize_longitude
from oceancruises.validation import (
    ConfigurationError,
    DegenerateSolverOutputWarning,
    GeoPoint,
    InvalidMatrixError,
    InvalidSolverOutputError,
    LengthMismatchError,
    OceanCruisesError,
)

try:
    from oceancruises._version import __version__
except ImportError:
    __version__ = "unknown"

logger = logging.getLogger(__name__)


def order(
    config_file: Union[str, Path],
    output_file: Optional[Union[str, Path]] = None,
    start: Optional[Union[OrientationEnum, str]] = None,
    exact_threshold: Optional[int] = None,
) -> Tuple[CruiseTrack, List[float]]:
    """
    Order the stations of a cruise track file (mirrors: oceancruises order).

    Arguments left as None fall back to the file's ``ordering:`` block.

    Parameters
    ----------
    config_file : str or Path
        YAML cruise track file.
    output_file : str or Path, optional
        Where to write the ordered track.
    start : OrientationEnum or str, optional
        Force "south" or "west" orientation.
    exact_threshold : int, optional
        Largest problem size solved exactly.

    Returns
    -------
    tuple
        (ordered CruiseTrack, leg distances in km)

    Raises
    ------
    ConfigurationError
        If the file or the overrides are invalid.
    """
    track, settings = load_cruise_track(config_file)

    overrides = {
        "start": start,
        "exact_threshold": exact_threshold,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        try:
            settings = OrderingSettings.model_validate(
                {**settings.model_dump(), **overrides}
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid ordering options: {e}") from e

    logger.info(f"Ordering {len(track)} stations of cruise '{track.name}'")
    ordered = track.sort(start=settings.start, solver=settings.solver())
    distances = ordered.distances(settings.radius_km)

    if output_file is not None:
        save_cruise_track(ordered, output_file, distances)

    return ordered, distances


__all__ = [
    "ConfigurationError",
    "CruiseTrack",
    "DegenerateSolverOutputWarning",
    "DepthProfile",
    "GeoPoint",
    "InvalidMatrixError",
    "InvalidSolverOutputError",
    "LengthMismatchError",
    "OceanCruisesError",
    "OrderingSettings",
    "OrientationEnum",
    "Station",
    "Transect",
    "Transects",
    "auto_shift",
    "build_distance_matrix",
    "haversine_distance",
    "interpolate_stations",
    "load_cruise_track",
    "normalize_longitude",
    "order",
    "order_points",
    "reorder",
    "save_cruise_track",
    "segment_distances",
    "solve_closed_tour",
    "__version__",
]
