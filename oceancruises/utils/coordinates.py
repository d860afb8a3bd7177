"""
Longitude normalization and coordinate formatting utilities.

This module provides the functions that repair longitude discontinuities
before any computation depending on longitude spread, plus the short
hemisphere-suffixed strings used when printing stations.

Notes
-----
A cruise crossing the prime meridian while expressed in the [0, 360)
convention (e.g. 355° next to 5°) appears to span almost the whole globe.
`auto_shift` detects that case and remaps the track into [-180, 180).
Points are never mutated: shifted points are new values of the same type.
"""

from typing import Any, Dict, List, Sequence, Tuple, Union

from oceancruises.utils.constants import (
    WESTMOST_LONGITUDE,
    WRAPAROUND_EAST_BAND,
    WRAPAROUND_WEST_BAND,
)
from oceancruises.validation.base_models import GeoPoint
from oceancruises.validation.exceptions import LengthMismatchError

PointLike = Union[GeoPoint, Tuple[float, float], Dict[str, Any]]


def to_coords(point: PointLike) -> Tuple[float, float]:
    """Helper to extract (lat, lon) from various input types."""
    if isinstance(point, GeoPoint):
        return (point.latitude, point.longitude)
    if isinstance(point, dict) and "latitude" in point and "longitude" in point:
        return (point["latitude"], point["longitude"])
    lat, lon = point
    return (lat, lon)


def _with_longitude(point: PointLike, longitude: float) -> PointLike:
    """Return a copy of ``point`` carrying a new longitude."""
    if isinstance(point, GeoPoint):
        return point.model_copy(update={"longitude": longitude})
    if isinstance(point, dict):
        return {**point, "longitude": longitude}
    return (point[0], longitude)


def normalize_longitude(lon: float, base: float = 0.0) -> float:
    """
    Map a longitude into the half-open interval [base, base + 360).

    Parameters
    ----------
    lon : float
        Longitude in decimal degrees, any value.
    base : float, optional
        Westmost longitude of the target interval. Default is 0.

    Returns
    -------
    float
        ``((lon - base) mod 360) + base``.

    Examples
    --------
    >>> normalize_longitude(355.0, -180.0)
    -5.0
    >>> normalize_longitude(-90.0)
    270.0
    """
    shifted = (lon - base) % 360.0 + base
    # Tiny negative offsets round up to exactly 360 under float modulo
    if shifted >= base + 360.0:
        return base
    return shifted


def longitudes(points: Sequence[PointLike]) -> List[float]:
    return [to_coords(p)[1] for p in points]


def latitudes(points: Sequence[PointLike]) -> List[float]:
    return [to_coords(p)[0] for p in points]


def detect_wraparound(points: Sequence[PointLike]) -> bool:
    """
    Flag point sets that straddle the prime meridian in the [0, 360) convention.

    Returns True iff at least one longitude lies in [0, 90) and at least one
    lies in [270, 360).

    Examples
    --------
    >>> detect_wraparound([(0.0, 10.0), (0.0, 350.0)])
    True
    >>> detect_wraparound([(0.0, 10.0), (0.0, 170.0)])
    False
    """
    east_lo, east_hi = WRAPAROUND_EAST_BAND
    west_lo, west_hi = WRAPAROUND_WEST_BAND
    lons = longitudes(points)
    has_east = any(east_lo <= lon < east_hi for lon in lons)
    has_west = any(west_lo <= lon < west_hi for lon in lons)
    return has_east and has_west


def shift_longitudes(
    points: Sequence[PointLike], base: float = WESTMOST_LONGITUDE
) -> List[PointLike]:
    """Normalize every point's longitude into [base, base + 360)."""
    return [
        _with_longitude(p, normalize_longitude(to_coords(p)[1], base))
        for p in points
    ]


def auto_shift(points: Sequence[PointLike]) -> List[PointLike]:
    """
    Remap a wrapping track into [-180, 180), leave any other track as is.

    Must be applied before computations that depend on longitude spread.

    Parameters
    ----------
    points : sequence of GeoPoint, (lat, lon) tuples or dicts
        Track points.

    Returns
    -------
    list
        New list of points of the same types as the input.
    """
    if detect_wraparound(points):
        return shift_longitudes(points, WESTMOST_LONGITUDE)
    return list(points)


def make_points(
    lats: Sequence[float], lons: Sequence[float]
) -> List[GeoPoint]:
    """
    Build GeoPoints from co-indexed latitude and longitude sequences.

    Raises
    ------
    LengthMismatchError
        If the two sequences differ in length.
    """
    if len(lats) != len(lons):
        raise LengthMismatchError(
            f"Got {len(lats)} latitudes but {len(lons)} longitudes"
        )
    return [GeoPoint(latitude=lat, longitude=lon) for lat, lon in zip(lats, lons)]


def lat_string(lat: float) -> str:
    """
    Format a latitude with one decimal and a hemisphere letter.

    >>> lat_string(-22.75)
    '22.8S'
    """
    return f"{round(abs(lat) * 10) / 10}{'S' if lat < 0 else 'N'}"


def lon_string(lon: float) -> str:
    """
    Format a longitude with one decimal and a hemisphere letter.

    >>> lon_string(-158)
    '158.0W'
    """
    return f"{round(abs(lon) * 10) / 10}{'W' if lon < 0 else 'E'}"


def format_position(lat: float, lon: float) -> str:
    return f"({lat_string(lat)}, {lon_string(lon)})"
