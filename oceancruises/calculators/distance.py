import math
from typing import List, Sequence

import numpy as np

from oceancruises.utils.constants import DUMMY_DISTANCE, R_EARTH_KM, UNIT_RADIUS
from oceancruises.utils.coordinates import PointLike, to_coords


def haversine_distance(
    start: PointLike, end: PointLike, radius: float = R_EARTH_KM
) -> float:
    """Calculate Great Circle distance between two points on a sphere of ``radius``."""
    lat1, lon1 = to_coords(start)
    lat2, lon2 = to_coords(end)

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    )
    # Rounding can push a a hair outside [0, 1] for antipodal points
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return radius * c


def build_distance_matrix(
    points: Sequence[PointLike], radius: float = UNIT_RADIUS
) -> np.ndarray:
    """
    Build the (N+1)x(N+1) distance matrix fed to the tour solver.

    The upper-left NxN block holds pairwise great-circle distances on a
    sphere of ``radius`` (unit sphere by default). Row and column N belong to
    a dummy node at zero distance from every point, which lets a closed-tour
    solver find an open path.

    Longitudes are used as given: callers must ``auto_shift`` first.

    Parameters
    ----------
    points : sequence of GeoPoint, (lat, lon) tuples or dicts
        The N real points.
    radius : float, optional
        Sphere radius. Default is 1.

    Returns
    -------
    numpy.ndarray
        Symmetric, non-negative matrix with a zero diagonal.
    """
    n = len(points)
    matrix = np.full((n + 1, n + 1), DUMMY_DISTANCE, dtype=float)
    for i in range(n):
        matrix[i, i] = 0.0
        for j in range(i + 1, n):
            d = haversine_distance(points[i], points[j], radius)
            matrix[i, j] = d
            matrix[j, i] = d
    return matrix


def segment_distances(
    points: Sequence[PointLike], radius: float = R_EARTH_KM
) -> List[float]:
    """
    Distances between consecutive points of an ordered track.

    Uses the real Earth radius by default. Points are expected to be
    ``auto_shift``-normalized already.

    Returns
    -------
    list of float
        ``len(points) - 1`` leg distances, or an empty list for fewer than
        two points.
    """
    return [
        haversine_distance(points[i], points[i + 1], radius)
        for i in range(len(points) - 1)
    ]


def route_distance(points: Sequence[PointLike], radius: float = R_EARTH_KM) -> float:
    """Calculate total distance of a path in Kilometers."""
    return float(sum(segment_distances(points, radius)))
