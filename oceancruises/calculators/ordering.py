"""
Route ordering engine.

Infers a geographically sensible visiting order for an unordered set of
stations. The shortest open path through the stations is found by adding a
dummy node at zero distance from every station, solving the closed tour over
the enlarged matrix, and cutting the tour at the dummy. The resulting path is
then oriented so that it runs south to north or west to east.

Every call builds its own matrix and keeps no state, so independent orderings
can safely run in parallel.
"""

import logging
import warnings
from enum import Enum
from typing import List, Optional, Sequence, TypeVar, Union

from oceancruises.calculators.distance import build_distance_matrix
from oceancruises.calculators.solver import TourSolver, solve_closed_tour
from oceancruises.utils.coordinates import (
    PointLike,
    auto_shift,
    latitudes,
    longitudes,
    to_coords,
)
from oceancruises.validation.exceptions import (
    DegenerateSolverOutputWarning,
    InvalidSolverOutputError,
    LengthMismatchError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OrientationEnum(str, Enum):
    """
    Axis deciding which end of an ordered track comes first.

    SOUTH starts the track at its southern end, WEST at its western end.
    """

    SOUTH = "south"
    WEST = "west"


def cut_tour_at_dummy(tour: Sequence[int], dummy: int) -> List[int]:
    """
    Turn a closed tour containing the dummy node into an open path.

    The path starts right after the dummy and ends right before it. A tour
    that repeats its first node at the end is accepted.

    If the dummy does not appear exactly once the solver broke its contract:
    a ``DegenerateSolverOutputWarning`` is issued and the dummy is simply
    removed wherever it occurs.

    Parameters
    ----------
    tour : sequence of int
        Cyclic visiting order returned by the solver.
    dummy : int
        Index of the dummy node.

    Returns
    -------
    list of int
        Open path without the dummy.
    """
    tour = list(tour)
    if len(tour) > 1 and tour[0] == tour[-1]:
        tour = tour[:-1]

    positions = [k for k, node in enumerate(tour) if node == dummy]
    if len(positions) == 1:
        pos = positions[0]
        return tour[pos + 1 :] + tour[:pos]

    message = (
        f"Solver tour contains the dummy node {dummy} {len(positions)} times "
        "(expected once); dropping it and keeping the remaining order"
    )
    logger.warning(message)
    warnings.warn(message, DegenerateSolverOutputWarning, stacklevel=2)
    return [node for node in tour if node != dummy]


def choose_orientation(points: Sequence[PointLike]) -> OrientationEnum:
    """
    Pick WEST when the points spread more in longitude than in latitude.

    Points must already be ``auto_shift``-normalized. Equal spreads give SOUTH.
    """
    lats = latitudes(points)
    lons = longitudes(points)
    lat_span = max(lats) - min(lats)
    lon_span = max(lons) - min(lons)
    if lon_span > lat_span:
        return OrientationEnum.WEST
    return OrientationEnum.SOUTH


def orient_path(
    path: Sequence[int],
    points: Sequence[PointLike],
    orientation: Union[OrientationEnum, str],
) -> List[int]:
    """
    Reverse ``path`` if it runs north to south (SOUTH) or east to west (WEST).

    Parameters
    ----------
    path : sequence of int
        Indices into ``points``.
    points : sequence of GeoPoint, (lat, lon) tuples or dicts
        Normalized points.
    orientation : OrientationEnum or str
        "south" or "west".
    """
    path = list(path)
    if not path:
        return path
    axis = 1 if OrientationEnum(orientation) is OrientationEnum.WEST else 0
    first = to_coords(points[path[0]])[axis]
    last = to_coords(points[path[-1]])[axis]
    if first > last:
        path.reverse()
    return path


def order_points(
    points: Sequence[PointLike],
    start: Optional[Union[OrientationEnum, str]] = None,
    solver: TourSolver = solve_closed_tour,
) -> List[int]:
    """
    Compute a geographically sensible visiting order for ``points``.

    Parameters
    ----------
    points : sequence of GeoPoint, (lat, lon) tuples or dicts
        Stations in arbitrary order. Only latitude and longitude are used.
    start : OrientationEnum or str, optional
        Force the orientation ("south" or "west"). By default it follows the
        larger of the latitude and longitude spreads.
    solver : callable, optional
        Closed-tour solver, see ``solve_closed_tour`` for the contract.

    Returns
    -------
    list of int
        Permutation of ``0..len(points)-1``; apply it with ``reorder``.

    Raises
    ------
    InvalidSolverOutputError
        If the solver output cannot be turned into a permutation.

    Examples
    --------
    >>> order_points([(3, 6), (1, 2), (10, 20), (2, 4)])
    [1, 3, 0, 2]
    """
    n = len(points)
    if n == 0:
        return []
    if n == 1:
        return [0]

    shifted = auto_shift(points)
    matrix = build_distance_matrix(shifted)
    tour, cost = solver(matrix)
    logger.debug(f"Solver returned tour {list(tour)} with cost {cost:.6f}")

    path = cut_tour_at_dummy(tour, dummy=n)
    if sorted(path) != list(range(n)):
        raise InvalidSolverOutputError(
            f"Solver tour {list(tour)} does not visit each of the {n} points exactly once"
        )

    if start is None:
        orientation = choose_orientation(shifted)
    else:
        orientation = OrientationEnum(start)
    logger.debug(f"Orienting path with mode '{orientation.value}'")

    return orient_path(path, shifted, orientation)


def reorder(items: Sequence[T], order: Sequence[int]) -> List[T]:
    """
    Apply an index permutation to a co-indexed sequence.

    Raises
    ------
    LengthMismatchError
        If ``items`` and ``order`` differ in length.
    """
    if len(items) != len(order):
        raise LengthMismatchError(
            f"Cannot reorder {len(items)} items with an order of length {len(order)}"
        )
    return [items[i] for i in order]
