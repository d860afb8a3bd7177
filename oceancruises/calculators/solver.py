"""
Closed-tour solver adapter.

Wraps the ``python-tsp`` solvers behind a single matrix-in, permutation-out
contract. The route ordering engine only depends on that contract, so any
exact or heuristic Hamiltonian-cycle solver can be passed in its place.
"""

import logging
from typing import Callable, List, Tuple

import numpy as np
from python_tsp.exact import solve_tsp_dynamic_programming
from python_tsp.heuristics import solve_tsp_lin_kernighan

from oceancruises.utils.constants import DEFAULT_EXACT_THRESHOLD, MATRIX_SYMMETRY_ATOL
from oceancruises.validation.exceptions import InvalidMatrixError

logger = logging.getLogger(__name__)

# A solver takes a square distance matrix and returns a visiting order of all
# its indices together with the length of the closed tour.
TourSolver = Callable[[np.ndarray], Tuple[List[int], float]]


def validate_distance_matrix(matrix) -> np.ndarray:
    """
    Check that ``matrix`` is a valid input for a closed-tour solver.

    Parameters
    ----------
    matrix : array_like
        Candidate distance matrix.

    Returns
    -------
    numpy.ndarray
        The matrix as a float array.

    Raises
    ------
    InvalidMatrixError
        If the matrix is not a numeric square matrix of size >= 2 with
        finite, non-negative, symmetric entries.
    """
    try:
        arr = np.asarray(matrix, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidMatrixError(f"Distance matrix is not numeric: {e}") from e

    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise InvalidMatrixError(
            f"Distance matrix must be square, got shape {arr.shape}"
        )
    if arr.shape[0] < 2:
        raise InvalidMatrixError(
            f"Distance matrix must be at least 2x2, got {arr.shape[0]}x{arr.shape[1]}"
        )
    if not np.all(np.isfinite(arr)):
        raise InvalidMatrixError("Distance matrix contains NaN or infinite entries")
    if np.any(arr < 0):
        raise InvalidMatrixError("Distance matrix contains negative entries")
    if not np.allclose(arr, arr.T, rtol=0.0, atol=MATRIX_SYMMETRY_ATOL):
        raise InvalidMatrixError("Distance matrix is not symmetric")
    return arr


def nearest_neighbour_tour(matrix: np.ndarray) -> List[int]:
    """
    Greedy tour starting at node 0, always moving to the closest unvisited node.

    Ties go to the lowest index, so the tour depends only on the matrix.
    """
    size = matrix.shape[0]
    visited = np.zeros(size, dtype=bool)
    tour = [0]
    visited[0] = True
    for _ in range(size - 1):
        row = np.where(visited, np.inf, matrix[tour[-1]])
        nxt = int(np.argmin(row))
        tour.append(nxt)
        visited[nxt] = True
    return tour


def solve_closed_tour(
    matrix,
    exact_threshold: int = DEFAULT_EXACT_THRESHOLD,
) -> Tuple[List[int], float]:
    """
    Find a short closed tour through every node of a distance matrix.

    Small problems are solved exactly by dynamic programming. Larger ones
    are improved with Lin-Kernighan from a nearest-neighbour tour, which only
    approximates the optimum but gives the same tour for the same matrix.

    Parameters
    ----------
    matrix : array_like
        Symmetric, non-negative square matrix of size >= 2. Zero-weight
        edges are allowed.
    exact_threshold : int, optional
        Largest matrix size solved exactly. Default is 12.

    Returns
    -------
    permutation : list of int
        Visiting order of all indices ``0..size-1``, each exactly once.
    cost : float
        Length of the closed tour.

    Raises
    ------
    InvalidMatrixError
        If the matrix fails validation.
    """
    arr = validate_distance_matrix(matrix)
    size = arr.shape[0]

    if size <= exact_threshold:
        logger.debug(f"Solving {size}-node tour exactly (dynamic programming)")
        permutation, cost = solve_tsp_dynamic_programming(arr)
    else:
        x0 = nearest_neighbour_tour(arr)
        logger.debug(f"Solving {size}-node tour with Lin-Kernighan")
        permutation, cost = solve_tsp_lin_kernighan(arr, x0=x0)

    return [int(i) for i in permutation], float(cost)
