"""
Custom exceptions and warnings for oceancruises.
"""


class OceanCruisesError(Exception):
    """Base class for all errors raised by oceancruises."""

    pass


class InvalidMatrixError(OceanCruisesError):
    """
    Exception raised when a distance matrix handed to the tour solver is unusable.

    The matrix must be two-dimensional, square, at least 2x2, finite,
    non-negative and symmetric.
    """

    pass


class LengthMismatchError(OceanCruisesError):
    """
    Exception raised when two co-indexed sequences differ in length.

    Examples are the depths and values of a depth profile, or latitudes and
    longitudes zipped into points. Such inputs are rejected when the object
    is built; they are never truncated or padded.
    """

    pass


class InvalidSolverOutputError(OceanCruisesError):
    """
    Exception raised when a tour solver returns something that cannot be
    turned into a visiting order of the stations.
    """

    pass


class ConfigurationError(OceanCruisesError):
    """
    Exception raised when a cruise track YAML file is missing or malformed.
    """

    pass


class DegenerateSolverOutputWarning(UserWarning):
    """
    Warning issued when the tour returned by a solver does not contain the
    dummy node exactly once.

    The route ordering engine recovers by dropping the dummy wherever it
    appears, so the resulting order is a best effort rather than the open
    path the dummy reduction is meant to produce.
    """

    pass
