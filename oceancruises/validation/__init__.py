"""
Validation module for oceancruises.

Provides the Pydantic point model and the package exceptions.
"""

from .base_models import GeoPoint
from .exceptions import (
    ConfigurationError,
    DegenerateSolverOutputWarning,
    InvalidMatrixError,
    InvalidSolverOutputError,
    LengthMismatchError,
    OceanCruisesError,
)

__all__ = [
    "ConfigurationError",
    "DegenerateSolverOutputWarning",
    "GeoPoint",
    "InvalidMatrixError",
    "InvalidSolverOutputError",
    "LengthMismatchError",
    "OceanCruisesError",
]
