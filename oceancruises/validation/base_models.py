"""
Base model classes for geographic coordinates.

Provides the immutable point type shared by the distance model, the route
ordering engine and the station records.
"""

import math

from pydantic import BaseModel, ConfigDict, field_validator


class GeoPoint(BaseModel):
    """
    Internal representation of a geographic point.

    Represents a latitude/longitude coordinate pair with validation. Points
    are frozen; normalizing a longitude yields a new point.

    Attributes
    ----------
    latitude : float
        Latitude in decimal degrees (-90 to 90).
    longitude : float
        Longitude in decimal degrees. Any finite value is accepted, tracks may
        use either the [-180, 180) or the [0, 360) convention.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    @field_validator("latitude")
    def validate_lat(cls, v):
        """
        Validate latitude is within valid range.

        Raises
        ------
        ValueError
            If latitude is outside -90 to 90 degrees.
        """
        if not (-90 <= v <= 90):
            raise ValueError(f"Latitude {v} must be between -90 and 90")
        return v

    @field_validator("longitude")
    def validate_lon(cls, v):
        """Reject NaN and infinite longitudes."""
        if not math.isfinite(v):
            raise ValueError(f"Longitude {v} must be a finite number")
        return v
