"""
Station and cruise track records.

Thin containers around the geographic core: a `CruiseTrack` delegates its
ordering to `order_points` and its leg lengths to `segment_distances`.
"""

import logging
from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from oceancruises.calculators.distance import route_distance, segment_distances
from oceancruises.calculators.ordering import OrientationEnum, order_points, reorder
from oceancruises.calculators.solver import TourSolver, solve_closed_tour
from oceancruises.utils.constants import R_EARTH_KM, WESTMOST_LONGITUDE
from oceancruises.utils.coordinates import (
    auto_shift,
    format_position,
    normalize_longitude,
    shift_longitudes,
)
from oceancruises.validation.base_models import GeoPoint

logger = logging.getLogger(__name__)


class Station(GeoPoint):
    """
    A named, optionally dated, geographic position.

    Attributes
    ----------
    latitude : float
        Latitude in decimal degrees.
    longitude : float
        Longitude in decimal degrees.
    name : str
        Station name, empty when unnamed.
    date : datetime, optional
        Time the station was occupied.
    """

    name: str = ""
    date: Optional[datetime] = None

    def __str__(self) -> str:
        name = f"Station {self.name} " if self.name else "Unnamed station "
        date = f"{self.date.isoformat()} " if self.date is not None else ""
        return f"{name}{date}{format_position(self.latitude, self.longitude)}"


class CruiseTrack(BaseModel):
    """
    A cruise name and its stations, in visiting order.

    Attributes
    ----------
    name : str
        Cruise name.
    stations : List[Station]
        Stations in the order they are (or will be) visited.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    stations: List[Station] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.stations)

    @property
    def is_empty(self) -> bool:
        return not self.stations

    def latitudes(self) -> List[float]:
        return [st.latitude for st in self.stations]

    def longitudes(self) -> List[float]:
        return [st.longitude for st in self.stations]

    def shift_longitudes(self, base: float = WESTMOST_LONGITUDE) -> "CruiseTrack":
        """Return a copy with every longitude mapped into [base, base + 360)."""
        return self.model_copy(
            update={"stations": shift_longitudes(self.stations, base)}
        )

    def auto_shift(self) -> "CruiseTrack":
        """Return a copy remapped into [-180, 180) if the track wraps around 0°."""
        return self.model_copy(update={"stations": auto_shift(self.stations)})

    def sort(
        self,
        start: Optional[Union[OrientationEnum, str]] = None,
        solver: TourSolver = solve_closed_tour,
    ) -> "CruiseTrack":
        """
        Return a copy with stations in the order found by `order_points`.

        Station longitudes are kept as given; only their order changes.
        """
        order = order_points(self.stations, start=start, solver=solver)
        logger.debug(f"Cruise {self.name!r} station order: {order}")
        return self.model_copy(update={"stations": reorder(self.stations, order)})

    def distances(self, radius: float = R_EARTH_KM) -> List[float]:
        """Leg lengths in kilometers between consecutive stations."""
        return segment_distances(auto_shift(self.stations), radius)

    def total_distance(self, radius: float = R_EARTH_KM) -> float:
        return route_distance(auto_shift(self.stations), radius)

    def __str__(self) -> str:
        if self.is_empty:
            return f"Empty cruise {self.name}"
        lines = [f"Cruise {self.name}"]
        lines.extend(str(st) for st in self.stations)
        return "\n".join(lines)


def interpolate_stations(
    departure: Station,
    arrival: Station,
    length: int,
    westmost_lon: float = WESTMOST_LONGITUDE,
) -> List[Station]:
    """
    Evenly spaced stations from ``departure`` to ``arrival`` (both included).

    Longitudes are interpolated the short way round, so a section from 170°E
    to 170°W crosses the dateline instead of the whole Pacific. Returned
    longitudes lie in [westmost_lon, westmost_lon + 360).

    Parameters
    ----------
    departure, arrival : Station
        End points of the section.
    length : int
        Number of stations, at least 1.
    westmost_lon : float, optional
        Base of the output longitude convention. Default is -180.

    Returns
    -------
    List[Station]
        Stations named "<departure> to <arrival> <i>", i starting at 1.
    """
    if length < 1:
        raise ValueError(f"length must be at least 1, got {length}")

    lon_start = normalize_longitude(departure.longitude, westmost_lon)
    lon_end = normalize_longitude(arrival.longitude, westmost_lon)
    if lon_start - lon_end > 180:
        lon_end += 360
    if lon_start - lon_end < -180:
        lon_start += 360

    def _lerp(a: float, b: float, k: int) -> float:
        return a if length == 1 else a + (b - a) * k / (length - 1)

    return [
        Station(
            latitude=_lerp(departure.latitude, arrival.latitude, k),
            longitude=normalize_longitude(_lerp(lon_start, lon_end, k), westmost_lon),
            name=f"{departure.name} to {arrival.name} {k + 1}",
        )
        for k in range(length)
    ]
