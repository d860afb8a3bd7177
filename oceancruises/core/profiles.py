"""
Depth profiles and transects of tracer measurements.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from oceancruises.calculators.ordering import OrientationEnum, order_points, reorder
from oceancruises.calculators.solver import TourSolver, solve_closed_tour
from oceancruises.core.cruise import CruiseTrack, Station
from oceancruises.utils.constants import R_EARTH_KM
from oceancruises.validation.exceptions import LengthMismatchError


class DepthProfile(BaseModel):
    """
    Tracer values measured at several depths of one station.

    Attributes
    ----------
    station : Station
        Where the profile was taken.
    depths : List[float]
        Sample depths in meters.
    values : List[Any]
        Measured values, co-indexed with ``depths``.

    Raises
    ------
    LengthMismatchError
        If ``depths`` and ``values`` differ in length.
    """

    model_config = ConfigDict(frozen=True)

    station: Station = Field(default_factory=lambda: Station(latitude=0.0, longitude=0.0))
    depths: List[float] = Field(default_factory=list)
    values: List[Any] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_lengths(self):
        if len(self.depths) != len(self.values):
            raise LengthMismatchError(
                f"`depths` and `values` must have same length "
                f"(got {len(self.depths)} and {len(self.values)})"
            )
        return self

    def __len__(self) -> int:
        return len(self.depths)

    @property
    def is_empty(self) -> bool:
        return not self.depths

    def __str__(self) -> str:
        if self.is_empty:
            return f"Empty profile at {self.station}"
        return f"Depth profile at {self.station} ({len(self)} depths)"


class Transect(BaseModel):
    """
    Depth profiles of one tracer along one cruise.

    Attributes
    ----------
    tracer : str
        Tracer name, e.g. "PO₄".
    cruise : str
        Cruise name.
    profiles : List[DepthProfile]
        Profiles in station order.
    """

    model_config = ConfigDict(frozen=True)

    tracer: str = ""
    cruise: str = ""
    profiles: List[DepthProfile] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.profiles)

    @property
    def is_empty(self) -> bool:
        return not self.profiles

    def cruise_track(self) -> CruiseTrack:
        return CruiseTrack(
            name=self.cruise, stations=[p.station for p in self.profiles]
        )

    def sort(
        self,
        start: Optional[Union[OrientationEnum, str]] = None,
        solver: TourSolver = solve_closed_tour,
    ) -> "Transect":
        """Return a copy with profiles in the order of their stations' route."""
        order = order_points(
            [p.station for p in self.profiles], start=start, solver=solver
        )
        return self.model_copy(update={"profiles": reorder(self.profiles, order)})

    def distances(self, radius: float = R_EARTH_KM) -> List[float]:
        return self.cruise_track().distances(radius)

    def max_value(self):
        """Largest value over all profiles; raises ValueError if there is none."""
        return max(v for p in self.profiles for v in p.values)

    def min_value(self):
        """Smallest value over all profiles; raises ValueError if there is none."""
        return min(v for p in self.profiles for v in p.values)

    def __str__(self) -> str:
        if self.is_empty:
            return "Empty transect"
        return f"Transect of {self.tracer}\n{self.cruise_track()}"


class Transects(BaseModel):
    """A collection of transects of one tracer from several cruises."""

    model_config = ConfigDict(frozen=True)

    tracer: str = ""
    cruises: List[str] = Field(default_factory=list)
    transects: List[Transect] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.transects)

    def __str__(self) -> str:
        return f"Transects of {self.tracer} (cruises {', '.join(self.cruises)})"
