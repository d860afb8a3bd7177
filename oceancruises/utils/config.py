# oceancruises/utils/config.py
import logging
from functools import partial
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from oceancruises.calculators.ordering import OrientationEnum
from oceancruises.calculators.solver import TourSolver, solve_closed_tour
from oceancruises.core.cruise import CruiseTrack, Station
from oceancruises.utils.constants import DEFAULT_EXACT_THRESHOLD, R_EARTH_KM
from oceancruises.validation.exceptions import (
    ConfigurationError,
    LengthMismatchError,
)

logger = logging.getLogger(__name__)

CRUISE_NAME_FIELD = "cruise_name"
STATIONS_FIELD = "stations"
ORDERING_FIELD = "ordering"


class OrderingSettings(BaseModel):
    """
    Settings for route ordering, read from the ``ordering:`` block of a track file.

    Attributes
    ----------
    start : OrientationEnum, optional
        Forced orientation; None lets the track's spread decide.
    exact_threshold : int
        Largest matrix size solved exactly.
    radius_km : float
        Sphere radius for reported leg distances.
    """

    model_config = ConfigDict(extra="forbid")

    start: Optional[OrientationEnum] = None
    exact_threshold: int = Field(default=DEFAULT_EXACT_THRESHOLD, ge=2)
    radius_km: float = Field(default=R_EARTH_KM, gt=0)

    def solver(self) -> TourSolver:
        """Return `solve_closed_tour` bound to these settings."""
        return partial(solve_closed_tour, exact_threshold=self.exact_threshold)


def load_cruise_track(
    filepath: Union[str, Path],
) -> Tuple[CruiseTrack, OrderingSettings]:
    """
    Load a cruise track and its ordering settings from YAML.

    Expected layout::

        cruise_name: MSM-123
        stations:
          - name: STN_001
            latitude: 60.5
            longitude: -30.2
        ordering:
          start: west

    Raises
    ------
    ConfigurationError
        If the file is missing, empty or does not match the layout.
    """
    path = Path(filepath)
    if not path.is_file():
        raise ConfigurationError(f"Cruise track file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read cruise track {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Cruise track file {path} must contain a mapping")

    raw_stations = data.get(STATIONS_FIELD) or []
    if not isinstance(raw_stations, list):
        raise ConfigurationError(f"'{STATIONS_FIELD}' in {path} must be a list")

    try:
        stations = [Station.model_validate(st) for st in raw_stations]
        settings = OrderingSettings.model_validate(data.get(ORDERING_FIELD) or {})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid cruise track in {path}:\n{e}") from e

    track = CruiseTrack(name=str(data.get(CRUISE_NAME_FIELD) or ""), stations=stations)
    logger.debug(f"Loaded {len(track)} stations from {path}")
    return track, settings


def format_station_for_yaml(
    station: Station, distance_km: Optional[float] = None
) -> Dict:
    """
    Convert a station into its YAML mapping.

    Coordinates are cast to native floats so NumPy scalars never reach the dumper.
    """
    entry = {
        "name": station.name,
        "latitude": round(float(station.latitude), 5),
        "longitude": round(float(station.longitude), 5),
    }
    if station.date is not None:
        entry["date"] = station.date.isoformat()
    if distance_km is not None:
        entry["distance_from_previous_km"] = round(float(distance_km), 3)
    return entry


def save_cruise_track(
    track: CruiseTrack,
    filepath: Union[str, Path],
    distances: Optional[List[float]] = None,
) -> None:
    """
    Save a cruise track to YAML, keeping station order.

    Parameters
    ----------
    track : CruiseTrack
        Track to write.
    filepath : str or Path
        Destination path; parent directories are created.
    distances : list of float, optional
        Leg distances; entry i is written on station i + 1.

    Raises
    ------
    ConfigurationError
        If the file or its directory cannot be written.
    """
    path = Path(filepath)

    if distances is None:
        legs = [None] * len(track)
    elif len(distances) != max(len(track) - 1, 0):
        raise LengthMismatchError(
            f"Expected {max(len(track) - 1, 0)} leg distances, got {len(distances)}"
        )
    else:
        legs = [None] + list(distances)
    data = {
        CRUISE_NAME_FIELD: track.name,
        STATIONS_FIELD: [
            format_station_for_yaml(st, d) for st, d in zip(track.stations, legs)
        ],
    }

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            # sort_keys=False preserves insertion order (vital for ordered cruise tracks)
            yaml.dump(
                data, f, sort_keys=False, default_flow_style=False, allow_unicode=True
            )
        logger.info(f"✅ Cruise track saved to {path}")
    except OSError as e:
        raise ConfigurationError(f"Cannot write cruise track to {path}: {e}") from e
