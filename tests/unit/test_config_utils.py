"""
Tests for cruise track YAML loading/saving and ordering settings.
"""

from datetime import datetime

import pytest
import yaml

from oceancruises.calculators.ordering import OrientationEnum
from oceancruises.calculators.solver import solve_closed_tour
from oceancruises.core.cruise import CruiseTrack, Station
from oceancruises.utils.config import (
    OrderingSettings,
    format_station_for_yaml,
    load_cruise_track,
    save_cruise_track,
)
from oceancruises.utils.constants import DEFAULT_EXACT_THRESHOLD, R_EARTH_KM
from oceancruises.validation.exceptions import ConfigurationError, LengthMismatchError


class TestOrderingSettings:
    """Test the ordering settings model."""

    def test_defaults(self):
        settings = OrderingSettings()
        assert settings.start is None
        assert settings.exact_threshold == DEFAULT_EXACT_THRESHOLD
        assert settings.radius_km == R_EARTH_KM

    def test_start_from_string(self):
        assert OrderingSettings(start="west").start is OrientationEnum.WEST

    @pytest.mark.parametrize(
        "field, value",
        [("exact_threshold", 1), ("radius_km", -1)],
    )
    def test_rejects_invalid_values(self, field, value):
        with pytest.raises(ValueError):
            OrderingSettings(**{field: value})

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValueError):
            OrderingSettings(solver="concorde")

    def test_solver_is_bound(self):
        solver = OrderingSettings(exact_threshold=5).solver()
        assert solver.func is solve_closed_tour
        assert solver.keywords == {"exact_threshold": 5}


class TestLoadCruiseTrack:
    """Test reading cruise tracks from YAML."""

    def test_loads_fixture(self, track_yaml):
        track, settings = load_cruise_track(track_yaml)
        assert track.name == "TEST-2024"
        assert [st.name for st in track.stations] == [
            "STN_003",
            "STN_001",
            "STN_004",
            "STN_002",
        ]
        assert track.stations[1].longitude == 354.0
        assert track.stations[2].date == datetime(2024, 6, 3, 12, 0, 0)
        assert settings.exact_threshold == 12

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_cruise_track(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("stations: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_cruise_track(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_cruise_track(path)

    def test_stations_not_a_list(self, tmp_path):
        path = tmp_path / "stations.yaml"
        path.write_text("stations: 5\n")
        with pytest.raises(ConfigurationError, match="must be a list"):
            load_cruise_track(path)

    def test_invalid_station(self, tmp_path):
        path = tmp_path / "lat.yaml"
        path.write_text("stations:\n  - latitude: 120\n    longitude: 0\n")
        with pytest.raises(ConfigurationError, match="Invalid cruise track"):
            load_cruise_track(path)

    def test_invalid_ordering_block(self, tmp_path):
        path = tmp_path / "ordering.yaml"
        path.write_text("stations: []\nordering:\n  start: north\n")
        with pytest.raises(ConfigurationError):
            load_cruise_track(path)

    def test_blank_cruise_name(self, tmp_path):
        path = tmp_path / "blank.yaml"
        path.write_text("cruise_name:\nstations: []\n")
        track, _ = load_cruise_track(path)
        assert track.name == ""

    def test_no_stations(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("cruise_name: EMPTY\n")
        track, settings = load_cruise_track(path)
        assert track.is_empty
        assert settings == OrderingSettings()


class TestSaveCruiseTrack:
    """Test writing ordered tracks back to YAML."""

    @pytest.fixture
    def track(self):
        return CruiseTrack(
            name="OUT",
            stations=[
                Station(name="Z", latitude=1.123456789, longitude=2),
                Station(name="A", latitude=3, longitude=4),
            ],
        )

    def test_preserves_station_order(self, track, tmp_path):
        path = tmp_path / "nested" / "out.yaml"
        save_cruise_track(track, path)
        data = yaml.safe_load(path.read_text())
        assert data["cruise_name"] == "OUT"
        assert [st["name"] for st in data["stations"]] == ["Z", "A"]
        assert data["stations"][0]["latitude"] == 1.12346

    def test_writes_leg_distances(self, track, tmp_path):
        path = tmp_path / "out.yaml"
        save_cruise_track(track, path, distances=[123.45678])
        data = yaml.safe_load(path.read_text())
        assert "distance_from_previous_km" not in data["stations"][0]
        assert data["stations"][1]["distance_from_previous_km"] == 123.457

    def test_reload(self, track, tmp_path):
        path = tmp_path / "out.yaml"
        save_cruise_track(track, path)
        reloaded, _ = load_cruise_track(path)
        assert [st.name for st in reloaded.stations] == ["Z", "A"]

    def test_distance_count_mismatch(self, track, tmp_path):
        with pytest.raises(LengthMismatchError):
            save_cruise_track(track, tmp_path / "out.yaml", distances=[1.0, 2.0])

    def test_unwritable_destination(self, track, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory\n")
        with pytest.raises(ConfigurationError, match="Cannot write"):
            save_cruise_track(track, blocker / "out.yaml")

    def test_format_station_with_date(self):
        st = Station(name="D", latitude=0, longitude=0, date=datetime(2024, 1, 2))
        assert format_station_for_yaml(st)["date"] == "2024-01-02T00:00:00"
