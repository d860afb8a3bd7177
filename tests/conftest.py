"""
Global test configuration and fixtures.

This file contains pytest fixtures shared by the unit and CLI tests.
"""

from pathlib import Path

import pytest

from oceancruises.core.cruise import CruiseTrack, Station


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding YAML fixture files."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def ordered_stations():
    """Ten stations running south-west to north-east, in visiting order."""
    return [Station(name=str(i), latitude=i, longitude=2 * i) for i in range(1, 11)]


@pytest.fixture
def shuffled_track(ordered_stations):
    """The stations of `ordered_stations` in a scrambled order."""
    scramble = [4, 0, 9, 2, 7, 5, 1, 8, 3, 6]
    return CruiseTrack(
        name="TestCruiseTrack", stations=[ordered_stations[i] for i in scramble]
    )


@pytest.fixture
def track_yaml(tmp_path, fixtures_dir) -> Path:
    """Copy of the unordered track fixture in a temporary directory."""
    path = tmp_path / "track.yaml"
    path.write_text((fixtures_dir / "unordered_track.yaml").read_text())
    return path
