"""
Test suite for oceancruises.cli.order and the notebook-level order API.
"""

import argparse
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

import oceancruises
from oceancruises.cli.cli_utils import CLIError, validate_track_file
from oceancruises.cli.order import main
from oceancruises.validation.exceptions import ConfigurationError

EXPECTED_ORDER = ["STN_001", "STN_002", "STN_003", "STN_004"]


def make_args(config_file, **kwargs):
    defaults = dict(
        config_file=Path(config_file),
        output_file=None,
        start=None,
        exact_threshold=None,
        verbose=False,
        quiet=False,
    )
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


class TestOrderApi:
    """Test oceancruises.order."""

    def test_orders_wrapping_track(self, track_yaml):
        ordered, distances = oceancruises.order(track_yaml)
        assert [st.name for st in ordered.stations] == EXPECTED_ORDER
        assert len(distances) == 3
        assert all(d > 0 for d in distances)

    def test_start_override(self, track_yaml):
        ordered, _ = oceancruises.order(track_yaml, start="south")
        # Latitude grows eastward along this section, so south also starts west
        assert [st.name for st in ordered.stations] == EXPECTED_ORDER

    def test_writes_output(self, track_yaml, tmp_path):
        output = tmp_path / "ordered.yaml"
        oceancruises.order(track_yaml, output_file=output)
        data = yaml.safe_load(output.read_text())
        assert [st["name"] for st in data["stations"]] == EXPECTED_ORDER
        assert data["stations"][0]["longitude"] == 354.0

    def test_invalid_override(self, track_yaml):
        with pytest.raises(ConfigurationError, match="Invalid ordering options"):
            oceancruises.order(track_yaml, exact_threshold=1)


class TestOrderCommand:
    """Test the CLI layer of the order command."""

    def test_main_calls_api_with_correct_params(self, track_yaml):
        args = make_args(track_yaml, start="west", exact_threshold=8)
        with (
            patch("oceancruises.cli.order.setup_logging"),
            patch(
                "oceancruises.order",
                return_value=(oceancruises.CruiseTrack(name="X"), []),
            ) as mock_api,
        ):
            result = main(args)

        assert result == 0
        mock_api.assert_called_once_with(
            track_yaml.resolve(),
            output_file=None,
            start="west",
            exact_threshold=8,
        )

    def test_prints_ordered_stations(self, track_yaml, capsys):
        with patch("oceancruises.cli.order.setup_logging"):
            result = main(make_args(track_yaml))

        assert result == 0
        out = capsys.readouterr().out
        positions = [out.index(name) for name in EXPECTED_ORDER]
        assert positions == sorted(positions)
        assert "Total distance" in out

    def test_missing_file_returns_error(self, tmp_path):
        with patch("oceancruises.cli.order.setup_logging"):
            assert main(make_args(tmp_path / "missing.yaml")) == 1

    def test_invalid_track_returns_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("stations: 5\n")
        with patch("oceancruises.cli.order.setup_logging"):
            assert main(make_args(path)) == 1

    def test_unwritable_output_returns_error(self, track_yaml, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory\n")
        args = make_args(track_yaml, output_file=blocker / "out.yaml")
        with patch("oceancruises.cli.order.setup_logging"):
            assert main(args) == 1

    def test_non_yaml_track_returns_error(self, tmp_path):
        path = tmp_path / "track.txt"
        path.write_text("stations: []\n")
        with patch("oceancruises.cli.order.setup_logging"):
            assert main(make_args(path)) == 1


class TestValidateTrackFile:
    """Test the track file checks done before loading."""

    def test_accepts_yaml_track(self, track_yaml):
        assert validate_track_file(track_yaml) == track_yaml.resolve()

    def test_accepts_yml_suffix(self, tmp_path):
        path = tmp_path / "track.yml"
        path.write_text("stations: []\n")
        assert validate_track_file(path) == path.resolve()

    def test_missing_file(self, tmp_path):
        with pytest.raises(CLIError, match="not found"):
            validate_track_file(tmp_path / "missing.yaml")

    def test_directory_is_not_a_track(self, tmp_path):
        with pytest.raises(CLIError, match="not found"):
            validate_track_file(tmp_path)

    def test_wrong_suffix(self, tmp_path):
        path = tmp_path / "track.csv"
        path.write_text("lat,lon\n")
        with pytest.raises(CLIError, match=r"\.yaml or \.yml"):
            validate_track_file(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(CLIError, match="no stations"):
            validate_track_file(path)
