"""Unit tests for geogpx.utils.utils module."""

from pathlib import Path

import pytest

from geogpx.utils.utils import default_output_path, ensure_output_dir, format_decimal, format_file_size


class TestFormatDecimal:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (46.965260, "46.96526"),
            (-109.533691, "-109.533691"),
            (3205, "3205"),
            (3205.0, "3205"),
            (0, "0"),
            (-0.5, "-0.5"),
            (1e-07, "0.0000001"),
            (1.5e16, "15000000000000000"),
            ("12.50", "12.50"),
        ],
    )
    def test_values(self, value, expected):
        assert format_decimal(value) == expected

    def test_no_exponent(self):
        assert "e" not in format_decimal(1.234e-10).lower()

    def test_bool_keeps_python_spelling(self):
        assert format_decimal(True) == "True"
        assert format_decimal(False) == "False"


class TestFormatFileSize:
    def test_bytes(self):
        assert format_file_size(500) == "500 B"

    def test_kilobytes(self):
        assert format_file_size(2048) == "2.0 KB"

    def test_megabytes(self):
        assert format_file_size(3 * 1024 * 1024) == "3.0 MB"


class TestOutputPaths:
    def test_default_is_next_to_input(self):
        assert default_output_path(Path("data/route.geojson")) == Path("data/route.gpx")

    def test_directory_output(self, tmp_path: Path):
        assert default_output_path(Path("route.json"), tmp_path) == tmp_path / "route.gpx"

    def test_explicit_file(self, tmp_path: Path):
        assert default_output_path(Path("route.json"), tmp_path / "x.gpx") == tmp_path / "x.gpx"

    def test_ensure_output_dir_creates(self, tmp_path: Path):
        target = tmp_path / "a" / "b"
        assert ensure_output_dir(target) == target.resolve()
        assert target.is_dir()
