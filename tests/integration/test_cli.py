"""End-to-end tests for the command line interface.

Each test runs the Typer app in-process and checks the rendered output
and exit code.
"""

import pytest
from typer.testing import CliRunner

from curvekit import __version__
from curvekit.cli.app import app

runner = CliRunner()

ARCH = ["0,0", "2,4", "4,0"]


def run(*args: str):
    return runner.invoke(app, list(args))


class TestPlotCommand:
    """Tests for `curvekit plot`."""

    def test_plot_points(self):
        result = run("--quiet", "plot", *ARCH, "--count", "4")
        assert result.exit_code == 0
        assert "[0, 0]" in result.output
        assert "[2, 2]" in result.output
        assert "[4, 0]" in result.output
        assert "5 points" in result.output

    def test_plot_default_count(self):
        result = run("--quiet", "plot", *ARCH)
        assert result.exit_code == 0
        assert "11 points" in result.output


class TestEquidistantCommand:
    """Tests for `curvekit equidistant`."""

    def test_equidistant(self):
        result = run("--quiet", "equidistant", "0,0", "1,1", "2,2", "3,3", "--count", "4")
        assert result.exit_code == 0
        assert "[0, 0]" in result.output
        assert "[3, 3]" in result.output
        assert "5 points" in result.output

    def test_equidistant_with_multiplier(self):
        result = run("--quiet", "equidistant", *ARCH, "--count", "6", "--multiplier", "40")
        assert result.exit_code == 0
        assert "7 points" in result.output

    def test_equidistant_low_count(self):
        result = run("--quiet", "equidistant", *ARCH, "--count", "3")
        assert result.exit_code == 0
        assert "no points" in result.output

    def test_multiplier_below_minimum_rejected(self):
        result = run("equidistant", *ARCH, "--multiplier", "1")
        assert result.exit_code != 0


class TestBboxCommand:
    """Tests for `curvekit bbox`."""

    def test_bbox(self):
        result = run("--quiet", "bbox", *ARCH)
        assert result.exit_code == 0
        assert "min [0, 0]" in result.output
        assert "max [4, 2]" in result.output
        assert "width 4" in result.output

    def test_bbox_low_samples(self):
        result = run("--quiet", "bbox", *ARCH, "--samples", "2")
        assert result.exit_code == 0
        assert "empty box" in result.output


class TestIntersectCommand:
    """Tests for `curvekit intersect`."""

    def test_vertical_and_horizontal(self):
        result = run("--quiet", "intersect", "3,0", "3,5", "0,2", "6,2")
        assert result.exit_code == 0
        assert "intersection [3, 2]" in result.output

    def test_segment_check(self):
        result = run("--quiet", "intersect", "--segment", "3,0", "3,5", "0,2", "6,2")
        assert result.exit_code == 0
        assert "on segment" in result.output
        assert "outside segment" not in result.output

    def test_segment_check_outside(self):
        result = run("--quiet", "intersect", "--segment", "0,0", "2,2", "5,3", "6,1")
        assert result.exit_code == 0
        assert "outside segment" in result.output

    def test_parallel(self):
        result = run("--quiet", "intersect", "0,0", "2,2", "0,1", "2,3")
        assert result.exit_code == 0
        assert "no intersection" in result.output

    def test_line_descriptions(self):
        result = run("intersect", "0,0", "2,2", "3,0", "3,5")
        assert result.exit_code == 0
        assert "regular y = 1x + 0" in result.output
        assert "vertical x = 3" in result.output

    def test_wrong_point_count(self):
        result = run("intersect", "0,0", "2,2", "3,0")
        assert result.exit_code == 1
        assert "Expected 4 points" in result.output


class TestErrorsAndOptions:
    """Tests for input errors and global options."""

    def test_bad_point(self):
        result = run("plot", "0,0", "abc")
        assert result.exit_code == 1
        assert "Cannot parse point" in result.output

    @pytest.mark.parametrize("points", [["1,1"], ["0,0", "1,1", "2,2", "3,3", "4,4"]])
    def test_wrong_control_point_count(self, points):
        result = run("bbox", *points)
        assert result.exit_code == 1
        assert "Expected 2-4 control points" in result.output

    def test_version(self):
        result = run("--version")
        assert result.exit_code == 0
        assert f"curvekit v{__version__}" in result.output

    def test_header(self):
        result = run("plot", *ARCH)
        assert result.exit_code == 0
        assert f"curvekit v{__version__}" in result.output
        assert "quadratic" in result.output

    def test_quiet_hides_header(self):
        result = run("--quiet", "plot", *ARCH)
        assert f"curvekit v{__version__}" not in result.output

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        result = run("--log-file", str(log_file), "--quiet", "bbox", *ARCH)
        assert result.exit_code == 0
        assert log_file.exists()
        assert "Command finished" in log_file.read_text(encoding="utf-8")
