"""Tests for domain models to verify they work correctly."""

import pytest

from curvekit.domain import (
    EMPTY_BOX,
    ORIGIN,
    BoundingBox,
    CurveKind,
    Line,
    LineKind,
    Point,
    SlopeIntercept,
)
from curvekit.exceptions import PointParseError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_default_point_is_origin(self) -> None:
        """Test that a default point equals the origin constant."""
        assert Point() == ORIGIN == Point(0.0, 0.0)

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point dictionary conversion in both directions."""
        p1 = Point(1.5, -2.5)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1, 2), Point(1.0, 2.0), Point(2, 1)}) == 2

    def test_point_arithmetic(self) -> None:
        """Arithmetic returns new points."""
        a = Point(1.0, 2.0)
        b = Point(3.0, 5.0)
        assert a + b == Point(4.0, 7.0)
        assert b - a == Point(2.0, 3.0)
        assert a * 2 == Point(2.0, 4.0)
        assert 2 * a == Point(2.0, 4.0)
        assert a == Point(1.0, 2.0)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3,4", Point(3.0, 4.0)),
            ("(1.5, -2)", Point(1.5, -2.0)),
            ("  7 8 ", Point(7.0, 8.0)),
            ("[-.5;1e2]", Point(-0.5, 100.0)),
        ],
    )
    def test_parse_valid(self, text: str, expected: Point) -> None:
        """Test parsing of accepted point notations."""
        assert Point.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "1", "1,2,3", "1,,2"])
    def test_parse_invalid(self, text: str) -> None:
        """Malformed text raises PointParseError."""
        with pytest.raises(PointParseError) as exc_info:
            Point.parse(text)
        assert exc_info.value.text == text


class TestCurveKind:
    """Tests for CurveKind enum."""

    def test_from_count(self) -> None:
        assert CurveKind.from_count(2) is CurveKind.LINEAR
        assert CurveKind.from_count(3) is CurveKind.QUADRATIC
        assert CurveKind.from_count(4) is CurveKind.CUBIC

    def test_from_count_out_of_range(self) -> None:
        assert CurveKind.from_count(1) is None
        assert CurveKind.from_count(5) is None


class TestBoundingBox:
    """Tests for BoundingBox class."""

    def test_empty_box(self) -> None:
        """The default box is the canonical empty box."""
        assert BoundingBox() == EMPTY_BOX
        assert EMPTY_BOX.is_empty()
        assert EMPTY_BOX.to_tuple() == (0.0, 0.0, 0.0, 0.0)

    def test_from_points(self) -> None:
        """Box spans all points."""
        box = BoundingBox.from_points([Point(10, 20), Point(100, 30), Point(50, 150)])
        assert box.to_tuple() == (10.0, 20.0, 100.0, 150.0)
        assert box.width == 90.0
        assert box.height == 130.0
        assert not box.is_empty()

    def test_from_no_points(self) -> None:
        assert BoundingBox.from_points([]) is EMPTY_BOX

    def test_edge_aliases(self) -> None:
        """x/y/right/bottom mirror the min/max fields."""
        box = BoundingBox(1.0, 2.0, 3.0, 4.0)
        assert (box.x, box.y, box.right, box.bottom) == (1.0, 2.0, 3.0, 4.0)

    def test_contains(self) -> None:
        box = BoundingBox(0.0, 0.0, 4.0, 2.0)
        assert box.contains(Point(4.0, 2.0))
        assert box.contains(Point(2.0, 1.0))
        assert not box.contains(Point(4.1, 1.0))


class TestLine:
    """Tests for Line class."""

    def test_length(self) -> None:
        assert Line(Point(0, 0), Point(3, 4)).length == 5.0

    def test_vertical_and_horizontal(self) -> None:
        vertical = Line(Point(3, 0), Point(3, 5))
        horizontal = Line(Point(0, 2), Point(6, 2))
        assert vertical.is_vertical()
        assert not vertical.is_horizontal()
        assert horizontal.is_horizontal()
        assert not horizontal.is_vertical()

    def test_vertical_within_epsilon(self) -> None:
        line = Line(Point(1.0, 0.0), Point(1.0 + 1e-9, 5.0))
        assert not line.is_vertical()
        assert line.is_vertical(1e-6)

    def test_default_tolerance_is_machine_epsilon(self) -> None:
        """Tiny but real spans are neither vertical nor horizontal."""
        line = Line(Point(0.0, 0.0), Point(2e-7, 2e-7))
        assert not line.is_vertical()
        assert not line.is_horizontal()
        assert Line(Point(0.0, 0.0), Point(1e-17, 1.0)).is_vertical()


class TestSlopeIntercept:
    """Tests for SlopeIntercept value type."""

    def test_regular_accessors(self) -> None:
        line = Line(Point(0, 1), Point(1, 3))
        form = SlopeIntercept(LineKind.REGULAR, 2.0, 1.0, 0.0, 1.0, line)
        assert form.m == 2.0
        assert form.b == 1.0
        assert not form.is_degenerate()
        assert form.y_at(2.0) == 5.0

    def test_degenerate_y_at(self) -> None:
        vertical = SlopeIntercept(
            LineKind.VERTICAL, 0.0, 0.0, 3.0, 0.0, Line(Point(3, 0), Point(3, 5))
        )
        horizontal = SlopeIntercept(
            LineKind.HORIZONTAL, 0.0, 0.0, 0.0, 2.0, Line(Point(0, 2), Point(6, 2))
        )
        assert vertical.is_degenerate()
        assert vertical.y_at(3.0) is None
        assert horizontal.is_degenerate()
        assert horizontal.y_at(100.0) == 2.0

    def test_immutable(self) -> None:
        form = SlopeIntercept(
            LineKind.HORIZONTAL, 0.0, 0.0, 0.0, 2.0, Line(Point(0, 2), Point(6, 2))
        )
        with pytest.raises(AttributeError):
            form.slope = 1.0  # type: ignore
