"""Core value types for 2D geometry.

This module defines the plain-data types the kernel reads and writes:
- Point: an immutable 2D coordinate pair
- BoundingBox: an axis-aligned extent
- CurveKind: Bezier degree derived from a control point count
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from curvekit.exceptions import PointParseError

_POINT_PATTERN = re.compile(
    r"^\s*[\[({]?\s*"
    r"(?P<x>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
    r"\s*[,;\s]\s*"
    r"(?P<y>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
    r"\s*[\])}]?\s*$"
)


class CurveKind(Enum):
    """Bezier curve degree.

    The value is the number of control points, endpoints included.
    """

    LINEAR = 2
    QUADRATIC = 3
    CUBIC = 4

    @classmethod
    def from_count(cls, count: int) -> "CurveKind | None":
        """Return the curve kind for a control point count, or None."""
        try:
            return cls(count)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Arithmetic always returns a new point.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary with x and y fields."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Build a point from a dictionary with x and y fields."""
        return cls(x=float(data["x"]), y=float(data["y"]))

    @classmethod
    def parse(cls, text: str) -> "Point":
        """Parse a point from text such as ``"3,4"``, ``"(3, 4)"`` or ``"3 4"``.

        Args:
            text: Two numbers separated by a comma, semicolon or whitespace,
                optionally wrapped in brackets

        Returns:
            Parsed point

        Raises:
            PointParseError: If the text does not hold exactly two numbers
        """
        if not text or not text.strip():
            raise PointParseError(text, "empty value")
        match = _POINT_PATTERN.match(text)
        if match is None:
            raise PointParseError(text, "expected two numbers, e.g. '3,4'")
        return cls(float(match.group("x")), float(match.group("y")))


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box.

    The zero-valued box (see EMPTY_BOX) is the canonical result for
    invalid input.

    Attributes:
        min_x: Left edge
        min_y: Top edge in screen orientation, low edge otherwise
        max_x: Right edge
        max_y: Bottom edge in screen orientation, high edge otherwise
    """

    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    @property
    def x(self) -> float:
        return self.min_x

    @property
    def y(self) -> float:
        return self.min_y

    @property
    def right(self) -> float:
        return self.max_x

    @property
    def bottom(self) -> float:
        return self.max_y

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def is_empty(self) -> bool:
        """Return True for the canonical zero box."""
        return self == EMPTY_BOX

    def contains(self, point: Point) -> bool:
        """Check whether a point lies inside or on the box edges."""
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to a (min_x, min_y, max_x, max_y) tuple."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BoundingBox":
        """Span the given points. An empty iterable yields the zero box."""
        points = list(points)
        if not points:
            return EMPTY_BOX
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


EMPTY_BOX = BoundingBox()
