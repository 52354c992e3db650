"""Line types for two-point segments and their slope-intercept form.

This module defines:
- Line: a straight segment between two points
- LineKind: regular, vertical or horizontal classification
- SlopeIntercept: the derived y = m*x + b form, carrying its source line
"""

import math
import sys
from dataclasses import dataclass
from enum import Enum, auto

from curvekit.domain.point import Point


class LineKind(Enum):
    """Classification of a line for slope-intercept arithmetic.

    Vertical lines have no finite slope. Horizontal lines have a slope
    of zero. Both are resolved through the original two-point line
    rather than through m and b.
    """

    REGULAR = auto()
    VERTICAL = auto()
    HORIZONTAL = auto()


@dataclass(frozen=True, slots=True)
class Line:
    """A straight segment between two points.

    Attributes:
        point_a: Starting point
        point_b: Ending point
    """

    point_a: Point
    point_b: Point

    @property
    def length(self) -> float:
        return math.hypot(self.point_b.x - self.point_a.x, self.point_b.y - self.point_a.y)

    def is_vertical(self, epsilon: float = sys.float_info.epsilon) -> bool:
        """Check whether the x difference of the ends is smaller than epsilon."""
        return abs(self.point_b.x - self.point_a.x) < epsilon

    def is_horizontal(self, epsilon: float = sys.float_info.epsilon) -> bool:
        """Check whether the y difference of the ends is smaller than epsilon."""
        return abs(self.point_b.y - self.point_a.y) < epsilon

    def to_tuple(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """Convert to ((xa, ya), (xb, yb))."""
        return (self.point_a.to_tuple(), self.point_b.to_tuple())


@dataclass(frozen=True, slots=True)
class SlopeIntercept:
    """Slope-intercept form of a line, y = slope * x + intercept.

    Only REGULAR lines have a meaningful slope and intercept. VERTICAL and
    HORIZONTAL lines both carry slope 0.0 and intercept 0.0 as sentinels,
    never used for arithmetic. The source line is kept alongside so degenerate
    cases can be solved from the raw endpoints.

    Attributes:
        kind: Regular, vertical or horizontal
        slope: m in y = m*x + b
        intercept: b in y = m*x + b (0.0 unless kind is REGULAR)
        x: X coordinate of the reference point (the line's first point)
        y: Y coordinate of the reference point
        line: The two-point line this form was derived from
    """

    kind: LineKind
    slope: float
    intercept: float
    x: float
    y: float
    line: Line

    @property
    def m(self) -> float:
        return self.slope

    @property
    def b(self) -> float:
        return self.intercept

    def is_degenerate(self) -> bool:
        """True for vertical and horizontal lines."""
        return self.kind is not LineKind.REGULAR

    def y_at(self, x: float) -> float | None:
        """Return y on the infinite line at x, or None for a vertical line."""
        if self.kind is LineKind.VERTICAL:
            return None
        if self.kind is LineKind.HORIZONTAL:
            return self.y
        return self.slope * x + self.intercept
