"""Slope-intercept conversion and line intersection.

Lines are converted to y = m*x + b form for the regular case. Vertical
lines have no finite slope and horizontal lines make m and b carry no
position on the x axis, so both are tagged as degenerate and solved
from the original two-point line instead: the intersection is found by
proportional distance along the companion line's raw span, which avoids
dividing by a near-zero run.

All functions are pure and never raise for degenerate input. An
unresolvable intersection (parallel or coincident lines) is reported as
None, distinct from a legitimate intersection at the origin.
"""

import logging
import math

from curvekit.core.numeric import EPSILON, MACHINE_EPSILON
from curvekit.domain import Line, LineKind, Point, SlopeIntercept

logger = logging.getLogger(__name__)


def slope(point_a: Point, point_b: Point, epsilon: float = MACHINE_EPSILON) -> float:
    """Return (y2 - y1) / (x2 - x1) for the line through two points.

    Lines whose x difference is smaller than epsilon (machine epsilon by
    default) are treated as vertical and report a slope of 0.0.

    Examples:
        >>> slope(Point(0, 0), Point(2, 4))
        2.0
        >>> slope(Point(3, 0), Point(3, 5))
        0.0
    """
    run = point_b.x - point_a.x
    if abs(run) < epsilon:
        return 0.0
    return (point_b.y - point_a.y) / run


def to_slope_intercept(
    line: Line | Point,
    point_b: Point | None = None,
    *,
    epsilon: float = MACHINE_EPSILON,
) -> SlopeIntercept:
    """Convert a two-point line to slope-intercept form.

    Accepts either a Line or its two endpoints.

    Args:
        line: The line, or its first point when point_b is given
        point_b: Second point when line is a Point
        epsilon: A line is vertical or horizontal when its x or y
            difference is smaller than this. Defaults to machine epsilon.

    Returns:
        SlopeIntercept tagged REGULAR, VERTICAL or HORIZONTAL. The
        reference point is the line's first point.

    Raises:
        TypeError: If a single Point is given without point_b
    """
    if isinstance(line, Point):
        if point_b is None:
            raise TypeError("to_slope_intercept() needs a Line or two points")
        line = Line(line, point_b)

    a = line.point_a
    if line.is_vertical(epsilon):
        return SlopeIntercept(LineKind.VERTICAL, 0.0, 0.0, a.x, a.y, line)

    if line.is_horizontal(epsilon):
        return SlopeIntercept(LineKind.HORIZONTAL, 0.0, 0.0, a.x, a.y, line)

    m = slope(a, line.point_b, epsilon)

    # y = m*x + b  =>  b = y - m*x
    b = a.y - m * a.x
    return SlopeIntercept(LineKind.REGULAR, m, b, a.x, a.y, line)


def _y_along(line: Line, x: float) -> float:
    """Find y where the raw line reaches x, by proportion of its x span."""
    a, b = line.point_a, line.point_b
    fraction = (x - a.x) / (b.x - a.x)
    return a.y + (b.y - a.y) * fraction


def _x_along(line: Line, y: float) -> float:
    """Find x where the raw line reaches y, by proportion of its y span."""
    a, b = line.point_a, line.point_b
    fraction = (y - a.y) / (b.y - a.y)
    return a.x + (b.x - a.x) * fraction


def _intersect_degenerate(fixed: SlopeIntercept, other: SlopeIntercept) -> Point | None:
    """Intersect a vertical or horizontal line with any other line."""
    if fixed.kind is LineKind.VERTICAL:
        if other.kind is LineKind.VERTICAL:
            return None
        x = fixed.x
        if other.kind is LineKind.HORIZONTAL:
            return Point(x, other.y)
        return Point(x, _y_along(other.line, x))

    if other.kind is LineKind.HORIZONTAL:
        return None
    y = fixed.y
    if other.kind is LineKind.VERTICAL:
        return Point(other.x, y)
    return Point(_x_along(other.line, y), y)


def intersect(line_a: SlopeIntercept, line_b: SlopeIntercept) -> Point | None:
    """Return the intersection of two infinite lines.

    Regular lines are solved algebraically:
    x = (b_B - b_A) / (m_A - m_B), y = m_A * x + b_A.
    When either line is vertical or horizontal its fixed coordinate is
    taken directly and the other coordinate is interpolated along the
    companion line's original endpoints.

    Args:
        line_a: First line in slope-intercept form
        line_b: Second line in slope-intercept form

    Returns:
        The intersection point, or None for parallel or coincident lines

    Examples:
        >>> a = to_slope_intercept(Point(0, 0), Point(2, 2))
        >>> b = to_slope_intercept(Point(0, 2), Point(2, 0))
        >>> intersect(a, b)
        Point(x=1.0, y=1.0)
    """
    if line_a.is_degenerate():
        result = _intersect_degenerate(line_a, line_b)
    elif line_b.is_degenerate():
        result = _intersect_degenerate(line_b, line_a)
    elif line_a.slope == line_b.slope:
        result = None
    else:
        x = (line_b.intercept - line_a.intercept) / (line_a.slope - line_b.slope)
        result = Point(x, line_a.slope * x + line_a.intercept)

    if result is None or not (math.isfinite(result.x) and math.isfinite(result.y)):
        logger.debug(
            "intersect: no solution (%s vs %s)", line_a.kind.name, line_b.kind.name
        )
        return None
    return result


def point_on_segment(line: Line, point: Point, tolerance: float = EPSILON) -> bool:
    """Check whether a point lies on a finite segment, endpoints included.

    Args:
        line: The segment
        point: The point to test
        tolerance: Allowed distance from the segment

    Returns:
        True if the point is within tolerance of the segment
    """
    a, b = line.point_a, line.point_b
    if not (
        min(a.x, b.x) - tolerance <= point.x <= max(a.x, b.x) + tolerance
        and min(a.y, b.y) - tolerance <= point.y <= max(a.y, b.y) + tolerance
    ):
        return False

    length = line.length
    if length <= tolerance:
        return math.hypot(point.x - a.x, point.y - a.y) <= tolerance

    # Perpendicular distance from the infinite line
    cross = (b.x - a.x) * (point.y - a.y) - (b.y - a.y) * (point.x - a.x)
    return abs(cross) / length <= tolerance


def has_intersection(
    slope_line: SlopeIntercept,
    candidate_line: Line,
    *,
    tolerance: float = EPSILON,
) -> bool:
    """Check whether a line meets a finite candidate segment.

    Intersects slope_line with the slope-intercept form of candidate_line,
    classified at machine epsilon, then requires the point to fall within
    the candidate's endpoints.

    Args:
        slope_line: Infinite line in slope-intercept form
        candidate_line: Finite segment to test against
        tolerance: Allowed distance from the candidate segment

    Returns:
        True if the lines intersect within the candidate segment
    """
    point = intersect(slope_line, to_slope_intercept(candidate_line))
    if point is None:
        return False
    return point_on_segment(candidate_line, point, tolerance)
