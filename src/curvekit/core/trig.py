"""Distance, angle and projection primitives.

The resampler treats these as exact: it measures with line_distance,
aims with line_angle and steps with dest_point. Angles are in radians,
measured counter-clockwise from the positive x axis in a y-up frame.
"""

import math

from curvekit.domain import Point


def line_distance(point_a: Point, point_b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(point_b.x - point_a.x, point_b.y - point_a.y)


def line_angle(point_a: Point, point_b: Point) -> float:
    """Angle of the ray from point_a toward point_b.

    Vertical rays resolve to pi/2 when pointing up and 3*pi/2 otherwise,
    including the zero-length case. All other results fall in
    (-pi/2, 3*pi/2).

    Examples:
        >>> line_angle(Point(0, 0), Point(1, 0))
        0.0
        >>> round(line_angle(Point(0, 0), Point(-1, 0)), 6)
        3.141593
    """
    dx = point_b.x - point_a.x
    dy = point_b.y - point_a.y
    if dx == 0.0:
        return math.pi * 0.5 if dy > 0.0 else math.pi * 1.5
    angle = math.atan(dy / dx)
    if dx < 0.0:
        angle += math.pi
    return angle


def dest_point(origin: Point, angle: float, distance: float) -> Point:
    """Project from origin along angle by distance."""
    return Point(
        origin.x + distance * math.cos(angle),
        origin.y + distance * math.sin(angle),
    )

