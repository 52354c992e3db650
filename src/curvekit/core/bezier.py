"""Bezier curve evaluation, resampling and extent calculation.

This module provides:
- Point evaluation on linear, quadratic and cubic Bezier curves by
  repeated linear interpolation (De Casteljau's algorithm)
- Uniform parameter plotting
- Arc-length equidistant resampling
- Bounding boxes from dense curve sampling

Curves are given as a sequence of 2, 3 or 4 control points: start,
optional control points, end. Every function is fail-soft: a missing
control point or an out-of-range count produces the zero point, an empty
list or the zero box, never an exception.
"""

import logging
from collections.abc import Callable, Sequence

from curvekit.config import SamplingConfig
from curvekit.core.numeric import lerp_point
from curvekit.core.trig import dest_point, line_angle, line_distance
from curvekit.domain import EMPTY_BOX, ORIGIN, BoundingBox, CurveKind, Point

logger = logging.getLogger(__name__)

MIN_SAMPLE_MULTIPLIER = 2
DEFAULT_SAMPLE_MULTIPLIER = SamplingConfig().equidistant_sample_multiplier
MIN_COUNT = 4

ControlPoints = Sequence[Point | None]


def evaluate_linear(p0: Point | None, p1: Point | None, t: float) -> Point:
    """Return the point at t on a straight line from p0 to p1.

    Args:
        p0: Starting point
        p1: Ending point
        t: Progress; 0 is p0, 1 is p1, other values extrapolate

    Returns:
        Point on the line, or the origin if a point is missing
    """
    if p0 is None or p1 is None:
        return ORIGIN
    return lerp_point(p0, p1, t)


def evaluate_quadratic(
    p0: Point | None, p1: Point | None, p2: Point | None, t: float
) -> Point:
    """Return the point at t on a quadratic Bezier curve.

    Args:
        p0: Starting point
        p1: Control point
        p2: Ending point
        t: Progress along the curve

    Returns:
        Point on the curve, or the origin if a point is missing
    """
    if p0 is None or p1 is None or p2 is None:
        return ORIGIN
    return lerp_point(lerp_point(p0, p1, t), lerp_point(p1, p2, t), t)


def evaluate_cubic(
    p0: Point | None,
    p1: Point | None,
    p2: Point | None,
    p3: Point | None,
    t: float,
) -> Point:
    """Return the point at t on a cubic Bezier curve.

    Reduces to two quadratic evaluations over the overlapping control
    triples and interpolates between them.

    Args:
        p0: Starting point
        p1: First control point
        p2: Second control point
        p3: Ending point
        t: Progress along the curve

    Returns:
        Point on the curve, or the origin if a point is missing
    """
    if p0 is None or p1 is None or p2 is None or p3 is None:
        return ORIGIN
    return lerp_point(
        evaluate_quadratic(p0, p1, p2, t),
        evaluate_quadratic(p1, p2, p3, t),
        t,
    )


def _curve_function(points: ControlPoints | None) -> Callable[[float], Point] | None:
    """Bind control points to their evaluator, or None if the curve is invalid."""
    if points is None:
        return None
    kind = CurveKind.from_count(len(points))
    if kind is None or any(p is None for p in points):
        return None
    if kind is CurveKind.LINEAR:
        p0, p1 = points
        return lambda t: evaluate_linear(p0, p1, t)
    if kind is CurveKind.QUADRATIC:
        p0, p1, p2 = points
        return lambda t: evaluate_quadratic(p0, p1, p2, t)
    p0, p1, p2, p3 = points
    return lambda t: evaluate_cubic(p0, p1, p2, p3, t)


def evaluate(points: ControlPoints, t: float) -> Point:
    """Return the point at t on the curve described by 2, 3 or 4 control points.

    Examples:
        >>> evaluate([Point(0, 0), Point(2, 4), Point(4, 0)], 0.5)
        Point(x=2.0, y=2.0)
    """
    curve = _curve_function(points)
    if curve is None:
        return ORIGIN
    return curve(t)


def plot_points(points: ControlPoints, count: int) -> list[Point]:
    """Sample a curve at count + 1 uniform parameter steps.

    Args:
        points: 2, 3 or 4 control points
        count: Number of parameter intervals

    Returns:
        Points at t = i / count for i in 0..count, or an empty list if the
        curve is invalid or count is not positive
    """
    curve = _curve_function(points)
    if curve is None or count <= 0:
        logger.debug("plot_points: invalid input (points=%d, count=%d)", len(points or ()), count)
        return []
    return [curve(index / count) for index in range(count + 1)]


def resample_linear(p0: Point | None, p1: Point | None, count: int) -> list[Point]:
    """Return count + 1 equidistant points along a straight line.

    A straight line is its own arc-length parameterisation, so this is a
    plain uniform interpolation.
    """
    if p0 is None or p1 is None or count < MIN_COUNT:
        return []
    result = [lerp_point(p0, p1, index / count) for index in range(count)]
    result.append(p1)
    return result


def resample_equidistant(
    points: ControlPoints,
    count: int,
    *,
    sample_multiplier: int | None = None,
) -> list[Point]:
    """Return count + 1 points spaced at equal distances along a curve.

    The curve is oversampled at ``count * sample_multiplier`` uniform
    parameter steps to estimate its length. The dense samples are then
    walked from the start: whenever a sample lies at least one segment
    length from the current reference point, a new point is emitted
    exactly one segment length along the direction toward that sample,
    and becomes the new reference. The end control point is always the
    last element, so the final segment absorbs any residual error.

    This is an approximation. Precision improves with the multiplier.

    Args:
        points: 2, 3 or 4 control points
        count: Number of segments; must be greater than 3
        sample_multiplier: Oversampling factor, at least 2. Defaults to
            the SamplingConfig equidistant_sample_multiplier default.

    Returns:
        List of count + 1 points starting at the first control point and
        ending at the last one, or an empty list for invalid input

    Raises:
        ValueError: If sample_multiplier is below 2
    """
    if sample_multiplier is None:
        sample_multiplier = DEFAULT_SAMPLE_MULTIPLIER
    if sample_multiplier < MIN_SAMPLE_MULTIPLIER:
        raise ValueError(
            f"sample_multiplier must be at least {MIN_SAMPLE_MULTIPLIER}, got {sample_multiplier}"
        )

    curve = _curve_function(points)
    if curve is None or count < MIN_COUNT:
        logger.debug(
            "resample_equidistant: invalid input (points=%d, count=%d)", len(points or ()), count
        )
        return []

    start = points[0]
    end = points[-1]

    # Coincident control points describe a single point
    if all(p == start for p in points):
        return [start] * (count + 1)

    # Dense sampling and total length
    dense_count = count * sample_multiplier
    samples = [curve(index / dense_count) for index in range(dense_count + 1)]
    length_total = 0.0
    for previous, current in zip(samples, samples[1:]):
        length_total += line_distance(previous, current)
    length_segment = length_total / count

    # Walk the interior samples; the end point closes the chain
    result = [start]
    reference = start
    for sample in samples[1:-1]:
        if len(result) == count:
            break
        if line_distance(reference, sample) >= length_segment:
            angle = line_angle(reference, sample)
            reference = dest_point(reference, angle, length_segment)
            result.append(reference)

    missing = count - len(result)
    if missing > 0:
        logger.debug(
            "resample_equidistant: walk ended %d point(s) short, filling toward end", missing
        )
        for index in range(1, missing + 1):
            result.append(lerp_point(reference, end, index / (missing + 1)))

    result.append(end)
    return result


def linear_bounding_box(p0: Point | None, p1: Point | None) -> BoundingBox:
    """Return the box spanning the two endpoints of a straight line."""
    if p0 is None or p1 is None:
        return EMPTY_BOX
    return BoundingBox.from_points([p0, p1])


def bounding_box(points: ControlPoints, sample_count: int) -> BoundingBox:
    """Return the bounding box of a curve from uniform parameter sampling.

    The curve is evaluated at t = i / sample_count for i in 0..sample_count.
    A linear curve needs no sampling and spans its endpoints directly.

    Args:
        points: 2, 3 or 4 control points
        sample_count: Number of parameter steps; must be greater than 3

    Returns:
        Bounding box of the samples, or the zero box for invalid input
    """
    curve = _curve_function(points)
    if curve is None or sample_count < MIN_COUNT:
        logger.debug(
            "bounding_box: invalid input (points=%d, sample_count=%d)",
            len(points or ()),
            sample_count,
        )
        return EMPTY_BOX
    if len(points) == CurveKind.LINEAR.value:
        return linear_bounding_box(points[0], points[1])
    return BoundingBox.from_points(curve(index / sample_count) for index in range(sample_count + 1))
