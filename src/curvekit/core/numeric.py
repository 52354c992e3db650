"""Numeric helpers shared by the geometry kernel.

Provides the tolerance constants, clamping, range conversion, sign
comparison and polarity helpers, and the linear interpolation primitive
that the curve evaluator is built on.

All functions are pure and stateless.
"""

import math
import sys

from curvekit.domain import ORIGIN, Point

EPSILON = 1e-6
MACHINE_EPSILON = sys.float_info.epsilon
HALF_PI = math.pi * 0.5
TWO_PI = math.pi * 2.0


def clamp(value: float, minimum: float = 0.0, maximum: float = 1.0) -> float:
    """Clamp value to the inclusive range [minimum, maximum].

    Examples:
        >>> clamp(1.5)
        1.0
        >>> clamp(-3.0, -2.0, 2.0)
        -2.0
    """
    return max(minimum, min(value, maximum))


def convert_range(
    source_start: float,
    source_end: float,
    target_start: float,
    target_end: float,
    value: float,
) -> float:
    """Map value from the source range onto the target range.

    The mapping is linear and not clamped, so values outside the source
    range extrapolate. A zero-width source range maps everything onto
    target_start.

    Examples:
        >>> convert_range(0.0, 1.0, 10.0, 20.0, 0.25)
        12.5
    """
    source_span = source_end - source_start
    if source_span == 0.0:
        return target_start
    return (value - source_start) * (target_end - target_start) / source_span + target_start


def copy_sign(magnitude: float, sign: float) -> float:
    """Return |magnitude| carrying the sign of sign. Zero counts as positive."""
    return abs(magnitude) * (1.0 if sign >= 0.0 else -1.0)


def sign_equal(value_a: float, value_b: float) -> bool:
    """True when both values are non-negative or both are negative."""
    return (value_a >= 0.0 and value_b >= 0.0) or (value_a < 0.0 and value_b < 0.0)


def sign_not_equal(value_a: float, value_b: float) -> bool:
    """True when one value is strictly positive and the other strictly negative."""
    return (value_a > 0.0 and value_b < 0.0) or (value_a < 0.0 and value_b > 0.0)


def source_polarity(source: float, target: float) -> float:
    """Return target with the polarity of source.

    A positive source makes the result non-negative; a zero or negative
    source makes it non-positive.
    """
    if source > 0.0:
        return -target if target < 0.0 else target
    return -target if target > 0.0 else target


def reverse_source_polarity(source: float, target: float) -> float:
    """Return target with the polarity opposite to source.

    A positive source makes the result non-positive; a zero or negative
    source makes it non-negative.
    """
    if source > 0.0:
        return -target if target > 0.0 else target
    return -target if target < 0.0 else target


def lerp(start: float, end: float, progress: float) -> float:
    """Linearly interpolate between two scalars.

    progress is not restricted to [0, 1]; values outside extrapolate.
    """
    return start * (1.0 - progress) + end * progress


def lerp_point(start: Point | None, end: Point | None, progress: float) -> Point:
    """Linearly interpolate between two points, component by component.

    Returns the origin if either point is missing.
    """
    if start is None or end is None:
        return ORIGIN
    return Point(lerp(start.x, end.x, progress), lerp(start.y, end.y, progress))


def lerp3(
    start: tuple[float, float, float],
    end: tuple[float, float, float],
    progress: float,
) -> tuple[float, float, float]:
    """Linearly interpolate between two (x, y, z) triples."""
    return (
        lerp(start[0], end[0], progress),
        lerp(start[1], end[1], progress),
        lerp(start[2], end[2], progress),
    )
