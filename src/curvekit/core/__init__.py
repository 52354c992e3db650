"""Geometry kernel for curvekit.

This module contains the numerical algorithms:

- Numeric helpers (epsilon, clamping, range conversion, sign helpers, lerp)
- Distance, angle and projection primitives
- Bezier evaluation, equidistant resampling and bounding boxes
- Slope-intercept conversion and line intersection

All functions are:
- Stateless (safe to call from any thread)
- Pure (inputs are never modified, outputs are always new values)
- Fail-soft (invalid input yields an empty list, the zero box or None)

Key functions:
- evaluate: Point at t on a 2, 3 or 4 point Bezier curve
- resample_equidistant: Arc-length equidistant points along a curve
- bounding_box: Extent of a curve from uniform sampling
- to_slope_intercept: Convert a two-point line to y = m*x + b form
- intersect: Intersection of two lines in slope-intercept form
- has_intersection: Line versus finite segment test
"""

from curvekit.core.bezier import (
    bounding_box,
    evaluate,
    evaluate_cubic,
    evaluate_linear,
    evaluate_quadratic,
    linear_bounding_box,
    plot_points,
    resample_equidistant,
    resample_linear,
)
from curvekit.core.lines import (
    has_intersection,
    intersect,
    point_on_segment,
    slope,
    to_slope_intercept,
)
from curvekit.core.numeric import (
    EPSILON,
    MACHINE_EPSILON,
    clamp,
    convert_range,
    copy_sign,
    lerp,
    lerp3,
    lerp_point,
    reverse_source_polarity,
    sign_equal,
    sign_not_equal,
    source_polarity,
)
from curvekit.core.trig import dest_point, line_angle, line_distance

__all__ = [
    # Numeric helpers
    "EPSILON",
    "MACHINE_EPSILON",
    "clamp",
    "convert_range",
    "copy_sign",
    "lerp",
    "lerp3",
    "lerp_point",
    "reverse_source_polarity",
    "sign_equal",
    "sign_not_equal",
    "source_polarity",
    # Trigonometry
    "dest_point",
    "line_angle",
    "line_distance",
    # Curves
    "bounding_box",
    "evaluate",
    "evaluate_cubic",
    "evaluate_linear",
    "evaluate_quadratic",
    "linear_bounding_box",
    "plot_points",
    "resample_equidistant",
    "resample_linear",
    # Lines
    "has_intersection",
    "intersect",
    "point_on_segment",
    "slope",
    "to_slope_intercept",
]
