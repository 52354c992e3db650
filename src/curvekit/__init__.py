"""curvekit - 2D curve and line geometry kernel.

curvekit evaluates points on linear, quadratic and cubic Bezier curves,
resamples curves into arc-length equidistant polylines, extracts curve
bounding boxes and intersects lines in slope-intercept form, including
the vertical and horizontal degenerate cases.

Example:
    $ curvekit equidistant 0,0 2,4 4,0 --count 8

This prints nine points spaced evenly along the quadratic curve.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
