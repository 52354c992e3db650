"""Domain models for curvekit.

This module contains the plain value types the geometry kernel reads and
writes. All models are:

- Immutable (frozen dataclasses), so kernel calls never alter caller data
- Hashable and cheap to compare
- Free of any algorithmic behaviour beyond simple accessors

Key classes:
- Point: A 2D coordinate pair
- BoundingBox: Axis-aligned extent of a sampled curve
- CurveKind: Linear, quadratic or cubic Bezier degree
- Line: A two-point straight segment
- SlopeIntercept: Derived y = m*x + b form with its source line
"""

from curvekit.domain.line import Line, LineKind, SlopeIntercept
from curvekit.domain.point import EMPTY_BOX, ORIGIN, BoundingBox, CurveKind, Point

__all__: list[str] = [
    # Enums
    "CurveKind",
    "LineKind",
    # Core types
    "Point",
    "BoundingBox",
    "Line",
    "SlopeIntercept",
    # Constants
    "ORIGIN",
    "EMPTY_BOX",
]
