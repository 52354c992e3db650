"""Exception hierarchy for curvekit.

The geometry kernel itself is fail-soft and never raises for expected bad
input. These exceptions belong to the outer surfaces: point parsing,
curve assembly from user input and the command line.
"""


class CurvekitError(Exception):
    """Base exception for all curvekit errors."""

    pass


class InputError(CurvekitError):
    """Errors related to user-supplied geometry."""

    pass


class PointParseError(InputError):
    """Text could not be read as a 2D point."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse point '{text}': {reason}")


class CurveArityError(InputError):
    """Wrong number of control points for a Bezier curve."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Expected 2-4 control points for a curve, got {count}")


class LineArityError(InputError):
    """Wrong number of points to describe two lines."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Expected 4 points (two lines), got {count}")
