"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables for point lists and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from curvekit.domain import BoundingBox, Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def format_number(value: float) -> str:
    """Format a coordinate with up to three decimals and no trailing zeros."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_point(point: Point) -> str:
    """Format a point as ``[x, y]``."""
    return f"[{format_number(point.x)}, {format_number(point.y)}]"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]curvekit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_curve_info(control_points: list[Point], count: int) -> None:
    """Print the curve being processed.

    Args:
        control_points: Control points of the curve
        count: Requested segment or sample count
    """
    kinds = {2: "linear", 3: "quadratic", 4: "cubic"}
    line = Text("  ")
    line.append(kinds.get(len(control_points), "invalid"), style="bold")
    line.append(f" {SYM_DOT} ")
    line.append(" ".join(format_point(p) for p in control_points))
    console.print(line)
    console.print(f"  count {count}")


def print_points(points: list[Point], columns: int = 4) -> None:
    """Print a point list, several points per row.

    Args:
        points: Points to print
        columns: Points per row
    """
    if not points:
        console.print("  [yellow]no points[/yellow] (invalid curve or count)")
        return

    table = Table(show_header=False, box=None, padding=(0, 1))
    for _ in range(min(columns, len(points))):
        table.add_column(no_wrap=True)
    for row_start in range(0, len(points), columns):
        row = [format_point(p) for p in points[row_start : row_start + columns]]
        row += [""] * (min(columns, len(points)) - len(row))
        table.add_row(*row)
    console.print(table)
    console.print(f"  {len(points)} points")


def print_bounding_box(box: BoundingBox) -> None:
    """Print a bounding box with its size."""
    if box.is_empty():
        console.print("  [yellow]empty box[/yellow] (invalid curve or sample count)")
        return
    console.print(
        f"  min {format_point(Point(box.min_x, box.min_y))} "
        f"{SYM_DOT} max {format_point(Point(box.max_x, box.max_y))}"
    )
    console.print(f"  width {format_number(box.width)} {SYM_DOT} height {format_number(box.height)}")


def print_intersection(point: Point | None, segment: bool | None = None) -> None:
    """Print an intersection result.

    Args:
        point: Intersection point, or None when the lines do not meet
        segment: When set, whether the point lies on the candidate segment
    """
    if point is None:
        console.print("  [yellow]no intersection[/yellow]")
        return
    console.print(f"  [green]{SYM_OK}[/green] intersection {format_point(point)}")
    if segment is not None:
        status = "on segment" if segment else "outside segment"
        style = "green" if segment else "yellow"
        console.print(f"  [{style}]{status}[/{style}]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
