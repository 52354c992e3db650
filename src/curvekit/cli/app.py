"""CLI application entry point for curvekit.

This module provides the main CLI interface using Typer.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from curvekit import __version__
from curvekit.cli.output import (
    console,
    print_bounding_box,
    print_curve_info,
    print_error,
    print_header,
    print_intersection,
    print_points,
    print_step,
)
from curvekit.config import CurvekitSettings, LoggingConfig, SamplingConfig
from curvekit.core import (
    bounding_box,
    has_intersection,
    intersect,
    plot_points,
    resample_equidistant,
    to_slope_intercept,
)
from curvekit.domain import CurveKind, Line, LineKind, Point, SlopeIntercept
from curvekit.exceptions import CurveArityError, CurvekitError, LineArityError
from curvekit.utils import KernelLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="curvekit",
    help="Evaluate, resample and bound Bezier curves, and intersect lines.",
    add_completion=False,
    no_args_is_help=True,
)

PointsArgument = Annotated[
    list[str],
    typer.Argument(
        help="Control points as x,y: start, up to two control points, end",
        show_default=False,
    ),
]


@dataclass
class CliState:
    """Per-invocation state shared between the callback and commands."""

    settings: CurvekitSettings
    kernel_logger: KernelLogger
    quiet: bool


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]curvekit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print results only, without headers",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Evaluate, resample and bound Bezier curves, and intersect lines."""
    settings = CurvekitSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = CliState(settings=settings, kernel_logger=KernelLogger(logger), quiet=quiet)


def _parse_points(values: list[str]) -> list[Point]:
    """Parse x,y strings into points."""
    return [Point.parse(value) for value in values]


def _parse_curve(values: list[str]) -> list[Point]:
    """Parse a curve's control points, checking there are 2 to 4 of them."""
    points = _parse_points(values)
    if CurveKind.from_count(len(points)) is None:
        raise CurveArityError(len(points))
    return points


def _run(ctx: typer.Context, command: str, body: Callable[[CliState], None]) -> None:
    """Run a command body with shared logging and error handling."""
    state: CliState = ctx.obj
    if not state.quiet:
        print_header(__version__)
    state.kernel_logger.start(command)
    try:
        body(state)
    except CurvekitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    finally:
        state.kernel_logger.finish(command)


@app.command()
def plot(
    ctx: typer.Context,
    points: PointsArgument,
    count: Annotated[
        int | None,
        typer.Option("--count", "-c", help="Number of uniform parameter steps", min=1),
    ] = None,
) -> None:
    """Plot points at uniform parameter steps t = i / count along a curve."""

    def body(state: CliState) -> None:
        control_points = _parse_curve(points)
        steps = count if count is not None else state.settings.sampling.plot_count
        if not state.quiet:
            print_step("Plotting curve points")
            print_curve_info(control_points, steps)
        result = plot_points(control_points, steps)
        state.kernel_logger.log_curve("plot", len(control_points), len(result))
        print_points(result)

    _run(ctx, "plot", body)


@app.command()
def equidistant(
    ctx: typer.Context,
    points: PointsArgument,
    count: Annotated[
        int,
        typer.Option("--count", "-c", help="Number of equal-length segments (at least 4)"),
    ] = 10,
    multiplier: Annotated[
        int | None,
        typer.Option(
            "--multiplier",
            "-m",
            help="Oversampling multiplier (at least 2, default 10)",
            min=2,
        ),
    ] = None,
) -> None:
    """Resample a curve into points spaced at equal distances."""

    def body(state: CliState) -> None:
        control_points = _parse_curve(points)
        sampling = state.settings.sampling
        if multiplier is not None:
            sampling = SamplingConfig(
                equidistant_sample_multiplier=multiplier,
                bounding_box_samples=sampling.bounding_box_samples,
                plot_count=sampling.plot_count,
            )
        if not state.quiet:
            print_step("Resampling curve at equal distances")
            print_curve_info(control_points, count)
        result = resample_equidistant(
            control_points,
            count,
            sample_multiplier=sampling.equidistant_sample_multiplier,
        )
        state.kernel_logger.log_curve("equidistant", len(control_points), len(result))
        print_points(result)

    _run(ctx, "equidistant", body)


@app.command()
def bbox(
    ctx: typer.Context,
    points: PointsArgument,
    samples: Annotated[
        int | None,
        typer.Option("--samples", "-s", help="Number of uniform parameter steps (at least 4)"),
    ] = None,
) -> None:
    """Compute the bounding box of a curve from uniform sampling."""

    def body(state: CliState) -> None:
        control_points = _parse_curve(points)
        steps = samples if samples is not None else state.settings.sampling.bounding_box_samples
        if not state.quiet:
            print_step("Computing bounding box")
            print_curve_info(control_points, steps)
        box = bounding_box(control_points, steps)
        state.kernel_logger.log_curve("bbox", len(control_points), 0 if box.is_empty() else 2)
        print_bounding_box(box)

    _run(ctx, "bbox", body)


@app.command("intersect")
def intersect_command(
    ctx: typer.Context,
    points: Annotated[
        list[str],
        typer.Argument(
            help="Four points as x,y: two for line A, two for line B",
            show_default=False,
        ),
    ],
    segment: Annotated[
        bool,
        typer.Option(
            "--segment",
            help="Also check that the point lies on line B's finite segment",
        ),
    ] = False,
) -> None:
    """Intersect two lines given by two points each."""

    def body(state: CliState) -> None:
        parsed = _parse_points(points)
        if len(parsed) != 4:
            raise LineArityError(len(parsed))
        line_b = Line(parsed[2], parsed[3])
        slope_a = to_slope_intercept(Line(parsed[0], parsed[1]))
        slope_b = to_slope_intercept(line_b)
        if not state.quiet:
            print_step("Intersecting lines")
            console.print(f"  A {slope_a.kind.name.lower()} {_describe(slope_a)}")
            console.print(f"  B {slope_b.kind.name.lower()} {_describe(slope_b)}")
        point = intersect(slope_a, slope_b)
        state.kernel_logger.log_intersection(
            slope_a.kind.name, slope_b.kind.name, point is not None
        )
        tolerance = state.settings.numeric.epsilon
        on_segment = (
            has_intersection(slope_a, line_b, tolerance=tolerance) if segment else None
        )
        print_intersection(point, on_segment)

    _run(ctx, "intersect", body)


def _describe(line: SlopeIntercept) -> str:
    """Describe a slope-intercept line for display."""
    if line.kind is LineKind.VERTICAL:
        return f"x = {line.x:g}"
    if line.kind is LineKind.HORIZONTAL:
        return f"y = {line.y:g}"
    return f"y = {line.slope:g}x + {line.intercept:g}"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
