"""Logging utilities for curvekit."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path

import structlog

_HANDLER_NAME = "curvekit"


@dataclass
class RunStats:
    """Statistics from one command run."""

    curves_processed: int = 0
    points_emitted: int = 0
    empty_results: int = 0
    intersections_found: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("curvekit")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class KernelLogger:
    """Logger for tracking kernel calls made by a command and their outcome."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RunStats()

    def start(self, command: str) -> None:
        """Log start of a command."""
        self._stats.start_time = time.perf_counter()
        self._logger.debug("Command started", command=command)

    def finish(self, command: str) -> None:
        """Log end of a command."""
        self._stats.end_time = time.perf_counter()
        self._logger.info(
            "Command finished",
            command=command,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
            curves=self._stats.curves_processed,
            points=self._stats.points_emitted,
            empty=self._stats.empty_results,
        )

    def log_curve(self, operation: str, control_points: int, points_emitted: int) -> None:
        """Log a curve operation and count its output."""
        self._stats.curves_processed += 1
        self._stats.points_emitted += points_emitted
        if points_emitted == 0:
            self._stats.empty_results += 1
            self._logger.warning(
                "Curve operation produced no points",
                operation=operation,
                control_points=control_points,
            )
        else:
            self._logger.debug(
                "Curve operation complete",
                operation=operation,
                control_points=control_points,
                points=points_emitted,
            )

    def log_intersection(self, kind_a: str, kind_b: str, found: bool) -> None:
        """Log a line intersection attempt."""
        if found:
            self._stats.intersections_found += 1
        else:
            self._stats.empty_results += 1
        self._logger.debug("Line intersection", line_a=kind_a, line_b=kind_b, found=found)

    @property
    def stats(self) -> RunStats:
        """Get current run statistics."""
        return self._stats
