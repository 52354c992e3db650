"""Utility functions for curvekit.

This module provides:

- Logging setup and configuration
- Per-command run statistics
"""

from curvekit.utils.logging import (
    KernelLogger,
    RunStats,
    configure_logging,
)

__all__ = [
    "KernelLogger",
    "RunStats",
    "configure_logging",
]
