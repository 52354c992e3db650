"""Command-line interface for curvekit.

This module provides the CLI using Typer with rich output for
readable point lists and results.

Key features:
- Uniform and equidistant curve plotting
- Curve bounding boxes
- Line intersection with optional segment check
- Quiet mode and file logging
"""

from curvekit.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
