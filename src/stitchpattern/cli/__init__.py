"""Command-line interface for stitchpattern.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Pattern generation to SVG and PNG
- Dry-run mode showing grid statistics
- Thread palette listing
- Verbose/quiet output modes
"""

from stitchpattern.cli.app import cli, main

__all__ = ["cli", "main"]
