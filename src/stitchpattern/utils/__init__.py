"""Utility functions for stitchpattern.

This module provides utility functions including:

- Logging setup and configuration
- Pipeline statistics tracking
"""

from stitchpattern.utils.logging import (
    PatternLogger,
    PipelineStats,
    configure_logging,
)

__all__ = [
    "PatternLogger",
    "PipelineStats",
    "configure_logging",
]
