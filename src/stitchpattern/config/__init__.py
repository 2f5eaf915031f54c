"""Configuration management for stitchpattern.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- StyleParameters: The editable inputs of one pattern
- ThreadColor: A palette entry applied to fills and outlines
- RenderConfig: Output rendering settings
- LoggingConfig: Logging settings
- StitchPatternSettings: Main application settings
"""

from stitchpattern.config.palette import (
    DEFAULT_THREAD_COLOR,
    THREAD_PALETTE,
    ThreadColor,
    find_thread_color,
    resolve_thread_color,
)
from stitchpattern.config.settings import (
    FillShape,
    LoggingConfig,
    RenderConfig,
    ResampleFilter,
    StitchPatternSettings,
    StyleParameters,
    get_default_settings,
)

__all__ = [
    "DEFAULT_THREAD_COLOR",
    "THREAD_PALETTE",
    "FillShape",
    "LoggingConfig",
    "RenderConfig",
    "ResampleFilter",
    "StitchPatternSettings",
    "StyleParameters",
    "ThreadColor",
    "find_thread_color",
    "get_default_settings",
    "resolve_thread_color",
]
