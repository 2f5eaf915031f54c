"""Configuration settings for Stitchpattern."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from stitchpattern.config.palette import DEFAULT_THREAD_COLOR, ThreadColor


class FillShape(str, Enum):
    """Shape drawn for each occupied stitch cell."""

    CIRCLE = "circle"
    SQUARE = "square"


class ResampleFilter(str, Enum):
    """Smoothing filter used when shrinking the photo to the stitch grid.

    Nearest-neighbour sampling is not offered: aliasing visibly changes
    the silhouette.
    """

    BOX = "box"
    BILINEAR = "bilinear"
    HAMMING = "hamming"
    BICUBIC = "bicubic"
    LANCZOS = "lanczos"


class StyleParameters(BaseModel):
    """The editable inputs of one pattern.

    Instances are immutable and compare by value, so they double as undo
    history snapshots.
    """

    model_config = ConfigDict(frozen=True)

    stitch_count_width: int = Field(
        default=32,
        gt=0,
        description="Number of stitch columns",
    )
    threshold: int = Field(
        default=128,
        ge=0,
        le=255,
        description="Cells darker than this luminance are stitched",
    )
    fill_shape: FillShape = Field(
        default=FillShape.CIRCLE,
        description="Shape drawn for each stitch",
    )
    outline_offset: float = Field(
        default=0.0,
        ge=0.0,
        description="Half the outline stroke width (0 disables the outline)",
    )
    color: ThreadColor = Field(
        default=DEFAULT_THREAD_COLOR,
        description="Thread colour used for stitches and outline",
    )

    def with_changes(self, **changes: Any) -> "StyleParameters":
        """Return a validated copy with some fields replaced.

        Args:
            **changes: Field values to replace

        Returns:
            New StyleParameters instance

        Raises:
            pydantic.ValidationError: If a replaced value is invalid
        """
        data = self.model_dump()
        data.update(changes)
        return StyleParameters.model_validate(data)


class RenderConfig(BaseModel):
    """Configuration for raster and vector output."""

    svg_base_unit: float = Field(
        default=10.0,
        gt=0.0,
        description="Document units per stitch cell in SVG output",
    )
    miter_limit: float = Field(
        default=4.0,
        ge=1.0,
        description="Miter limit for outline corners",
    )
    resample: ResampleFilter = Field(
        default=ResampleFilter.LANCZOS,
        description="Filter used to shrink the photo to the stitch grid",
    )
    preview_width: int = Field(
        default=800,
        ge=1,
        description="Width in pixels of the PNG preview",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class StitchPatternSettings(BaseModel):
    """Main application settings."""

    style: StyleParameters = Field(default_factory=StyleParameters)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> StitchPatternSettings:
    """Get default application settings."""
    return StitchPatternSettings()
