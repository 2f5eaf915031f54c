"""Generated pattern bundle."""

from dataclasses import dataclass
from typing import Any

from stitchpattern.config import FillShape, StyleParameters, resolve_thread_color
from stitchpattern.domain.contour import ContourPath
from stitchpattern.domain.grid import BackgroundMask, OccupancyGrid


@dataclass(frozen=True)
class StitchPattern:
    """Everything one pipeline run produces.

    Attributes:
        grid: Stitch occupancy
        background: Exterior cells of the grid
        contours: Simplified outlines around the silhouette
        style: Parameters the pattern was generated with
    """

    grid: OccupancyGrid
    background: BackgroundMask
    contours: tuple[ContourPath, ...]
    style: StyleParameters

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def stitch_count(self) -> int:
        """Number of stitches in the pattern."""
        return self.grid.count()

    def to_record(self) -> dict[str, Any]:
        """Serialize the editable state for a saved-pattern store.

        The keys match the records kept by the pattern library, so a stored
        pattern can be reopened with :meth:`style_from_record`.

        Returns:
            Dictionary with gridSize, threshold, fillShape, outlineOffset
            and selectedColor fields
        """
        style = self.style
        return {
            "gridSize": style.stitch_count_width,
            "threshold": style.threshold,
            "fillShape": style.fill_shape.value,
            "outlineOffset": style.outline_offset,
            "selectedColor": {
                "name": style.color.label,
                "dmc": f"#{style.color.code}",
                "hex": style.color.hex_value,
            },
        }

    @staticmethod
    def style_from_record(data: dict[str, Any]) -> StyleParameters:
        """Rebuild style parameters from a saved-pattern record.

        Colours are matched against the palette by catalogue code; unknown
        or missing colours restore as black.

        Args:
            data: Dictionary produced by :meth:`to_record`

        Returns:
            Validated StyleParameters
        """
        color = data.get("selectedColor") or {}
        return StyleParameters(
            stitch_count_width=data["gridSize"],
            threshold=data["threshold"],
            fill_shape=FillShape(data["fillShape"]),
            outline_offset=data["outlineOffset"],
            color=resolve_thread_color(color.get("dmc")),
        )
