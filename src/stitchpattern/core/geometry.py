"""Render geometry shared by the PNG and SVG backends.

Both backends draw exactly the primitives computed here, differing only in
how a primitive is emitted. All coordinates are in output units (pixels
for rasters, document units for SVG).
"""

import math
from dataclasses import dataclass

from stitchpattern.config import FillShape, ThreadColor
from stitchpattern.domain import StitchPattern


@dataclass(frozen=True)
class FillPrimitive:
    """One stitch marker.

    Attributes:
        shape: Circle or square
        center_x: Horizontal center of the cell
        center_y: Vertical center of the cell
        size: Radius for circles, side length for squares
    """

    shape: FillShape
    center_x: float
    center_y: float
    size: float

    def bounds(self) -> tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y) of the marker."""
        half = self.size if self.shape is FillShape.CIRCLE else self.size / 2
        return (
            self.center_x - half,
            self.center_y - half,
            self.center_x + half,
            self.center_y + half,
        )


@dataclass(frozen=True)
class StrokePrimitive:
    """One closed outline.

    Attributes:
        points: Vertices in output units; the last joins back to the first
        width: Stroke width
    """

    points: tuple[tuple[float, float], ...]
    width: float


@dataclass(frozen=True)
class RenderGeometry:
    """Everything a backend needs to draw a pattern.

    Strokes are drawn before fills so the outline sits beneath the
    stitches.
    """

    width: float
    height: float
    cell_width: float
    cell_height: float
    color: ThreadColor
    miter_limit: float
    strokes: tuple[StrokePrimitive, ...]
    fills: tuple[FillPrimitive, ...]


def fill_size(shape: FillShape, cell_width: float, cell_height: float) -> float:
    """Size of a stitch marker for a cell.

    Circles get a radius of a third of the smaller cell side, squares a
    side of two thirds of it.
    """
    cell = min(cell_width, cell_height)
    if shape is FillShape.CIRCLE:
        return cell / 3.0
    return cell * 2 / 3.0


def compute_geometry(
    pattern: StitchPattern,
    cell_width: float,
    cell_height: float,
    miter_limit: float = 4.0,
) -> RenderGeometry:
    """Lay out a pattern at a given cell size.

    Args:
        pattern: Generated pattern
        cell_width: Output units per stitch column
        cell_height: Output units per stitch row
        miter_limit: Miter limit carried through to the backends

    Returns:
        Stroke and fill primitives in drawing order
    """
    style = pattern.style

    strokes: tuple[StrokePrimitive, ...] = ()
    if style.outline_offset > 0:
        strokes = tuple(
            StrokePrimitive(
                points=tuple(path.scaled(cell_width, cell_height)),
                width=style.outline_offset * 2,
            )
            for path in pattern.contours
        )

    size = fill_size(style.fill_shape, cell_width, cell_height)
    fills = tuple(
        FillPrimitive(
            shape=style.fill_shape,
            center_x=x * cell_width + cell_width / 2,
            center_y=y * cell_height + cell_height / 2,
            size=size,
        )
        for x, y in pattern.grid.true_cells()
    )

    return RenderGeometry(
        width=pattern.width * cell_width,
        height=pattern.height * cell_height,
        cell_width=cell_width,
        cell_height=cell_height,
        color=style.color,
        miter_limit=miter_limit,
        strokes=strokes,
        fills=fills,
    )


def perpendicular_direction(
    p1: tuple[float, float], p2: tuple[float, float]
) -> tuple[float, float]:
    """Calculate the unit perpendicular of the line from p1 to p2.

    The perpendicular is rotated 90 degrees counter-clockwise from the
    direction vector (p2 - p1).

    Raises:
        ValueError: If p1 and p2 are the same point
    """
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    length = math.hypot(dx, dy)
    if length < 1e-10:
        raise ValueError("Cannot calculate perpendicular of zero-length line")
    return (-dy / length, dx / length)


def line_intersection(
    p1: tuple[float, float],
    p2: tuple[float, float],
    p3: tuple[float, float],
    p4: tuple[float, float],
) -> tuple[float, float] | None:
    """Find where the line through p1, p2 meets the line through p3, p4.

    Lines are unbounded, so the result may lie outside both segments.

    Returns:
        Intersection point, or None if the lines are parallel
    """
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    x4, y4 = p4

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < 1e-10:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    return (x1 + t * (x2 - x1), y1 + t * (y2 - y1))


def _offset(
    point: tuple[float, float], normal: tuple[float, float], distance: float
) -> tuple[float, float]:
    return (point[0] + normal[0] * distance, point[1] + normal[1] * distance)


def stroke_outline(
    points: tuple[tuple[float, float], ...],
    width: float,
    miter_limit: float,
) -> list[list[tuple[float, float]]]:
    """Expand a closed polyline into the polygons covered by its stroke.

    Each segment becomes a quad of the stroke width. Each corner gets a
    miter wedge, or a bevel triangle where the miter ratio exceeds the
    limit, matching ``stroke-linejoin="miter"`` in SVG.

    Args:
        points: Closed polyline vertices
        width: Stroke width
        miter_limit: Maximum miter length to stroke width ratio

    Returns:
        Polygons whose union is the stroked outline
    """
    half = width / 2
    n = len(points)
    polygons: list[list[tuple[float, float]]] = []
    if n < 2 or half <= 0:
        return polygons

    for i in range(n):
        a, b = points[i], points[(i + 1) % n]
        try:
            normal = perpendicular_direction(a, b)
        except ValueError:
            continue
        flipped = (-normal[0], -normal[1])
        polygons.append(
            [_offset(a, normal, half), _offset(b, normal, half),
             _offset(b, flipped, half), _offset(a, flipped, half)]
        )

    if n < 3:
        return polygons

    for i in range(n):
        prev, corner, nxt = points[i - 1], points[i], points[(i + 1) % n]
        try:
            n1 = perpendicular_direction(prev, corner)
            n2 = perpendicular_direction(corner, nxt)
        except ValueError:
            continue
        # n1 x n2 has the same sign as the turn of the two segments
        cross = n1[0] * n2[1] - n1[1] * n2[0]
        if abs(cross) < 1e-12:
            continue

        # The gap to fill opens on the side away from the turn
        side = -half if cross > 0 else half
        outer1 = _offset(corner, n1, side)
        outer2 = _offset(corner, n2, side)
        miter = line_intersection(_offset(prev, n1, side), outer1, outer2, _offset(nxt, n2, side))

        if miter is not None and math.dist(corner, miter) / half <= miter_limit:
            polygons.append([corner, outer1, miter, outer2])
        else:
            polygons.append([corner, outer1, outer2])

    return polygons
