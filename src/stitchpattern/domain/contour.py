"""Lattice types for traced outlines.

Outlines run along the sides of stitch cells, so every vertex lies on an
integer cell corner: for a grid of ``width x height`` cells the valid
points satisfy ``0 <= x <= width`` and ``0 <= y <= height``.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, order=True)
class GridPoint:
    """A cell corner on the stitch lattice.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: Column of the corner
        y: Row of the corner
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Edge:
    """One unit side of a stitch cell.

    Edges are unordered; the endpoints are stored in sorted order so that
    two edges with swapped endpoints compare equal.
    """

    start: GridPoint
    end: GridPoint

    def __post_init__(self) -> None:
        dx = abs(self.start.x - self.end.x)
        dy = abs(self.start.y - self.end.y)
        if dx + dy != 1:
            raise ValueError(f"Edge endpoints must be one unit apart: {self.start}, {self.end}")
        if self.end < self.start:
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    @property
    def is_horizontal(self) -> bool:
        return self.start.y == self.end.y

    def other(self, point: GridPoint) -> GridPoint:
        """Return the endpoint opposite to ``point``.

        Raises:
            ValueError: If ``point`` is not an endpoint of this edge
        """
        if point == self.start:
            return self.end
        if point == self.end:
            return self.start
        raise ValueError(f"{point} is not an endpoint of {self}")


@dataclass(frozen=True)
class ContourPath:
    """An outline walked along boundary edges.

    The path is implicitly closed: renderers join the last point back to
    the first.

    Attributes:
        points: Lattice points in walking order (at least two)
    """

    points: tuple[GridPoint, ...]

    def __post_init__(self) -> None:
        if len(self.points) < 2:
            raise ValueError(f"A contour needs at least 2 points, got {len(self.points)}")

    @classmethod
    def from_tuples(cls, points: list[tuple[int, int]]) -> "ContourPath":
        return cls(points=tuple(GridPoint(x, y) for x, y in points))

    def __len__(self) -> int:
        return len(self.points)

    def to_tuples(self) -> list[tuple[int, int]]:
        return [p.to_tuple() for p in self.points]

    def scaled(self, scale_x: float, scale_y: float) -> list[tuple[float, float]]:
        """Return the vertices in output units."""
        return [(p.x * scale_x, p.y * scale_y) for p in self.points]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"points": [list(p.to_tuple()) for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContourPath":
        """Deserialize from dictionary."""
        return cls(points=tuple(GridPoint(int(x), int(y)) for x, y in data["points"]))
