"""Stitch cell grids.

Both grids store their cells in a flat tuple addressed by ``y * width + x``.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class _CellGrid:
    """Rectangular boolean matrix stored row-major."""

    width: int
    height: int
    cells: tuple[bool, ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Negative grid size {self.width}x{self.height}")
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} cells, got {len(self.cells)}"
            )

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) addresses a cell of this grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        """Flat index of cell (x, y).

        Raises:
            IndexError: If the cell is outside the grid
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return y * self.width + x

    def __getitem__(self, xy: tuple[int, int]) -> bool:
        x, y = xy
        return self.cells[self.index(x, y)]

    def count(self) -> int:
        """Number of true cells."""
        return sum(self.cells)

    def true_cells(self) -> Iterator[tuple[int, int]]:
        """Yield (x, y) of every true cell in row-major order."""
        for i, value in enumerate(self.cells):
            if value:
                yield (i % self.width, i // self.width)

    def rows(self) -> list[list[bool]]:
        """Return the cells as a list of rows."""
        return [
            list(self.cells[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        ]

    def to_strings(self, on: str = "#", off: str = ".") -> list[str]:
        """Render the grid as one string per row, mostly for debugging."""
        return ["".join(on if c else off for c in row) for row in self.rows()]


@dataclass(frozen=True)
class OccupancyGrid(_CellGrid):
    """Which stitch cells belong to the silhouette.

    Attributes:
        width: Stitch columns
        height: Stitch rows
        cells: Row-major flags, True where a stitch is placed
    """

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[bool]]) -> "OccupancyGrid":
        """Build a grid from nested rows of booleans."""
        materialized = [tuple(bool(c) for c in row) for row in rows]
        height = len(materialized)
        width = len(materialized[0]) if materialized else 0
        if any(len(row) != width for row in materialized):
            raise ValueError("All rows must have the same length")
        cells = tuple(c for row in materialized for c in row)
        return cls(width=width, height=height, cells=cells)

    @classmethod
    def from_strings(cls, rows: Sequence[str], on: str = "#") -> "OccupancyGrid":
        """Build a grid from strings, one per row.

        Example:
            OccupancyGrid.from_strings(["...", ".#.", "..."])
        """
        return cls.from_rows([[ch == on for ch in row] for row in rows])

    def is_occupied(self, x: int, y: int) -> bool:
        return self[x, y]


@dataclass(frozen=True)
class BackgroundMask(_CellGrid):
    """Empty cells connected to the grid border.

    A False entry is either a stitch or an enclosed hole; only True entries
    are exterior space.
    """

    def is_background(self, x: int, y: int) -> bool:
        return self[x, y]
