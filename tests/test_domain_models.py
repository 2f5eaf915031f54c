"""Tests for domain models to verify they work correctly."""

import numpy as np
import pytest

from stitchpattern.config import DEFAULT_THREAD_COLOR, FillShape, StyleParameters, find_thread_color
from stitchpattern.domain import (
    BackgroundMask,
    Bitmap,
    ContourPath,
    Edge,
    GridPoint,
    OccupancyGrid,
    StitchPattern,
)


class TestGridPoint:
    """Tests for GridPoint class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = GridPoint(3, 4)
        assert p.x == 3
        assert p.y == 4
        assert p.to_tuple() == (3, 4)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = GridPoint(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5  # type: ignore

    def test_point_hashable(self) -> None:
        """Test points with equal coordinates collapse in a set."""
        assert len({GridPoint(1, 1), GridPoint(1, 1), GridPoint(1, 2)}) == 2


class TestEdge:
    """Tests for Edge class."""

    def test_edge_unordered(self) -> None:
        """Test that swapping endpoints yields an equal edge."""
        a, b = GridPoint(2, 3), GridPoint(2, 4)
        assert Edge(a, b) == Edge(b, a)
        assert Edge(b, a).start == a

    def test_edge_orientation(self) -> None:
        """Test horizontal/vertical detection."""
        assert Edge(GridPoint(0, 0), GridPoint(1, 0)).is_horizontal
        assert not Edge(GridPoint(0, 0), GridPoint(0, 1)).is_horizontal

    def test_edge_rejects_non_unit(self) -> None:
        """Test that diagonal or long edges are rejected."""
        with pytest.raises(ValueError):
            Edge(GridPoint(0, 0), GridPoint(1, 1))
        with pytest.raises(ValueError):
            Edge(GridPoint(0, 0), GridPoint(2, 0))

    def test_other(self) -> None:
        """Test walking across an edge."""
        edge = Edge(GridPoint(0, 0), GridPoint(1, 0))
        assert edge.other(GridPoint(0, 0)) == GridPoint(1, 0)
        assert edge.other(GridPoint(1, 0)) == GridPoint(0, 0)
        with pytest.raises(ValueError):
            edge.other(GridPoint(5, 5))


class TestContourPath:
    """Tests for ContourPath class."""

    def test_requires_two_points(self) -> None:
        """Test that single-point paths are rejected."""
        with pytest.raises(ValueError):
            ContourPath.from_tuples([(0, 0)])

    def test_scaled(self) -> None:
        """Test conversion to output units."""
        path = ContourPath.from_tuples([(0, 0), (2, 0), (2, 1)])
        assert path.scaled(10, 5) == [(0, 0), (20, 0), (20, 5)]

    def test_contour_serialization(self) -> None:
        """Test contour serialization and deserialization."""
        path = ContourPath.from_tuples([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert ContourPath.from_dict(path.to_dict()) == path
        assert len(path) == 4


class TestOccupancyGrid:
    """Tests for OccupancyGrid class."""

    def test_from_strings(self) -> None:
        """Test building a grid from text rows."""
        grid = OccupancyGrid.from_strings(["#..", ".#."])
        assert (grid.width, grid.height) == (3, 2)
        assert grid.is_occupied(0, 0)
        assert grid.is_occupied(1, 1)
        assert not grid.is_occupied(2, 1)
        assert grid.count() == 2

    def test_flat_layout(self) -> None:
        """Test that cells are addressed by y * width + x."""
        grid = OccupancyGrid.from_strings(["...", "..#"])
        assert grid.index(2, 1) == 5
        assert grid.cells[5] is True

    def test_out_of_bounds(self) -> None:
        """Test bounds-checked access."""
        grid = OccupancyGrid.from_strings(["##"])
        assert not grid.in_bounds(2, 0)
        with pytest.raises(IndexError):
            _ = grid[2, 0]
        with pytest.raises(IndexError):
            _ = grid[-1, 0]

    def test_ragged_rows(self) -> None:
        """Test that rows of different lengths are rejected."""
        with pytest.raises(ValueError):
            OccupancyGrid.from_strings(["##", "#"])

    def test_cell_count_mismatch(self) -> None:
        """Test that the cell tuple must match the dimensions."""
        with pytest.raises(ValueError):
            OccupancyGrid(width=2, height=2, cells=(True, False))

    def test_true_cells_row_major(self) -> None:
        """Test stitched cells are listed row by row."""
        grid = OccupancyGrid.from_strings([".#", "#."])
        assert list(grid.true_cells()) == [(1, 0), (0, 1)]

    def test_to_strings(self) -> None:
        """Test text rendering round trip."""
        rows = ["#.#", "###"]
        assert OccupancyGrid.from_strings(rows).to_strings() == rows

    def test_immutable(self) -> None:
        """Test that grids cannot be modified."""
        grid = OccupancyGrid.from_strings(["#"])
        with pytest.raises(AttributeError):
            grid.width = 3  # type: ignore


class TestBitmap:
    """Tests for Bitmap class."""

    def test_from_rgb_array(self) -> None:
        """Test RGB input becomes opaque RGBA."""
        bitmap = Bitmap.from_array(np.zeros((2, 3, 3), dtype=np.uint8))
        assert (bitmap.width, bitmap.height) == (3, 2)
        assert bitmap.pixels.shape == (2, 3, 4)
        assert (bitmap.pixels[..., 3] == 255).all()

    def test_aspect_ratio(self) -> None:
        """Test aspect ratio is width over height."""
        assert Bitmap.filled(30, 20, (0, 0, 0, 255)).aspect_ratio == 1.5

    def test_read_only(self) -> None:
        """Test pixels cannot be modified in place."""
        bitmap = Bitmap.filled(2, 2, (0, 0, 0, 255))
        with pytest.raises(ValueError):
            bitmap.pixels[0, 0, 0] = 10

    def test_wrong_shape(self) -> None:
        """Test non-RGBA arrays are rejected."""
        with pytest.raises(ValueError):
            Bitmap(pixels=np.zeros((2, 2), dtype=np.uint8))


class TestStitchPattern:
    """Tests for StitchPattern class."""

    @pytest.fixture
    def pattern(self) -> StitchPattern:
        grid = OccupancyGrid.from_strings(["##", "#."])
        mask = BackgroundMask(width=2, height=2, cells=(False, False, False, True))
        style = StyleParameters(
            stitch_count_width=2,
            threshold=90,
            fill_shape=FillShape.SQUARE,
            outline_offset=1.5,
            color=find_thread_color("321"),
        )
        return StitchPattern(grid=grid, background=mask, contours=(), style=style)

    def test_dimensions(self, pattern: StitchPattern) -> None:
        """Test pattern size and stitch count."""
        assert (pattern.width, pattern.height) == (2, 2)
        assert pattern.stitch_count == 3

    def test_record_shape(self, pattern: StitchPattern) -> None:
        """Test the saved-pattern record fields."""
        record = pattern.to_record()
        assert record == {
            "gridSize": 2,
            "threshold": 90,
            "fillShape": "square",
            "outlineOffset": 1.5,
            "selectedColor": {"name": "Red", "dmc": "#321", "hex": "#DE313A"},
        }

    def test_style_from_record(self, pattern: StitchPattern) -> None:
        """Test restoring parameters from a record."""
        assert StitchPattern.style_from_record(pattern.to_record()) == pattern.style

    def test_unknown_color_restores_black(self, pattern: StitchPattern) -> None:
        """Test that colours missing from the palette fall back to black."""
        record = pattern.to_record()
        record["selectedColor"] = {"name": "Teal", "dmc": "#3812", "hex": "#00A090"}
        assert StitchPattern.style_from_record(record).color == DEFAULT_THREAD_COLOR
