"""Outline tracing along stitch cell sides.

The tracer collects every cell side that separates a stitch from true
background, links the sides into a graph keyed by lattice point, and walks
the graph greedily to produce polylines.

Ordering is fixed so results are reproducible:

1. Cells are scanned row-major (y, then x).
2. For each stitch the top and bottom sides are collected as horizontal
   edges and the left and right sides as vertical edges, each list in
   first-seen order without duplicates.
3. All horizontal edges are added to the graph before any vertical edge.
   Each edge is appended to the adjacency list of its lower endpoint, then
   its upper endpoint (ordered by x, then y).
4. Walks start from lattice points in the order they first entered the
   graph, and at each step take the first listed edge leading to an
   unvisited point.
"""

from stitchpattern.core.simplifier import simplify_path
from stitchpattern.domain import BackgroundMask, ContourPath, Edge, GridPoint, OccupancyGrid


class ContourTracer:
    """Traces the boundary between a silhouette and its exterior.

    Holes that do not connect to the grid border are not background, so
    their sides are never traced.

    Example:
        mask = resolve_background(grid)
        paths = ContourTracer().trace(grid, mask)
    """

    def boundary_edges(
        self, grid: OccupancyGrid, background: BackgroundMask
    ) -> list[Edge]:
        """Collect the cell sides that face true background.

        A side of a stitch is a boundary when the cell across it is
        outside the grid or marked as background.

        Args:
            grid: Stitch occupancy
            background: Exterior mask for the same grid

        Returns:
            Horizontal edges followed by vertical edges, in scan order
        """
        if (grid.width, grid.height) != (background.width, background.height):
            raise ValueError(
                f"Grid {grid.width}x{grid.height} and mask "
                f"{background.width}x{background.height} differ in size"
            )

        def faces_background(x: int, y: int) -> bool:
            return not background.in_bounds(x, y) or background[x, y]

        horizontal: dict[tuple[int, int], None] = {}
        vertical: dict[tuple[int, int], None] = {}

        for x, y in grid.true_cells():
            if faces_background(x, y - 1):
                horizontal[(x, y)] = None
            if faces_background(x, y + 1):
                horizontal[(x, y + 1)] = None
            if faces_background(x - 1, y):
                vertical[(x, y)] = None
            if faces_background(x + 1, y):
                vertical[(x + 1, y)] = None

        edges = [Edge(GridPoint(x, y), GridPoint(x + 1, y)) for x, y in horizontal]
        edges.extend(Edge(GridPoint(x, y), GridPoint(x, y + 1)) for x, y in vertical)
        return edges

    @staticmethod
    def build_adjacency(edges: list[Edge]) -> dict[GridPoint, list[Edge]]:
        """Map each lattice point to the edges touching it."""
        adjacency: dict[GridPoint, list[Edge]] = {}
        for edge in edges:
            adjacency.setdefault(edge.start, []).append(edge)
            adjacency.setdefault(edge.end, []).append(edge)
        return adjacency

    @staticmethod
    def walk(adjacency: dict[GridPoint, list[Edge]]) -> list[ContourPath]:
        """Greedily link adjacent edges into paths.

        Every point is visited once. Walks that cannot leave their start
        point are dropped.

        Args:
            adjacency: Output of :meth:`build_adjacency`

        Returns:
            Paths of at least two points each
        """
        visited: set[GridPoint] = set()
        paths: list[ContourPath] = []

        for start in adjacency:
            if start in visited:
                continue

            path = [start]
            visited.add(start)
            current = start

            while True:
                next_point = None
                for edge in adjacency[current]:
                    candidate = edge.other(current)
                    if candidate not in visited:
                        next_point = candidate
                        break
                if next_point is None:
                    break
                path.append(next_point)
                visited.add(next_point)
                current = next_point

            if len(path) >= 2:
                paths.append(ContourPath(points=tuple(path)))

        return paths

    def trace(self, grid: OccupancyGrid, background: BackgroundMask) -> list[ContourPath]:
        """Trace raw (unsimplified) outlines.

        Args:
            grid: Stitch occupancy
            background: Exterior mask for the same grid

        Returns:
            Disjoint paths; empty when the grid has no stitches
        """
        edges = self.boundary_edges(grid, background)
        return self.walk(self.build_adjacency(edges))


def trace_contours(grid: OccupancyGrid, background: BackgroundMask) -> list[ContourPath]:
    """Trace and simplify the outlines of a grid."""
    return [simplify_path(path) for path in ContourTracer().trace(grid, background)]
