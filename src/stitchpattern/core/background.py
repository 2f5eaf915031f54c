"""Exterior detection for stitch grids.

Empty cells are split into true background, reachable from the grid
border, and enclosed holes. Only edges facing true background are traced,
so holes inside the silhouette get no outline.
"""

from collections import deque

from stitchpattern.domain import BackgroundMask, OccupancyGrid

_NEIGHBOR_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def resolve_background(grid: OccupancyGrid) -> BackgroundMask:
    """Flood fill the empty space connected to the grid border.

    Every empty border cell seeds a breadth-first search over 4-connected
    empty neighbours (no diagonals).

    Args:
        grid: Stitch occupancy

    Returns:
        Mask that is True only for empty cells reachable from the border
    """
    width, height = grid.width, grid.height
    occupied = grid.cells
    marked = [False] * (width * height)
    queue: deque[tuple[int, int]] = deque()

    def seed(x: int, y: int) -> None:
        i = y * width + x
        if not occupied[i] and not marked[i]:
            marked[i] = True
            queue.append((x, y))

    for y in range(height):
        seed(0, y)
        seed(width - 1, y)
    for x in range(width):
        seed(x, 0)
        seed(x, height - 1)

    while queue:
        x, y = queue.popleft()
        for dx, dy in _NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height:
                i = ny * width + nx
                if not occupied[i] and not marked[i]:
                    marked[i] = True
                    queue.append((nx, ny))

    return BackgroundMask(width=width, height=height, cells=tuple(marked))
