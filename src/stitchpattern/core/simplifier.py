"""Lossless outline simplification.

Traced outlines contain a vertex at every cell corner. Vertices where the
path runs straight through carry no shape information and are dropped.
No tolerance is applied: only exactly collinear vertices go.
"""

from stitchpattern.domain import ContourPath, GridPoint

COLLINEAR_EPSILON = 1e-9


def turn(prev: GridPoint, curr: GridPoint, nxt: GridPoint) -> float:
    """2D cross product of (curr - prev) and (nxt - curr).

    Zero means the path goes straight through ``curr`` (or doubles back).
    """
    return (curr.x - prev.x) * (nxt.y - curr.y) - (curr.y - prev.y) * (nxt.x - curr.x)


def is_collinear(prev: GridPoint, curr: GridPoint, nxt: GridPoint) -> bool:
    return abs(turn(prev, curr, nxt)) < COLLINEAR_EPSILON


def simplify_path(path: ContourPath) -> ContourPath:
    """Remove redundant vertices from an outline.

    A linear pass drops interior vertices collinear with the last kept
    vertex and the following one. Because the path is closed when drawn,
    the seam is then checked too: the last vertex is dropped if it lies on
    the line to the first, and the first if it lies on the line to the
    second.

    Args:
        path: Traced outline

    Returns:
        Equivalent outline with the minimum number of vertices. Paths with
        fewer than three points are returned unchanged.
    """
    points = path.points
    if len(points) < 3:
        return path

    simplified = [points[0]]
    for i in range(1, len(points) - 1):
        if not is_collinear(simplified[-1], points[i], points[i + 1]):
            simplified.append(points[i])
    simplified.append(points[-1])

    if len(simplified) >= 3 and is_collinear(simplified[-2], simplified[-1], simplified[0]):
        simplified.pop()

    if len(simplified) >= 3 and is_collinear(simplified[-1], simplified[0], simplified[1]):
        simplified.pop(0)

    return ContourPath(points=tuple(simplified))
