"""Domain models for stitchpattern.

This module contains the core domain models representing source bitmaps,
stitch grids, and traced outlines. All models are designed to be:

- Immutable once built (frozen dataclasses, tuples)
- Recomputed from scratch on every parameter change, never patched
- Independent of Pillow implementation details

Key classes:
- Bitmap: Decoded RGBA pixels of the source photo
- OccupancyGrid: Which stitch cells belong to the silhouette
- BackgroundMask: Which empty cells are reachable from the grid border
- GridPoint: A lattice point on stitch cell corners
- Edge: One unit side of a stitch cell
- ContourPath: An outline traced along cell sides
- StitchPattern: A complete generated pattern
"""

from stitchpattern.domain.bitmap import Bitmap
from stitchpattern.domain.contour import ContourPath, Edge, GridPoint
from stitchpattern.domain.grid import BackgroundMask, OccupancyGrid
from stitchpattern.domain.pattern import StitchPattern

__all__: list[str] = [
    "Bitmap",
    "OccupancyGrid",
    "BackgroundMask",
    "GridPoint",
    "Edge",
    "ContourPath",
    "StitchPattern",
]
