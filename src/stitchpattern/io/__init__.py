"""Image I/O layer for stitchpattern.

This module handles reading photos and writing rendered patterns using
Pillow. It keeps file handling out of the generation engine.

Key responsibilities:
- Decode photos of any Pillow-supported format into RGBA bitmaps
- Write SVG documents and PNG previews
- Output file naming convention

Key classes:
- ImageReader: Load photos as Bitmap domain models
- PatternWriter: Save rendered patterns
"""

from stitchpattern.io.reader import ImageReader
from stitchpattern.io.writer import PatternWriter

__all__ = [
    "ImageReader",
    "PatternWriter",
]
