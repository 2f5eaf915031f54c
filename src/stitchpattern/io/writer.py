"""Pattern writer for saving rendered output.

This module provides the PatternWriter class for writing SVG documents and
PNG previews with the pattern naming convention.
"""

from pathlib import Path

from PIL import Image

from stitchpattern.exceptions import ExportError


class PatternWriter:
    """Writes rendered patterns to disk.

    Example:
        writer = PatternWriter()
        writer.write_svg(svg, PatternWriter.get_pattern_path(Path("cat.jpg"), ".svg"))
    """

    def write_svg(self, document: str, path: Path) -> Path:
        """Save an SVG document.

        Raises:
            ExportError: If the file cannot be written
        """
        try:
            path.write_text(document, encoding="utf-8")
        except OSError as e:
            raise ExportError(str(path), str(e)) from e
        return path

    def write_png(self, image: Image.Image, path: Path) -> Path:
        """Save a preview image as PNG.

        Raises:
            ExportError: If the file cannot be written
        """
        try:
            image.save(path, format="PNG")
        except (OSError, ValueError) as e:
            raise ExportError(str(path), str(e)) from e
        return path

    @staticmethod
    def get_pattern_path(input_path: Path, suffix: str) -> Path:
        """Generate output path with the pattern naming convention.

        Converts: cat.jpg -> cat-pattern.svg (suffix ".svg")
                  photos/dog.png -> photos/dog-pattern.png (suffix ".png")

        Args:
            input_path: Source photo path
            suffix: Output extension including the dot

        Returns:
            Path beside the input with -pattern appended to the stem
        """
        return input_path.parent / f"{input_path.stem}-pattern{suffix}"
