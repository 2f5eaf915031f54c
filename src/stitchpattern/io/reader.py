"""Image reader for loading source photos.

This module provides the ImageReader class for decoding image files or
bytes into Bitmap domain models.
"""

import io
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from stitchpattern.domain import Bitmap
from stitchpattern.exceptions import ImageDecodeError


class ImageReader:
    """Decodes photos into RGBA bitmaps.

    Example:
        bitmap = ImageReader().read(Path("cat.jpg"))
        print(bitmap.width, bitmap.height)
    """

    def read(self, path: Path) -> Bitmap:
        """Decode an image file.

        Args:
            path: Path to a PNG, JPEG or other Pillow-readable image

        Returns:
            Bitmap with the decoded pixels

        Raises:
            ImageDecodeError: If the file is missing or cannot be decoded
        """
        if not path.exists():
            raise ImageDecodeError(str(path), "file not found")
        try:
            with Image.open(path) as image:
                return self._to_bitmap(image)
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise ImageDecodeError(str(path), str(e)) from e

    def read_bytes(self, data: bytes, source: str = "<bytes>") -> Bitmap:
        """Decode an in-memory image, e.g. an upload.

        Raises:
            ImageDecodeError: If the data cannot be decoded
        """
        try:
            with Image.open(io.BytesIO(data)) as image:
                return self._to_bitmap(image)
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise ImageDecodeError(source, str(e)) from e

    @staticmethod
    def _to_bitmap(image: Image.Image) -> Bitmap:
        rgba = image.convert("RGBA")
        if rgba.width == 0 or rgba.height == 0:
            raise ValueError(f"empty image {rgba.width}x{rgba.height}")
        return Bitmap.from_array(np.asarray(rgba, dtype=np.uint8))
