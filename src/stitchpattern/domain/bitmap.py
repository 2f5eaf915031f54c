"""Decoded source image."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class Bitmap:
    """RGBA pixels of a decoded photo.

    Attributes:
        pixels: uint8 array of shape (height, width, 4), read-only
    """

    pixels: np.ndarray

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(
                f"Bitmap pixels must have shape (height, width, 4), got {self.pixels.shape}"
            )
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Bitmap pixels must be uint8, got {self.pixels.dtype}")
        self.pixels.flags.writeable = False

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Bitmap":
        """Build a bitmap from an RGB or RGBA array.

        RGB input is treated as fully opaque.

        Args:
            array: Array of shape (height, width, 3) or (height, width, 4)

        Returns:
            Bitmap holding a private copy of the pixels
        """
        data = np.asarray(array, dtype=np.uint8)
        if data.ndim == 3 and data.shape[2] == 3:
            alpha = np.full(data.shape[:2] + (1,), 255, dtype=np.uint8)
            data = np.concatenate([data, alpha], axis=2)
        return cls(pixels=np.array(data, copy=True))

    @classmethod
    def filled(
        cls, width: int, height: int, rgba: tuple[int, int, int, int]
    ) -> "Bitmap":
        """Build a bitmap of a single colour."""
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:, :] = rgba
        return cls(pixels=pixels)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height
