"""Photo to stitch grid conversion.

The photo is shrunk to exactly one sample per stitch with a smoothing
filter, then each sample is kept or dropped by comparing its luminance
against the threshold. Transparent samples are never stitched.
"""

import math

import numpy as np
from PIL import Image

from stitchpattern.config import ResampleFilter, StyleParameters
from stitchpattern.domain import Bitmap, OccupancyGrid
from stitchpattern.exceptions import InvalidDimensionError

# Samples with alpha at or below this are treated as transparent
ALPHA_CUTOFF = 128

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])

_PIL_FILTERS: dict[ResampleFilter, Image.Resampling] = {
    ResampleFilter.BOX: Image.Resampling.BOX,
    ResampleFilter.BILINEAR: Image.Resampling.BILINEAR,
    ResampleFilter.HAMMING: Image.Resampling.HAMMING,
    ResampleFilter.BICUBIC: Image.Resampling.BICUBIC,
    ResampleFilter.LANCZOS: Image.Resampling.LANCZOS,
}


def grid_dimensions(aspect_ratio: float, stitch_count_width: int) -> tuple[int, int]:
    """Compute the stitch grid size for an image.

    Args:
        aspect_ratio: Image width divided by height
        stitch_count_width: Requested number of stitch columns

    Returns:
        Tuple of (width, height) in stitches

    Raises:
        InvalidDimensionError: If either dimension comes out as zero
    """
    width = stitch_count_width
    height = math.floor(stitch_count_width / aspect_ratio) if aspect_ratio > 0 else 0
    if width <= 0 or height <= 0:
        raise InvalidDimensionError(width, height)
    return width, height


def luminance(samples: np.ndarray) -> np.ndarray:
    """Perceived brightness of RGB(A) samples on a 0-255 scale.

    Args:
        samples: Array whose last axis holds at least R, G, B

    Returns:
        Float array with the last axis removed
    """
    return samples[..., :3].astype(np.float64) @ LUMA_WEIGHTS


def threshold_samples(samples: np.ndarray, threshold: int) -> OccupancyGrid:
    """Turn one RGBA sample per cell into an occupancy grid.

    A cell is stitched when it is clearly opaque and strictly darker than
    the threshold.

    Args:
        samples: uint8 array of shape (height, width, 4)
        threshold: Luminance cut-off in 0..255

    Returns:
        Fresh occupancy grid
    """
    height, width = samples.shape[:2]
    occupied = (samples[..., 3] > ALPHA_CUTOFF) & (luminance(samples) < threshold)
    return OccupancyGrid(
        width=width,
        height=height,
        cells=tuple(bool(c) for c in occupied.ravel()),
    )


class Quantizer:
    """Converts bitmaps into stitch occupancy grids.

    Example:
        quantizer = Quantizer()
        grid = quantizer.quantize(bitmap, StyleParameters(stitch_count_width=40))
    """

    def __init__(self, resample: ResampleFilter = ResampleFilter.LANCZOS) -> None:
        """Initialize the quantizer.

        Args:
            resample: Smoothing filter used to shrink the bitmap
        """
        self._resample = _PIL_FILTERS[resample]

    def downsample(self, bitmap: Bitmap, width: int, height: int) -> np.ndarray:
        """Shrink a bitmap to exactly ``width x height`` RGBA samples."""
        image = Image.fromarray(bitmap.pixels.copy())
        small = image.resize((width, height), self._resample)
        return np.asarray(small, dtype=np.uint8)

    def quantize(self, bitmap: Bitmap, style: StyleParameters) -> OccupancyGrid:
        """Build the occupancy grid for a bitmap.

        Deterministic and side-effect free for identical inputs.

        Args:
            bitmap: Decoded source photo
            style: Parameters supplying stitch width and threshold

        Returns:
            Fresh occupancy grid

        Raises:
            InvalidDimensionError: If the grid would be degenerate
        """
        if bitmap.width == 0 or bitmap.height == 0:
            raise InvalidDimensionError(style.stitch_count_width, 0)
        width, height = grid_dimensions(bitmap.aspect_ratio, style.stitch_count_width)
        samples = self.downsample(bitmap, width, height)
        return threshold_samples(samples, style.threshold)
