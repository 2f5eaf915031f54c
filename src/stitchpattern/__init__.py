"""Stitchpattern - Turn photographs into cross-stitch silhouette patterns.

Stitchpattern down-samples an image into a coarse grid of stitch cells,
keeps the cells darker than a threshold, traces an outline around the
silhouette and renders the result either as a PNG preview or as an SVG
document ready to print or download.

Example:
    $ stitchpattern generate cat.png --width 48 --outline 1

This will create cat-pattern.svg and cat-pattern.png next to the photo.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
