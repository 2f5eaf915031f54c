"""PNG rendering with Pillow."""

from PIL import Image, ImageDraw

from stitchpattern.config import FillShape, RenderConfig
from stitchpattern.core.geometry import RenderGeometry, compute_geometry, stroke_outline
from stitchpattern.domain import StitchPattern
from stitchpattern.exceptions import RenderError

_SURFACE_MODES = ("RGBA", "RGB")


def preview_size(aspect_ratio: float, width: int) -> tuple[int, int]:
    """Pixel size of a preview surface for an image of the given aspect.

    Args:
        aspect_ratio: Source image width divided by height
        width: Surface width in pixels

    Returns:
        Tuple of (width, height), each at least one pixel
    """
    return (max(1, width), max(1, int(width / aspect_ratio)))


def draw_geometry(draw: ImageDraw.ImageDraw, geometry: RenderGeometry) -> None:
    """Emit render primitives onto a Pillow drawing context."""
    fill = geometry.color.rgb + (255,)

    for stroke in geometry.strokes:
        for polygon in stroke_outline(stroke.points, stroke.width, geometry.miter_limit):
            draw.polygon(polygon, fill=fill)

    for primitive in geometry.fills:
        if primitive.shape is FillShape.CIRCLE:
            draw.ellipse(primitive.bounds(), fill=fill)
        else:
            draw.rectangle(primitive.bounds(), fill=fill)


class Rasterizer:
    """Draws patterns onto pixel surfaces.

    Example:
        rasterizer = Rasterizer(RenderConfig())
        image = rasterizer.render(pattern, (800, 600))
        image.save("pattern.png")
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def geometry_for(self, pattern: StitchPattern, size: tuple[int, int]) -> RenderGeometry:
        """Lay out a pattern to fill a surface of ``size`` pixels."""
        width, height = size
        return compute_geometry(
            pattern,
            cell_width=width / pattern.width,
            cell_height=height / pattern.height,
            miter_limit=self.config.miter_limit,
        )

    def render(self, pattern: StitchPattern, size: tuple[int, int]) -> Image.Image:
        """Render a pattern on a new transparent surface.

        Args:
            pattern: Generated pattern
            size: Surface size in pixels

        Returns:
            RGBA image

        Raises:
            RenderError: If the surface cannot be created or drawn on
        """
        width, height = size
        if width <= 0 or height <= 0:
            raise RenderError("PNG surface", f"invalid size {width}x{height}")
        try:
            surface = Image.new("RGBA", (width, height), (0, 0, 0, 0))
            draw_geometry(ImageDraw.Draw(surface), self.geometry_for(pattern, size))
        except (ValueError, OSError, MemoryError) as e:
            raise RenderError("PNG surface", str(e)) from e
        return surface

    def render_onto(self, pattern: StitchPattern, surface: Image.Image) -> RenderGeometry:
        """Clear an existing surface and draw a pattern on it.

        Drawing happens on a private buffer that is only copied onto
        ``surface`` once complete, so a failure leaves the surface as it
        was.

        Args:
            pattern: Generated pattern
            surface: Pillow image in RGBA or RGB mode

        Returns:
            The geometry that was drawn

        Raises:
            RenderError: If the surface is unusable or drawing fails
        """
        if surface is None:
            raise RenderError("PNG surface", "no surface available")
        if surface.mode not in _SURFACE_MODES:
            raise RenderError("PNG surface", f"unsupported mode {surface.mode}")
        if surface.width <= 0 or surface.height <= 0:
            raise RenderError("PNG surface", f"invalid size {surface.width}x{surface.height}")

        geometry = self.geometry_for(pattern, surface.size)
        try:
            buffer = Image.new("RGBA", surface.size, (0, 0, 0, 0))
            draw_geometry(ImageDraw.Draw(buffer), geometry)
            committed = buffer if surface.mode == "RGBA" else buffer.convert(surface.mode)
        except (ValueError, OSError, MemoryError) as e:
            raise RenderError("PNG surface", str(e)) from e

        surface.paste(committed, (0, 0))
        return geometry
