"""SVG export."""

from stitchpattern.config import FillShape, RenderConfig
from stitchpattern.core.geometry import FillPrimitive, RenderGeometry, compute_geometry
from stitchpattern.domain import StitchPattern

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _num(value: float) -> str:
    """Format a coordinate without trailing zeros."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")


def path_data(points: tuple[tuple[float, float], ...]) -> str:
    """Build SVG path data for a closed polyline."""
    commands = [
        f"{'M' if i == 0 else 'L'} {_num(x)} {_num(y)}" for i, (x, y) in enumerate(points)
    ]
    return " ".join(commands) + " Z"


def _fill_element(primitive: FillPrimitive, color: str) -> str:
    if primitive.shape is FillShape.CIRCLE:
        return (
            f'<circle cx="{_num(primitive.center_x)}" cy="{_num(primitive.center_y)}" '
            f'r="{_num(primitive.size)}" fill="{color}" />'
        )
    x0, y0, _, _ = primitive.bounds()
    return (
        f'<rect x="{_num(x0)}" y="{_num(y0)}" width="{_num(primitive.size)}" '
        f'height="{_num(primitive.size)}" fill="{color}" />'
    )


def svg_document(geometry: RenderGeometry) -> str:
    """Serialize render geometry as a standalone SVG document."""
    color = geometry.color.hex_value
    elements = [
        f'<path d="{path_data(stroke.points)}" stroke="{color}" '
        f'stroke-width="{_num(stroke.width)}" stroke-linejoin="miter" '
        f'stroke-miterlimit="{_num(geometry.miter_limit)}" fill="none" />'
        for stroke in geometry.strokes
    ]
    elements.extend(_fill_element(primitive, color) for primitive in geometry.fills)

    width, height = _num(geometry.width), _num(geometry.height)
    return (
        f'<svg width="{width}" height="{height}" xmlns="{SVG_NAMESPACE}" '
        f'viewBox="0 0 {width} {height}">' + "".join(elements) + "</svg>"
    )


class VectorExporter:
    """Exports patterns as resolution-independent SVG.

    Each stitch cell spans ``svg_base_unit`` document units, so the
    document is ``width * unit`` by ``height * unit``.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def geometry_for(self, pattern: StitchPattern) -> RenderGeometry:
        unit = self.config.svg_base_unit
        return compute_geometry(
            pattern,
            cell_width=unit,
            cell_height=unit,
            miter_limit=self.config.miter_limit,
        )

    def export(self, pattern: StitchPattern) -> str:
        """Render a pattern as an SVG document string."""
        return svg_document(self.geometry_for(pattern))
