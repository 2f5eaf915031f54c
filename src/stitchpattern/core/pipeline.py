"""Pattern generation pipeline and recomputation scheduling.

The pipeline runs every stage from scratch on each call:

    bitmap -> Quantizer -> OccupancyGrid -> resolve_background
           -> ContourTracer -> simplify_path -> StitchPattern

Rendering is separate so the PNG preview can be redrawn on every edit
while SVG export runs once on demand.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass

import structlog
from PIL import Image

from stitchpattern.config import StitchPatternSettings, StyleParameters
from stitchpattern.core.background import resolve_background
from stitchpattern.core.history import ParameterHistory
from stitchpattern.core.quantizer import Quantizer
from stitchpattern.core.raster import Rasterizer, preview_size
from stitchpattern.core.tracer import trace_contours
from stitchpattern.core.vector import VectorExporter
from stitchpattern.domain import Bitmap, StitchPattern
from stitchpattern.utils import PatternLogger, PipelineStats


@dataclass(frozen=True)
class RenderedPattern:
    """Result of one recomputation.

    Attributes:
        generation: Request number that produced this result
        pattern: Generated pattern
        preview: PNG preview surface
    """

    generation: int
    pattern: StitchPattern
    preview: Image.Image


class PatternPipeline:
    """Runs the generation stages and the render backends.

    Example:
        pipeline = PatternPipeline(StitchPatternSettings())
        pattern = pipeline.generate(bitmap, StyleParameters(stitch_count_width=40))
        svg = pipeline.export_svg(pattern)
    """

    def __init__(
        self,
        settings: StitchPatternSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            settings: Application settings (defaults if None)
            logger: Structured logger (module logger if None)
        """
        self.settings = settings or StitchPatternSettings()
        self.logger = logger or structlog.get_logger(__name__)
        self.quantizer = Quantizer(self.settings.render.resample)
        self.rasterizer = Rasterizer(self.settings.render)
        self.exporter = VectorExporter(self.settings.render)

    def generate(self, bitmap: Bitmap, style: StyleParameters) -> StitchPattern:
        """Build a pattern from a bitmap.

        Raises:
            InvalidDimensionError: If the grid would be degenerate
        """
        grid = self.quantizer.quantize(bitmap, style)
        background = resolve_background(grid)
        contours = tuple(trace_contours(grid, background))
        self.logger.debug(
            "Grid traced",
            width=grid.width,
            height=grid.height,
            stitches=grid.count(),
            contours=len(contours),
        )
        return StitchPattern(grid=grid, background=background, contours=contours, style=style)

    def render_preview(
        self, pattern: StitchPattern, aspect_ratio: float, width: int | None = None
    ) -> Image.Image:
        """Draw a PNG preview sized to the source image's aspect ratio."""
        size = preview_size(aspect_ratio, width or self.settings.render.preview_width)
        return self.rasterizer.render(pattern, size)

    def export_svg(self, pattern: StitchPattern) -> str:
        return self.exporter.export(pattern)


class RecomputeScheduler:
    """Coalesces edits into at most one pending recomputation.

    Edits and image changes only schedule work. :meth:`run_pending` is the
    "next tick": it computes the latest request and forgets any it
    replaced, so stale parameters are never rendered.

    Example:
        scheduler = RecomputeScheduler(pipeline, history)
        scheduler.set_bitmap(bitmap)
        scheduler.edit(threshold=90)
        scheduler.edit(threshold=80)
        result = scheduler.run_pending()  # renders threshold=80 only
    """

    def __init__(
        self,
        pipeline: PatternPipeline,
        history: ParameterHistory,
        on_render: Callable[[RenderedPattern], None] | None = None,
    ) -> None:
        self.pipeline = pipeline
        self.history = history
        self.on_render = on_render
        self.pattern_logger = PatternLogger(pipeline.logger)
        self._bitmap: Bitmap | None = None
        self._generation = 0
        self._pending: tuple[int, Bitmap, StyleParameters] | None = None
        self._latest: RenderedPattern | None = None

    @property
    def stats(self) -> PipelineStats:
        return self.pattern_logger.stats

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    @property
    def latest(self) -> RenderedPattern | None:
        """Most recent completed result."""
        return self._latest

    def set_bitmap(self, bitmap: Bitmap) -> int | None:
        """Replace the source image and schedule a recomputation."""
        self._bitmap = bitmap
        return self.schedule()

    def schedule(self) -> int | None:
        """Request a recomputation with the current image and parameters.

        Returns:
            Generation number of the request, or None if there is no image
            or the history is not seeded yet
        """
        params = self.history.current()
        if self._bitmap is None or params is None:
            return None
        superseded = self._pending[0] if self._pending is not None else None
        self._generation += 1
        self._pending = (self._generation, self._bitmap, params)
        self.pattern_logger.log_scheduled(self._generation, superseded)
        return self._generation

    def edit(self, **changes: object) -> int | None:
        """Apply a parameter change and schedule it if anything changed."""
        if self.history.update(**changes):
            return self.schedule()
        return None

    def undo(self) -> int | None:
        if self.history.undo():
            return self.schedule()
        return None

    def redo(self) -> int | None:
        if self.history.redo():
            return self.schedule()
        return None

    def run_pending(self) -> RenderedPattern | None:
        """Compute and render the latest request, if any.

        Returns:
            The rendered result, or None when nothing was pending

        Raises:
            StitchPatternError: If generation or rendering fails; the
                request is dropped and the previous result stays current
        """
        if self._pending is None:
            return None
        generation, bitmap, params = self._pending
        self._pending = None

        start = time.perf_counter()
        try:
            pattern = self.pipeline.generate(bitmap, params)
            preview = self.pipeline.render_preview(pattern, bitmap.aspect_ratio)
        except Exception as e:
            self.pattern_logger.log_error(generation, e)
            raise

        self.pattern_logger.log_complete(
            generation,
            width=pattern.width,
            height=pattern.height,
            stitches=pattern.stitch_count,
            contours=len(pattern.contours),
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        result = RenderedPattern(generation=generation, pattern=pattern, preview=preview)
        self._latest = result
        if self.on_render is not None:
            self.on_render(result)
        return result
