"""Core processing algorithms for stitchpattern.

This module contains the core algorithms for:

- Quantization (photo to stitch occupancy grid)
- Background detection (flood fill from the grid border)
- Outline tracing and lossless simplification
- Rendering to PNG and SVG from shared geometry
- Parameter history and recomputation scheduling

The generation stages are pure: each call builds fresh values from its
inputs and never mutates them.

Key functions:
- grid_dimensions: Stitch grid size for an image aspect ratio
- threshold_samples: Occupancy from one RGBA sample per cell
- resolve_background: Exterior mask of a grid
- trace_contours: Simplified outlines of a grid
- simplify_path: Drop collinear vertices from an outline
- compute_geometry: Render primitives for a pattern at a cell size

Key classes:
- Quantizer: Shrinks and thresholds bitmaps
- ContourTracer: Walks boundary edges into paths
- Rasterizer: Draws patterns with Pillow
- VectorExporter: Writes patterns as SVG
- ParameterHistory: Undo/redo over style parameters
- PatternPipeline: Runs all stages
- RecomputeScheduler: Coalesces edits into one pending recomputation
"""

from stitchpattern.core.background import resolve_background
from stitchpattern.core.geometry import (
    FillPrimitive,
    RenderGeometry,
    StrokePrimitive,
    compute_geometry,
    stroke_outline,
)
from stitchpattern.core.history import ParameterHistory
from stitchpattern.core.instructions import InstructionsProvider, request_instructions
from stitchpattern.core.pipeline import PatternPipeline, RecomputeScheduler, RenderedPattern
from stitchpattern.core.quantizer import Quantizer, grid_dimensions, luminance, threshold_samples
from stitchpattern.core.raster import Rasterizer, preview_size
from stitchpattern.core.simplifier import simplify_path
from stitchpattern.core.tracer import ContourTracer, trace_contours
from stitchpattern.core.vector import VectorExporter

__all__ = [
    # Tracing classes
    "ContourTracer",
    # Geometry classes
    "FillPrimitive",
    "InstructionsProvider",
    # History classes
    "ParameterHistory",
    # Pipeline classes
    "PatternPipeline",
    "Quantizer",
    "Rasterizer",
    "RecomputeScheduler",
    "RenderGeometry",
    "RenderedPattern",
    "StrokePrimitive",
    "VectorExporter",
    # Functions
    "compute_geometry",
    "grid_dimensions",
    "luminance",
    "preview_size",
    "request_instructions",
    "resolve_background",
    "simplify_path",
    "stroke_outline",
    "threshold_samples",
    "trace_contours",
]
