"""Geometry generation for shooting targets.

All primitives are in page points (PDF frame: origin bottom-left, +y up).

Submodules:
- primitives: Drawing primitives and composition layers
- frame: Canonical-inch to page-point transform
- rings: Ring discs painted outermost first
- figures: Silhouette figure paths
- bands: Banded service-target rectangles
- boundary: Cutting guides around the scaled design
- generate: Per-entry dispatch producing layered geometry
"""

from __future__ import annotations

from .bands import band_rectangle, generate_bands
from .boundary import BOUNDARY_LINE_WIDTH_PT, boundary_lines
from .figures import figure_anchors, generate_figures, outline_path
from .frame import CanonicalFrame
from .generate import TargetGeometry, background_primitives, generate_geometry
from .primitives import (
    Circle,
    Curve,
    DrawingPrimitive,
    Ellipse,
    Layer,
    Path,
    Point,
    Polyline,
    Rectangle,
    Shape,
    TextAnchor,
    TextRun,
)
from .rings import MIN_LINE_WIDTH_PT, generate_rings, line_width_pt, ring_discs

__all__ = [
    "BOUNDARY_LINE_WIDTH_PT",
    "MIN_LINE_WIDTH_PT",
    "CanonicalFrame",
    "Circle",
    "Curve",
    "DrawingPrimitive",
    "Ellipse",
    "Layer",
    "Path",
    "Point",
    "Polyline",
    "Rectangle",
    "Shape",
    "TargetGeometry",
    "TextAnchor",
    "TextRun",
    "background_primitives",
    "band_rectangle",
    "boundary_lines",
    "figure_anchors",
    "generate_bands",
    "generate_figures",
    "generate_geometry",
    "generate_rings",
    "line_width_pt",
    "outline_path",
    "ring_discs",
]
