"""Silhouette figure emitter."""

from __future__ import annotations

import numpy as np

from ..catalog import CanonicalTarget, FigureOutline, FigurePlacement, OutlineCurve
from .frame import CanonicalFrame
from .primitives import Curve, Path, Point


def figure_anchors(entry: CanonicalTarget, *, centred: bool = False) -> list[float]:
    """Left-edge offsets (canonical inches) of each figure placement.

    With ``centred`` the catalog offsets are ignored and the figures are
    centred on evenly spaced stations across the design width.
    """
    if not centred:
        return [placement.offset for placement in entry.figures]
    count = len(entry.figures)
    pitch = entry.width / count
    return [(index + 0.5) * pitch - placement.outline.width / 2 for index, placement in enumerate(entry.figures)]


def _outline_coords(outline: FigureOutline) -> np.ndarray:
    coords = [outline.start]
    for segment in outline.segments:
        if isinstance(segment, OutlineCurve):
            coords.append((segment.cx, segment.cy))
        coords.append((segment.x, segment.y))
    return np.asarray(coords, dtype=np.float64)


def outline_path(placement: FigurePlacement, left: float, frame: CanonicalFrame) -> Path:
    """Build the closed page-space path for one placed figure.

    Args:
        placement: The placement giving outline, baseline and colour.
        left: Left edge of the figure in canonical inches from the design's left edge.
        frame: Coordinate transform for the request.
    """
    outline = placement.outline
    local = _outline_coords(outline) + np.array([left, placement.baseline])
    page = [Point(float(x), float(y)) for x, y in frame.from_bottom_left(local)]

    cursor = iter(page)
    start = next(cursor)
    segments: list[Point | Curve] = []
    for segment in outline.segments:
        if isinstance(segment, OutlineCurve):
            control = next(cursor)
            segments.append(Curve(control, next(cursor)))
        else:
            segments.append(next(cursor))
    return Path(start, tuple(segments), fill=placement.fill)


def generate_figures(entry: CanonicalTarget, frame: CanonicalFrame, *, centred: bool = False) -> list[Path]:
    anchors = figure_anchors(entry, centred=centred)
    return [outline_path(placement, left, frame) for placement, left in zip(entry.figures, anchors)]
