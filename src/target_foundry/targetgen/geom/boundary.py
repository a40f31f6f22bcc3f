from __future__ import annotations

from ..paper import Rect
from ..scaling import ScaleResult
from .primitives import Point, Polyline

BOUNDARY_LINE_WIDTH_PT = 0.5


def boundary_lines(region: Rect, scale: ScaleResult, *, colour: str = "black") -> list[Polyline]:
    """Cutting guides along the edges of the scaled design.

    Exactly four lines (bottom, right, top, left) when the design leaves a
    margin on either axis, none when it fills the drawable rectangle or only
    the centre was fitted.
    """
    if scale.centre_only or not scale.has_margin:
        return []
    corners = (
        Point(region.x1, region.y1),
        Point(region.x2, region.y1),
        Point(region.x2, region.y2),
        Point(region.x1, region.y2),
    )
    return [
        Polyline((corners[index], corners[(index + 1) % 4]), stroke=colour, line_width=BOUNDARY_LINE_WIDTH_PT)
        for index in range(4)
    ]
