"""Geometry generation for one resolved target.

Turns a catalog entry plus a scale result into page-space primitives grouped
by the layer they are painted on. The entry's strategy picks the emitter for
the middle layer (figures or bands); ring sets are always emitted on the
ring layer, which covers the bull of banded targets too.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..catalog import CanonicalTarget
from ..families import Strategy
from ..paper import Rect
from ..scaling import ScaleResult
from .bands import generate_bands
from .boundary import boundary_lines
from .figures import generate_figures
from .frame import CanonicalFrame
from .primitives import Point, Polyline, Rectangle, Shape
from .rings import generate_rings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TargetGeometry:
    """Primitives for one target, grouped by layer.

    Attributes:
        frame: Transform the primitives were produced with.
        background: Face or page background rectangles.
        figures: Silhouettes or bands.
        rings: Ring discs.
        boundary: Cutting guides around the scaled design.
    """

    frame: CanonicalFrame
    background: tuple[Rectangle, ...]
    figures: tuple[Shape, ...]
    rings: tuple[Shape, ...]
    boundary: tuple[Polyline, ...]


def _no_shapes(entry: CanonicalTarget, frame: CanonicalFrame, centred: bool) -> list[Shape]:
    return []


def _figure_shapes(entry: CanonicalTarget, frame: CanonicalFrame, centred: bool) -> list[Shape]:
    return list(generate_figures(entry, frame, centred=centred))


def _band_shapes(entry: CanonicalTarget, frame: CanonicalFrame, centred: bool) -> list[Shape]:
    return list(generate_bands(entry, frame))


_EMITTERS: dict[Strategy, Callable[[CanonicalTarget, CanonicalFrame, bool], list[Shape]]] = {
    Strategy.RINGS: _no_shapes,
    Strategy.FIGURES: _figure_shapes,
    Strategy.BANDS: _band_shapes,
}


def background_primitives(
    entry: CanonicalTarget,
    frame: CanonicalFrame,
    drawable: Rect,
    *,
    face: str | None = None,
    top: str | None = None,
    bottom: str | None = None,
) -> list[Rectangle]:
    """Face rectangles painted under everything else.

    Entries flagged ``paint_page`` cover the whole drawable rectangle.
    Two-tone entries split the scaled region at the horizon.
    """
    face = face or entry.face
    if entry.paint_page:
        return [Rectangle(Point(drawable.x1, drawable.y1), Point(drawable.x2, drawable.y2), fill=face)]

    region = frame.region
    lower_left = Point(region.x1, region.y1)
    upper_right = Point(region.x2, region.y2)
    if entry.horizon is None:
        return [Rectangle(lower_left, upper_right, fill=face)]

    horizon_y = float(frame.from_bottom_left((0.0, entry.horizon))[0][1])
    return [
        Rectangle(lower_left, Point(region.x2, horizon_y), fill=bottom or entry.bottom or face),
        Rectangle(Point(region.x1, horizon_y), upper_right, fill=top or entry.top or face),
    ]


def generate_geometry(
    entry: CanonicalTarget,
    drawable: Rect,
    scale: ScaleResult,
    *,
    face: str | None = None,
    top: str | None = None,
    bottom: str | None = None,
    figure_centred: bool = False,
) -> TargetGeometry:
    """Generate every shape of ``entry`` scaled and centred in ``drawable``.

    Args:
        entry: Catalog entry to draw.
        drawable: Drawable rectangle of the page.
        scale: Scale result for the request.
        face: Override for the face colour.
        top: Override for the colour above the horizon.
        bottom: Override for the colour below the horizon.
        figure_centred: Centre figures on evenly spaced stations.

    Returns:
        TargetGeometry with primitives grouped by layer.
    """
    frame = CanonicalFrame.centred_in(drawable, scale.image_scale, entry.width, entry.height)
    if figure_centred and entry.strategy is not Strategy.FIGURES:
        logger.info("FigureCentred ignored for %s[%s]", entry.family.value, entry.selector)

    geometry = TargetGeometry(
        frame=frame,
        background=tuple(background_primitives(entry, frame, drawable, face=face, top=top, bottom=bottom)),
        figures=tuple(_EMITTERS[entry.strategy](entry, frame, figure_centred)),
        rings=tuple(generate_rings(entry, frame)),
        boundary=tuple(boundary_lines(frame.region, scale)),
    )
    logger.debug(
        "Generated %s[%s]: %d figure shapes, %d ring discs, %d boundary lines",
        entry.family.value,
        entry.selector,
        len(geometry.figures),
        len(geometry.rings),
        len(geometry.boundary),
    )
    return geometry
