"""Ring emitter.

Rings are painted outermost first as filled discs. A ring with a scoring
line becomes two discs: one of ``r + lw/2`` in the line colour, then one of
``r - lw/2`` in the zone colour. Each inner ring overpaints the zone of the
ring outside it, so the annuli come out without any stroked outlines.
"""

from __future__ import annotations

from ..catalog import CanonicalTarget, Ring, RingSet, RingShape
from .frame import CanonicalFrame
from .primitives import Circle, Ellipse, Point

# Thinner lines disappear on most printers.
MIN_LINE_WIDTH_PT = 0.25


def line_width_pt(entry: CanonicalTarget, frame: CanonicalFrame) -> float:
    return max(frame.length(entry.line_width), MIN_LINE_WIDTH_PT)


def _disc(centre: Point, rx: float, ry: float, fill: str, shape: RingShape) -> Circle | Ellipse:
    if shape is RingShape.CIRCLE:
        return Circle(centre, rx, fill=fill)
    return Ellipse(centre, rx, ry, fill=fill)


def ring_discs(ring: Ring, centre: Point, frame: CanonicalFrame, line_width: float) -> list[Circle | Ellipse]:
    """Discs for one ring, in paint order."""
    rx = frame.length(ring.radius)
    ry = frame.length(ring.vertical_radius)
    if ring.line is None:
        return [_disc(centre, rx, ry, ring.fill, ring.shape)]

    half = line_width / 2
    discs = [_disc(centre, rx + half, ry + half, ring.line, ring.shape)]
    if rx - half > 0 and ry - half > 0:
        discs.append(_disc(centre, rx - half, ry - half, ring.fill, ring.shape))
    return discs


def ring_set_primitives(ring_set: RingSet, frame: CanonicalFrame, line_width: float) -> list[Circle | Ellipse]:
    centre = frame.point(*ring_set.centre)
    primitives: list[Circle | Ellipse] = []
    for ring in ring_set.rings:
        primitives.extend(ring_discs(ring, centre, frame, line_width))
    return primitives


def generate_rings(entry: CanonicalTarget, frame: CanonicalFrame) -> list[Circle | Ellipse]:
    """Emit every ring set of ``entry`` in page coordinates."""
    line_width = line_width_pt(entry, frame)
    primitives: list[Circle | Ellipse] = []
    for ring_set in entry.ring_sets:
        primitives.extend(ring_set_primitives(ring_set, frame, line_width))
    return primitives
