from __future__ import annotations

from ..catalog import Band, CanonicalTarget
from .frame import CanonicalFrame
from .primitives import Rectangle


def band_rectangle(band: Band, frame: CanonicalFrame) -> Rectangle:
    cx, cy = band.centre
    return Rectangle(
        frame.point(cx - band.width / 2, cy - band.height / 2),
        frame.point(cx + band.width / 2, cy + band.height / 2),
        fill=band.fill,
    )


def generate_bands(entry: CanonicalTarget, frame: CanonicalFrame) -> list[Rectangle]:
    """Bands, patches and side regions in catalog order."""
    return [band_rectangle(band, frame) for band in entry.bands]
