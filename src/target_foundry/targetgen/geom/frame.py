"""Canonical-inch to page-point coordinate transform.

The target centre sits at the centre of the drawable rectangle. A canonical
point ``(x, y)`` in inches relative to that centre lands at::

    centre + (x, y) * POINTS_PER_INCH * image_scale

where ``image_scale`` is the dimensionless multiplier from the scaler. The
scaled design region may extend past the drawable rectangle (centre-only
mode); nothing here clips.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..paper import Rect
from ..units import POINTS_PER_INCH
from .primitives import Point


@dataclass(frozen=True, slots=True)
class CanonicalFrame:
    """Maps canonical inches onto the page.

    Attributes:
        centre: Page position of the design centre, in points.
        image_scale: Dimensionless scale applied to canonical lengths.
        width: Canonical design width in inches.
        height: Canonical design height in inches.
    """

    centre: Point
    image_scale: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.image_scale <= 0:
            raise ValueError(f"image_scale must be positive, got {self.image_scale}")

    @classmethod
    def centred_in(cls, drawable: Rect, image_scale: float, width: float, height: float) -> CanonicalFrame:
        return cls(Point(drawable.midx, drawable.midy), image_scale, width, height)

    @property
    def points_per_inch(self) -> float:
        return POINTS_PER_INCH * self.image_scale

    def length(self, inches: float) -> float:
        """Scale a canonical length to page points."""
        return inches * self.points_per_inch

    def to_page(self, xy: ArrayLike) -> NDArray[np.float64]:
        """Transform an ``(N, 2)`` array of centre-relative inches to page points."""
        coords = np.asarray(xy, dtype=np.float64).reshape(-1, 2)
        origin = np.array([self.centre.x, self.centre.y], dtype=np.float64)
        return origin + coords * self.points_per_inch

    def point(self, x: float, y: float) -> Point:
        px, py = self.to_page((x, y))[0]
        return Point(float(px), float(py))

    def from_bottom_left(self, xy: ArrayLike) -> NDArray[np.float64]:
        """Like :meth:`to_page` for inches measured from the design's bottom-left corner."""
        coords = np.asarray(xy, dtype=np.float64).reshape(-1, 2)
        return self.to_page(coords - np.array([self.width / 2, self.height / 2]))

    @property
    def region(self) -> Rect:
        """The full scaled design rectangle in page points."""
        half_w = self.length(self.width) / 2
        half_h = self.length(self.height) / 2
        return Rect(
            self.centre.x - half_w,
            self.centre.y - half_h,
            self.centre.x + half_w,
            self.centre.y + half_h,
        )
