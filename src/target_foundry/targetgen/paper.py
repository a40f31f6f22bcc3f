"""Page geometry resolution.

Named paper sizes resolve to a media rectangle in PDF points (portrait, +y
up, origin bottom-left). Landscape exchanges the media axes before anything
else is computed; the trim margin is then inset symmetrically to give the
drawable rectangle every later stage works in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from reportlab.lib import pagesizes

from .errors import DimensionOutOfRange, InvalidPaperSize
from .units import inches_to_points


class Orientation(Enum):
    """Page orientation."""

    PORTRAIT = "Portrait"
    LANDSCAPE = "Landscape"


def _poster(width_in: float, height_in: float) -> tuple[float, float]:
    return (inches_to_points(width_in), inches_to_points(height_in))


PAPER_SIZES: MappingProxyType[str, tuple[float, float]] = MappingProxyType(
    {
        "A0": pagesizes.portrait(pagesizes.A0),
        "A1": pagesizes.portrait(pagesizes.A1),
        "A2": pagesizes.portrait(pagesizes.A2),
        "A3": pagesizes.portrait(pagesizes.A3),
        "A4": pagesizes.portrait(pagesizes.A4),
        "A5": pagesizes.portrait(pagesizes.A5),
        "A6": pagesizes.portrait(pagesizes.A6),
        "B4": pagesizes.portrait(pagesizes.B4),
        "B5": pagesizes.portrait(pagesizes.B5),
        "Letter": pagesizes.portrait(pagesizes.LETTER),
        "Legal": pagesizes.portrait(pagesizes.LEGAL),
        "Tabloid": pagesizes.portrait(pagesizes.TABLOID),
        "18x24": _poster(18, 24),
        "24x36": _poster(24, 36),
        "36x48": _poster(36, 48),
        "48x72": _poster(48, 72),
    }
)

_PAPER_LOOKUP = {name.lower(): name for name in PAPER_SIZES}


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle in page points.

    Attributes:
        x1: Left edge.
        y1: Bottom edge.
        x2: Right edge.
        y2: Top edge.
    """

    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self) -> None:
        if self.x2 < self.x1 or self.y2 < self.y1:
            raise ValueError(f"Degenerate rectangle: ({self.x1}, {self.y1}, {self.x2}, {self.y2})")

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    @property
    def midx(self) -> float:
        return (self.x1 + self.x2) / 2

    @property
    def midy(self) -> float:
        return (self.y1 + self.y2) / 2

    def contains(self, other: Rect) -> bool:
        return self.x1 <= other.x1 and self.y1 <= other.y1 and other.x2 <= self.x2 and other.y2 <= self.y2


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Resolved page: media rectangle plus the drawable rectangle inside it.

    Attributes:
        paper: Canonical paper name.
        orientation: Requested orientation.
        trim_pt: Trim margin in points.
        media: Full page rectangle.
        drawable: Media rectangle inset by the trim margin.
    """

    paper: str
    orientation: Orientation
    trim_pt: float
    media: Rect
    drawable: Rect


def paper_names() -> tuple[str, ...]:
    return tuple(PAPER_SIZES)


def canonical_paper_name(paper: str) -> str:
    """Return the enumerated spelling of ``paper`` (case-insensitive).

    Raises:
        InvalidPaperSize: If the name is not enumerated.
    """
    name = _PAPER_LOOKUP.get(paper.strip().lower())
    if name is None:
        raise InvalidPaperSize(paper, paper_names())
    return name


def resolve_page(
    paper: str,
    orientation: Orientation | str = Orientation.PORTRAIT,
    trim_in: float = 0.0,
) -> PageGeometry:
    """Resolve a named paper size, orientation and trim into page geometry.

    Args:
        paper: Paper name from :data:`PAPER_SIZES`.
        orientation: Portrait or Landscape; Landscape swaps width and height.
        trim_in: Margin in inches removed from every edge.

    Returns:
        PageGeometry with media and drawable rectangles.

    Raises:
        InvalidPaperSize: If ``paper`` is not enumerated.
        DimensionOutOfRange: If the trim is negative or leaves no drawable area.
    """
    if isinstance(orientation, str):
        orientation = Orientation(orientation)
    name = canonical_paper_name(paper)
    width, height = PAPER_SIZES[name]
    if orientation is Orientation.LANDSCAPE:
        width, height = height, width

    trim_pt = inches_to_points(trim_in)
    max_trim_in = min(width, height) / 2 / inches_to_points(1)
    if trim_in < 0 or trim_pt * 2 >= min(width, height):
        raise DimensionOutOfRange("Trim", trim_in, 0, max_trim_in, "in")

    media = Rect(0.0, 0.0, width, height)
    drawable = Rect(trim_pt, trim_pt, width - trim_pt, height - trim_pt)
    return PageGeometry(
        paper=name,
        orientation=orientation,
        trim_pt=trim_pt,
        media=media,
        drawable=drawable,
    )
