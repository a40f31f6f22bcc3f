"""Drawing primitives handed to the rendering backend.

All coordinates are page-space points after scale and offset have been
applied. The page frame is the PDF one:
- Origin at the bottom-left corner of the media rectangle
- +x to the right, +y upward

Colours are palette names (see ``targetgen.colours``); ``None`` means the
shape is not filled (or not stroked).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Layer(IntEnum):
    """Composition layers, painted in ascending order."""

    BACKGROUND = 0
    FIGURES = 1
    RINGS = 2
    BOUNDARY = 3
    TEXT = 4


class TextAnchor(Enum):
    """Horizontal alignment of a text run relative to its position."""

    LEFT = "left"
    CENTER = "center"


@dataclass(frozen=True, slots=True)
class Point:
    """2D position in points."""

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Circle:
    """Circle centred on ``center``."""

    center: Point
    radius: float
    fill: str | None = None
    stroke: str | None = None
    line_width: float = 0.0


@dataclass(frozen=True, slots=True)
class Ellipse:
    """Axis-aligned ellipse with horizontal semi-axis ``rx`` and vertical ``ry``."""

    center: Point
    rx: float
    ry: float
    fill: str | None = None
    stroke: str | None = None
    line_width: float = 0.0


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Rectangle spanned by two opposite corners."""

    corner1: Point
    corner2: Point
    fill: str | None = None
    stroke: str | None = None
    line_width: float = 0.0

    @property
    def width(self) -> float:
        return abs(self.corner2.x - self.corner1.x)

    @property
    def height(self) -> float:
        return abs(self.corner2.y - self.corner1.y)


@dataclass(frozen=True, slots=True)
class Polyline:
    """Connected line segments; a two-point polyline is a single line."""

    points: tuple[Point, ...]
    closed: bool = False
    fill: str | None = None
    stroke: str | None = "black"
    line_width: float = 0.5

    def __post_init__(self) -> None:
        if len(self.points) < 2:
            raise ValueError(f"Polyline needs at least 2 points, got {len(self.points)}")


@dataclass(frozen=True, slots=True)
class Curve:
    """Quadratic curve segment from the current point via ``control`` to ``end``."""

    control: Point
    end: Point


@dataclass(frozen=True, slots=True)
class Path:
    """Closed outline built from line-to points and curve segments.

    Attributes:
        start: First point of the outline.
        segments: Each item is either a ``Point`` (line to) or a ``Curve``.
    """

    start: Point
    segments: tuple[Point | Curve, ...]
    fill: str | None = None
    stroke: str | None = None
    line_width: float = 0.0

    @property
    def curve_count(self) -> int:
        return sum(1 for segment in self.segments if isinstance(segment, Curve))


@dataclass(frozen=True, slots=True)
class TextRun:
    """A single line of annotation text."""

    position: Point
    font_size: float
    text: str
    colour: str = "black"
    anchor: TextAnchor = TextAnchor.LEFT


Shape = Circle | Ellipse | Rectangle | Polyline | Path
DrawingPrimitive = Circle | Ellipse | Rectangle | Polyline | Path | TextRun
