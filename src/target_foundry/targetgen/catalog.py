"""Static catalog of canonical target designs.

Each entry is keyed by ``(family, selector)`` and describes the unscaled
design in canonical inches, origin at the design centre (+y up) for rings
and bands and at the design's bottom-left corner for figure placements.
Metric designs are written in millimetres and converted once at import.

The catalog is built at import time and is read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .errors import CatalogMiss
from .families import DOT_SELECTOR, Family, Strategy
from .units import inches_to_points, mm_to_inches, yards_to_metres


class RingShape(Enum):
    CIRCLE = "circle"
    ELLIPSE = "ellipse"


class BandKind(Enum):
    """Rectangular regions of banded service targets."""

    BAND = "band"
    """Vertical band through the centre."""

    PATCH = "patch"
    """Patch above or below the centre."""

    SIDE = "side"
    """Region left or right of the band."""


@dataclass(frozen=True, slots=True)
class Ring:
    """One scoring ring.

    Attributes:
        name: Ring name ("bull", "inner", "7", ...).
        radius: Horizontal semi-axis in inches.
        fill: Colour of the zone inside the ring.
        line: Colour of the scoring line on the ring, or None for an edge without a line.
        ry: Vertical semi-axis for elliptical rings (None for circles).
    """

    name: str
    radius: float
    fill: str
    line: str | None = "black"
    ry: float | None = None

    def __post_init__(self) -> None:
        if self.radius <= 0 or (self.ry is not None and self.ry <= 0):
            raise ValueError(f"Ring {self.name!r} must have positive axes")

    @property
    def shape(self) -> RingShape:
        if self.ry is None or self.ry == self.radius:
            return RingShape.CIRCLE
        return RingShape.ELLIPSE

    @property
    def vertical_radius(self) -> float:
        return self.radius if self.ry is None else self.ry

    @property
    def size(self) -> tuple[float, float]:
        """Bounding (width, height) of the ring in inches."""
        return (2 * self.radius, 2 * self.vertical_radius)


@dataclass(frozen=True, slots=True)
class RingSet:
    """Concentric rings sharing one centre.

    Attributes:
        rings: Rings ordered outermost first.
        centre: Offset of the common centre from the design centre, in inches.
    """

    rings: tuple[Ring, ...]
    centre: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        if not self.rings:
            raise ValueError("RingSet needs at least one ring")
        for outer, inner in zip(self.rings, self.rings[1:]):
            if inner.radius > outer.radius or inner.vertical_radius > outer.vertical_radius:
                raise ValueError(f"Ring {inner.name!r} must lie inside {outer.name!r}")


@dataclass(frozen=True, slots=True)
class OutlineLine:
    """Straight segment to ``(x, y)`` in figure-local inches."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class OutlineCurve:
    """Quadratic segment through control ``(cx, cy)`` to ``(x, y)``."""

    cx: float
    cy: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class FigureOutline:
    """Silhouette outline in figure-local inches, origin at its bottom-left.

    Attributes:
        name: Outline name.
        width: Bounding width in inches.
        height: Bounding height in inches.
        start: First point of the outline.
        segments: Lines plus one or two curves for the rounded shoulders.
    """

    name: str
    width: float
    height: float
    start: tuple[float, float]
    segments: tuple[OutlineLine | OutlineCurve, ...]

    def __post_init__(self) -> None:
        curves = sum(1 for seg in self.segments if isinstance(seg, OutlineCurve))
        if not 1 <= curves <= 2:
            raise ValueError(f"Outline {self.name!r} must have one or two curve segments, got {curves}")
        for x, y in self.points():
            if not (0 <= x <= self.width and 0 <= y <= self.height):
                raise ValueError(f"Outline {self.name!r} point ({x}, {y}) outside its bounds")

    def points(self) -> list[tuple[float, float]]:
        """Every vertex and control point, for bounds checks."""
        out = [self.start]
        for seg in self.segments:
            if isinstance(seg, OutlineCurve):
                out.append((seg.cx, seg.cy))
            out.append((seg.x, seg.y))
        return out


@dataclass(frozen=True, slots=True)
class FigurePlacement:
    """A figure placed on a target.

    Attributes:
        outline: The silhouette drawn.
        offset: Distance in inches from the design's left edge to the figure's left edge.
        baseline: Height in inches of the figure's bottom above the design's bottom edge.
        fill: Figure colour.
    """

    outline: FigureOutline
    offset: float
    baseline: float
    fill: str = "brown"


@dataclass(frozen=True, slots=True)
class Band:
    """Rectangular band, patch or side region centred at ``centre`` (inches from design centre)."""

    kind: BandKind
    centre: tuple[float, float]
    width: float
    height: float
    fill: str


@dataclass(frozen=True, slots=True)
class CanonicalTarget:
    """Immutable catalog entry describing an unscaled target design.

    Attributes:
        family: Target family.
        selector: Class/year/type selector within the family.
        title: Human-readable name printed on the target.
        width: Canonical width in inches.
        height: Canonical height in inches.
        strategy: Which shape emitter draws the entry.
        distances: Canonical shooting distances in the family's unit.
        face: Target face colour.
        ring_sets: Ring sets (rings and bands strategies).
        figures: Figure placements (figures strategy).
        bands: Band regions (bands strategy).
        horizon: Height in inches splitting a two-tone face (None for one tone).
        top: Default colour above the horizon.
        bottom: Default colour below the horizon.
        centre_ring: Name of the ring fitted in centre-only mode.
        line_width: Scoring line width in inches.
        paint_page: Paint the face over the whole drawable rectangle.
    """

    family: Family
    selector: str
    title: str
    width: float
    height: float
    strategy: Strategy
    distances: tuple[float, ...] = ()
    face: str = "white"
    ring_sets: tuple[RingSet, ...] = ()
    figures: tuple[FigurePlacement, ...] = ()
    bands: tuple[Band, ...] = ()
    horizon: float | None = None
    top: str | None = None
    bottom: str | None = None
    centre_ring: str | None = None
    line_width: float = 0.5
    paint_page: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"{self.key}: canonical size must be positive")
        if self.strategy is Strategy.RINGS and not self.ring_sets:
            raise ValueError(f"{self.key}: ring strategy needs ring sets")
        if self.strategy is Strategy.FIGURES and not self.figures:
            raise ValueError(f"{self.key}: figure strategy needs figures")
        if self.strategy is Strategy.BANDS and not self.bands:
            raise ValueError(f"{self.key}: band strategy needs bands")
        if self.centre_ring is not None:
            self.ring(self.centre_ring)
        for placement in self.figures:
            right = placement.offset + placement.outline.width
            top = placement.baseline + placement.outline.height
            if placement.offset < 0 or right > self.width or placement.baseline < 0 or top > self.height:
                raise ValueError(f"{self.key}: figure {placement.outline.name!r} outside the design")

    @property
    def key(self) -> tuple[Family, str]:
        return (self.family, self.selector)

    @property
    def width_pt(self) -> float:
        return inches_to_points(self.width)

    @property
    def height_pt(self) -> float:
        return inches_to_points(self.height)

    @property
    def two_tone(self) -> bool:
        return self.horizon is not None

    def ring(self, name: str) -> Ring:
        for ring_set in self.ring_sets:
            for ring in ring_set.rings:
                if ring.name == name:
                    return ring
        raise KeyError(f"{self.key}: no ring named {name!r}")

    def centre_size(self) -> tuple[float, float]:
        """(width, height) in inches of the ring fitted in centre-only mode.

        Raises:
            CatalogMiss: If the entry has no centre-only variant.
        """
        if self.centre_ring is None:
            raise CatalogMiss(self.family.value, self.selector, "has no centre-only variant", variant="centre")
        return self.ring(self.centre_ring).size


@dataclass(frozen=True, slots=True)
class ChasPreset:
    """Named bundle of distance-equivalence parameters.

    Attributes:
        name: Preset name as passed in the ``CHAS`` parameter.
        metres: Actual shooting distance in metres.
        equiv: Distance in metres the printed target represents.
        paper: Paper size the preset prints on.
        description: Line printed on the target.
    """

    name: str
    metres: float
    equiv: float
    paper: str
    description: str


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def _scoring(name: str, radius: float, ry: float | None = None) -> Ring:
    return Ring(name, radius, fill="white", line="black", ry=ry)


def _bull(radius: float) -> Ring:
    return Ring("bull", radius, fill="black", line=None)


def _bullseye(
    year: int,
    target_class: int,
    title: str,
    size: tuple[float, float],
    rings: tuple[Ring, ...],
    distances: tuple[float, ...],
) -> CanonicalTarget:
    return CanonicalTarget(
        family=Family.BULLSEYE,
        selector=f"{year}-{target_class}",
        title=title,
        width=size[0],
        height=size[1],
        strategy=Strategy.RINGS,
        distances=distances,
        ring_sets=(RingSet(rings),),
        centre_ring="inner",
        line_width=0.5,
    )


def _issf(
    selector: str,
    title: str,
    card_mm: float,
    one_ring_mm: float,
    step_mm: float,
    aiming_mm: float,
    distance: float,
    line_mm: float,
) -> CanonicalTarget:
    """Ten-ring target; rings inside the black aiming mark get white lines."""
    aiming_r = mm_to_inches(aiming_mm) / 2
    rings: list[Ring] = []
    in_black = False
    for number in range(1, 11):
        radius = mm_to_inches(one_ring_mm - (number - 1) * step_mm) / 2
        if radius > aiming_r + 1e-9:
            rings.append(Ring(str(number), radius, fill="white", line="black"))
            continue
        if not in_black:
            rings.append(Ring("aiming", aiming_r, fill="black", line=None))
            in_black = True
        rings.append(Ring(str(number), radius, fill="black", line="white"))
    card = mm_to_inches(card_mm)
    return CanonicalTarget(
        family=Family.ISSF,
        selector=selector,
        title=title,
        width=card,
        height=card,
        strategy=Strategy.RINGS,
        distances=(distance,),
        ring_sets=(RingSet(tuple(rings)),),
        centre_ring="aiming",
        line_width=mm_to_inches(line_mm),
    )


def _biathlon(selector: str, title: str, rings_mm: tuple[tuple[str, float, str, str | None], ...]) -> CanonicalTarget:
    rings = tuple(Ring(name, mm_to_inches(d) / 2, fill=fill, line=line) for name, d, fill, line in rings_mm)
    pitch = mm_to_inches(150)
    return CanonicalTarget(
        family=Family.BIATHLON,
        selector=selector,
        title=title,
        width=mm_to_inches(750),
        height=mm_to_inches(200),
        strategy=Strategy.RINGS,
        distances=(50,),
        ring_sets=tuple(RingSet(rings, centre=(index * pitch, 0.0)) for index in range(-2, 3)),
        line_width=mm_to_inches(1),
    )


def _patches(dy: float, width: float, height: float, fill: str) -> tuple[Band, Band]:
    return (
        Band(BandKind.PATCH, (0.0, dy), width, height, fill),
        Band(BandKind.PATCH, (0.0, -dy), width, height, fill),
    )


def _sides(dx: float, width: float, height: float, fill: str) -> tuple[Band, Band]:
    return (
        Band(BandKind.SIDE, (-dx, 0.0), width, height, fill),
        Band(BandKind.SIDE, (dx, 0.0), width, height, fill),
    )


HEAD_AND_SHOULDERS = FigureOutline(
    name="head-and-shoulders",
    width=18,
    height=18,
    start=(0, 0),
    segments=(
        OutlineLine(0, 8),
        OutlineCurve(0, 11, 4, 11.5),
        OutlineLine(6, 12),
        OutlineLine(6, 13),
        OutlineLine(5.5, 15),
        OutlineLine(6.5, 17),
        OutlineLine(9, 18),
        OutlineLine(11.5, 17),
        OutlineLine(12.5, 15),
        OutlineLine(12, 13),
        OutlineLine(12, 12),
        OutlineLine(14, 11.5),
        OutlineCurve(18, 11, 18, 8),
        OutlineLine(18, 0),
    ),
)

KNEELING = FigureOutline(
    name="kneeling",
    width=20,
    height=32,
    start=(0, 0),
    segments=(
        OutlineLine(0, 18),
        OutlineCurve(0, 21, 5, 22),
        OutlineLine(7, 22.5),
        OutlineLine(7, 24),
        OutlineLine(6.5, 27),
        OutlineLine(8, 31),
        OutlineLine(10, 32),
        OutlineLine(12, 31),
        OutlineLine(13.5, 27),
        OutlineLine(13, 24),
        OutlineLine(13, 22.5),
        OutlineLine(15, 22),
        OutlineCurve(20, 21, 20, 18),
        OutlineLine(20, 0),
    ),
)

STANDING = FigureOutline(
    name="standing",
    width=20,
    height=66,
    start=(2, 0),
    segments=(
        OutlineLine(2, 48),
        OutlineCurve(2, 52, 6, 53),
        OutlineLine(8, 53.5),
        OutlineLine(8, 56),
        OutlineLine(7.5, 60),
        OutlineLine(8.5, 64),
        OutlineLine(10, 66),
        OutlineLine(11.5, 64),
        OutlineLine(12.5, 60),
        OutlineLine(12, 56),
        OutlineLine(12, 53.5),
        OutlineLine(14, 53),
        OutlineCurve(18, 52, 18, 48),
        OutlineLine(18, 0),
    ),
)


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

_ENTRIES: tuple[CanonicalTarget, ...] = (
    # Wimbledon pattern: elliptical outer and inner rings around a round bull.
    _bullseye(
        1862, 1, "Wimbledon 1862, first class",
        (144, 72),
        (_scoring("outer", 60, ry=33), _scoring("inner", 36, ry=24), _bull(18)),
        (700, 800, 900),
    ),
    _bullseye(
        1862, 2, "Wimbledon 1862, second class",
        (96, 72),
        (_scoring("outer", 42, ry=33), _scoring("inner", 24, ry=18), _bull(12)),
        (400, 500, 600),
    ),
    _bullseye(
        1862, 3, "Wimbledon 1862, third class",
        (48, 72),
        (_scoring("outer", 22, ry=33), _scoring("inner", 12, ry=16), _bull(4)),
        (100, 200, 300),
    ),
    _bullseye(
        1880, 1, "NRA 1880, long range",
        (120, 72),
        (_scoring("magpie", 35), _scoring("inner", 27), _bull(18)),
        (800, 900, 1000),
    ),
    _bullseye(
        1880, 2, "NRA 1880, mid range",
        (72, 72),
        (_scoring("magpie", 24), _scoring("inner", 18), _bull(12)),
        (500, 600),
    ),
    _bullseye(
        1880, 3, "NRA 1880, short range",
        (48, 72),
        (_scoring("magpie", 16), _scoring("inner", 10), _bull(4)),
        (200, 300),
    ),
    _bullseye(
        1908, 1, "Bisley 1908, long range",
        (96, 72),
        (_scoring("magpie", 30), _scoring("inner", 21), _bull(12)),
        (800, 900, 1000),
    ),
    _bullseye(
        1908, 2, "Bisley 1908, mid range",
        (72, 72),
        (_scoring("magpie", 21), _scoring("inner", 13.5), _bull(7.5)),
        (500, 600),
    ),
    _bullseye(
        1908, 3, "Bisley 1908, short range",
        (48, 72),
        (_scoring("magpie", 12), _scoring("inner", 7.5), _bull(3)),
        (200, 300),
    ),
    CanonicalTarget(
        family=Family.FIGURE,
        selector="1",
        title="Four head-and-shoulders figures",
        width=96,
        height=36,
        strategy=Strategy.FIGURES,
        distances=(100, 200, 300),
        figures=tuple(FigurePlacement(HEAD_AND_SHOULDERS, offset, 10) for offset in (3, 27, 51, 75)),
        horizon=12,
        top="white",
        bottom="buff",
    ),
    CanonicalTarget(
        family=Family.FIGURE,
        selector="2",
        title="Three kneeling figures",
        width=72,
        height=48,
        strategy=Strategy.FIGURES,
        distances=(200, 300, 400),
        figures=tuple(FigurePlacement(KNEELING, offset, 8) for offset in (4, 26, 48)),
        horizon=16,
        top="white",
        bottom="buff",
    ),
    CanonicalTarget(
        family=Family.FIGURE,
        selector="3",
        title="Standing figure",
        width=36,
        height=72,
        strategy=Strategy.FIGURES,
        distances=(300, 500),
        figures=(FigurePlacement(STANDING, 8, 3),),
        horizon=24,
        top="white",
        bottom="buff",
    ),
    CanonicalTarget(
        family=Family.SERVICE,
        selector="1",
        title="Service rifle, banded, with side regions",
        width=72,
        height=72,
        strategy=Strategy.BANDS,
        distances=(200, 300, 500, 600),
        face="buff",
        bands=(
            Band(BandKind.BAND, (0.0, 0.0), 12, 72, "khaki"),
            *_patches(20, 18, 10, "brown"),
            *_sides(28, 12, 36, "grey"),
        ),
        ring_sets=(RingSet((_bull(4),)),),
    ),
    CanonicalTarget(
        family=Family.SERVICE,
        selector="2",
        title="Service rifle, banded",
        width=72,
        height=48,
        strategy=Strategy.BANDS,
        distances=(100, 200),
        face="buff",
        bands=(
            Band(BandKind.BAND, (0.0, 0.0), 8, 48, "khaki"),
            *_patches(14, 12, 8, "brown"),
        ),
        ring_sets=(RingSet((_bull(3),)),),
    ),
    CanonicalTarget(
        family=Family.DOT,
        selector=DOT_SELECTOR,
        title="Calibration dot",
        width=1,
        height=1,
        strategy=Strategy.RINGS,
        ring_sets=(RingSet((Ring("dot", 0.5, fill="black", line=None),)),),
        paint_page=True,
    ),
    _biathlon(
        "prone",
        "Biathlon, prone",
        (("aiming", 115, "black", None), ("hit", 45, "black", "white")),
    ),
    _biathlon(
        "standing",
        "Biathlon, standing",
        (("hit", 115, "black", None),),
    ),
    _issf("300m-rifle", "300 m rifle", 1300, 1000, 100, 600, 300, 1.0),
    _issf("50m-rifle", "50 m rifle", 250, 154.4, 16, 112.4, 50, 0.2),
    _issf("25m-pistol", "25 m precision pistol", 550, 500, 50, 200, 25, 0.5),
    _issf("10m-air-rifle", "10 m air rifle", 80, 45.5, 5, 30.5, 10, 0.1),
    _issf("10m-air-pistol", "10 m air pistol", 170, 155.5, 16, 59.5, 10, 0.2),
)

CATALOG: MappingProxyType[tuple[Family, str], CanonicalTarget] = MappingProxyType(
    {entry.key: entry for entry in _ENTRIES}
)

CHAS_PRESETS: MappingProxyType[str, ChasPreset] = MappingProxyType(
    {
        preset.name: preset
        for preset in (
            ChasPreset("club-25", 25, 50, "A4", "Club 25 metre range, scaled from the 50 metre target"),
            ChasPreset(
                "club-20",
                yards_to_metres(20),
                50,
                "A4",
                "Club 20 yard range (18.3 m), scaled from the 50 metre target",
            ),
            ChasPreset("garden-10", 10, 50, "A4", "10 metre practice, scaled from the 50 metre target"),
            ChasPreset("airgun-6", 6, 10, "A5", "6 metre air gun practice, scaled from the 10 metre target"),
            ChasPreset("biathlon-10", 10, 50, "A4", "10 metre biathlon practice, scaled from 50 metres"),
        )
    }
)


def lookup(family: Family, selector: str) -> CanonicalTarget:
    """Return the catalog entry for ``(family, selector)``.

    Raises:
        CatalogMiss: If the combination is not defined.
    """
    entry = CATALOG.get((family, selector))
    if entry is None:
        known = ", ".join(entry_selector for fam, entry_selector in CATALOG if fam is family)
        raise CatalogMiss(family.value, selector, f"unknown selector. Known: {known}")
    return entry


def catalog_keys() -> tuple[tuple[Family, str], ...]:
    return tuple(CATALOG)


def entries_for(family: Family) -> tuple[CanonicalTarget, ...]:
    return tuple(entry for entry in _ENTRIES if entry.family is family)


def lookup_preset(family: Family, name: str, *, accepts_distance_scale: bool) -> ChasPreset:
    """Return a CHAS preset, rejecting unknown names and families without distance scaling.

    Raises:
        CatalogMiss: If the preset is unknown or not valid for ``family``.
    """
    if not accepts_distance_scale:
        raise CatalogMiss(family.value, None, "CHAS presets are not available for this family", variant=name)
    preset = CHAS_PRESETS.get(name.strip().lower())
    if preset is None:
        raise CatalogMiss(
            family.value, None, f"unknown CHAS preset. Known: {', '.join(CHAS_PRESETS)}", variant=name
        )
    return preset
