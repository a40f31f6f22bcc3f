"""Annotation text printed alongside the target.

Derived quantities follow the applied scale:

- An equivalent distance for each canonical distance ``d``: shooting the
  printed target at ``d * image_scale`` matches the original at ``d``. The
  native value and its cross-unit conversion are both computed from the
  unrounded product and rounded half-up afterwards.
- The printed size, in inches at the family's precision and in millimetres
  to one decimal place.

Text is laid out top-down from the drawable rectangle's top-left corner. The
oversize warning block is centred instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import CanonicalTarget
from .errors import OversizeWarning
from .families import FamilyConvention
from .geom.primitives import Point, TextAnchor, TextRun
from .paper import Rect
from .scaling import ScaleResult
from .units import DistanceUnit, points_to_inches, points_to_mm, round_half_up

MIN_FONT_SIZE = 7
LINE_SPACING = 1.25


@dataclass(frozen=True, slots=True)
class EquivalentDistance:
    """Printed-target shooting distance matching a canonical distance.

    Attributes:
        distance: Canonical distance the original target was shot at.
        unit: Unit of ``distance`` and ``value``.
        value: Equivalent distance, rounded half-up to a whole number.
        converted: Equivalent distance in the other unit, rounded half-up.
    """

    distance: float
    unit: DistanceUnit
    value: float
    converted: float

    @property
    def text(self) -> str:
        unit = self.unit.value
        return (
            f"Shooting at {self.value:.0f} {unit} ({self.converted:.0f} {self.unit.other.value}) "
            f"is equivalent to original at {self.distance:g} {unit}"
        )


def equivalent_distance(distance: float, image_scale: float, unit: DistanceUnit) -> EquivalentDistance:
    native = distance * image_scale
    return EquivalentDistance(
        distance=distance,
        unit=unit,
        value=round_half_up(native, 0),
        converted=round_half_up(unit.convert(native), 0),
    )


def equivalent_distances(
    entry: CanonicalTarget, scale: ScaleResult, convention: FamilyConvention
) -> list[EquivalentDistance]:
    return [equivalent_distance(d, scale.image_scale, convention.distance_unit) for d in entry.distances]


def printed_size_text(scale: ScaleResult, convention: FamilyConvention) -> str:
    places = convention.size_places
    width_in = round_half_up(points_to_inches(scale.scaled_width), places)
    height_in = round_half_up(points_to_inches(scale.scaled_height), places)
    width_mm = round_half_up(points_to_mm(scale.scaled_width), 1)
    height_mm = round_half_up(points_to_mm(scale.scaled_height), 1)
    label = "Printed centre size" if scale.centre_only else "Printed size"
    return f"{label} {width_in:.{places}f} x {height_in:.{places}f} in ({width_mm:.1f} x {height_mm:.1f} mm)"


def annotation_lines(
    entry: CanonicalTarget,
    scale: ScaleResult,
    convention: FamilyConvention,
    *,
    description: str | None = None,
) -> list[str]:
    """Text lines for a drawn target, in print order."""
    lines = [entry.title]
    if description:
        lines.append(description)
    lines.append(printed_size_text(scale, convention))
    lines.extend(item.text for item in equivalent_distances(entry, scale, convention))
    return lines


def oversize_lines(entry: CanonicalTarget, warning: OversizeWarning, paper: str) -> list[str]:
    req_w, req_h = (round_half_up(points_to_mm(v), 1) for v in warning.required)
    av_w, av_h = (round_half_up(points_to_mm(v), 1) for v in warning.available)
    return [
        f"{entry.title} does not fit on {paper}",
        f"Required {req_w:.1f} x {req_h:.1f} mm",
        f"Available {av_w:.1f} x {av_h:.1f} mm",
    ]


def font_size_for(drawable: Rect) -> float:
    return float(max(MIN_FONT_SIZE, round(min(drawable.width, drawable.height) / 75)))


def layout_lines(lines: list[str], drawable: Rect, *, colour: str = "black") -> list[TextRun]:
    """Left-aligned runs stacked down from the drawable top-left corner."""
    size = font_size_for(drawable)
    left = drawable.x1 + size / 2
    top = drawable.y2 - size / 2
    return [
        TextRun(Point(left, top - size * (1 + index * LINE_SPACING)), size, text, colour=colour)
        for index, text in enumerate(lines)
    ]


def layout_warning(lines: list[str], drawable: Rect, *, colour: str = "black") -> list[TextRun]:
    """Centred runs forming the oversize warning block."""
    size = font_size_for(drawable) * 1.5
    block = size * LINE_SPACING * len(lines)
    first = drawable.midy + block / 2 - size
    return [
        TextRun(Point(drawable.midx, first - index * size * LINE_SPACING), size, text, colour, TextAnchor.CENTER)
        for index, text in enumerate(lines)
    ]
