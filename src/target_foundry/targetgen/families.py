from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .errors import CatalogMiss
from .units import DistanceUnit


class Family(Enum):
    """Target families."""

    BULLSEYE = "bullseye"
    """Historical ring targets, selected by year and class."""

    FIGURE = "figure"
    """Silhouette figure targets on a two-tone background."""

    SERVICE = "service"
    """Banded service-rifle targets."""

    DOT = "dot"
    """Single calibration dot of a requested physical diameter."""

    BIATHLON = "biathlon"
    """Five-circle biathlon targets (prone/standing)."""

    ISSF = "issf"
    """Modern ten-ring targets, selected by event."""


class Strategy(Enum):
    """How a catalog entry's shapes are emitted."""

    RINGS = "rings"
    FIGURES = "figures"
    BANDS = "bands"


@dataclass(frozen=True, slots=True)
class FamilyConvention:
    """Per-family conventions shared by every catalog entry of the family.

    Attributes:
        distance_unit: Unit canonical shooting distances are quoted in.
        size_places: Decimal places for printed sizes in inches.
        accepts_distance_scale: Whether Metres/Equiv/CHAS may fix the scale.
    """

    distance_unit: DistanceUnit
    size_places: int
    accepts_distance_scale: bool = False


FAMILY_CONVENTIONS: MappingProxyType[Family, FamilyConvention] = MappingProxyType(
    {
        Family.BULLSEYE: FamilyConvention(DistanceUnit.YARDS, size_places=2),
        Family.FIGURE: FamilyConvention(DistanceUnit.YARDS, size_places=1),
        Family.SERVICE: FamilyConvention(DistanceUnit.YARDS, size_places=1),
        Family.DOT: FamilyConvention(DistanceUnit.METRES, size_places=2),
        Family.BIATHLON: FamilyConvention(DistanceUnit.METRES, size_places=2, accepts_distance_scale=True),
        Family.ISSF: FamilyConvention(DistanceUnit.METRES, size_places=2, accepts_distance_scale=True),
    }
)

DOT_SELECTOR = "standard"


def convention_for(family: Family) -> FamilyConvention:
    return FAMILY_CONVENTIONS[family]


def selector_for(
    family: Family,
    *,
    year: int | None = None,
    target_class: int | None = None,
    target_type: str | None = None,
) -> str:
    """Build the catalog selector for a family from the request parameters.

    Bullseye targets are keyed ``"<year>-<class>"``, figure and service
    targets by ``"<class>"``, biathlon and ISSF targets by their type and
    the calibration dot by a single fixed selector.

    Raises:
        CatalogMiss: If a parameter the family needs is missing.
    """
    if family is Family.BULLSEYE:
        if year is None or target_class is None:
            raise CatalogMiss(family.value, None, "requires both Year and Class")
        return f"{year}-{target_class}"
    if family in (Family.FIGURE, Family.SERVICE):
        if target_class is None:
            raise CatalogMiss(family.value, None, "requires Class")
        return str(target_class)
    if family in (Family.BIATHLON, Family.ISSF):
        if not target_type:
            raise CatalogMiss(family.value, None, "requires Type")
        return target_type.strip().lower()
    if family is Family.DOT:
        return DOT_SELECTOR
    raise CatalogMiss(str(family), None, "unsupported family")
