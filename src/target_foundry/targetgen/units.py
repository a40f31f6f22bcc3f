from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Annotated

from pydantic import BeforeValidator, WithJsonSchema

POINTS_PER_INCH = 72
MM_PER_INCH = 25.4
METRES_PER_YARD = 0.9144

_NUMBER_RE = re.compile(r"^\s*[+-]?\d+(?:\.\d+)?\s*$")
_LENGTH_RE = re.compile(r"^\s*([+-]?\d+(?:\.\d+)?)\s*([a-zA-Z]+)\s*$")

_INCHES_PER_UNIT: dict[str, float] = {
    "in": 1.0,
    "mm": 1.0 / MM_PER_INCH,
    "cm": 10.0 / MM_PER_INCH,
    "pt": 1.0 / POINTS_PER_INCH,
}

_LENGTH_JSON_SCHEMA = {
    "anyOf": [
        {"type": "number"},
        {"type": "string", "pattern": r"^\s*[+-]?\d+(?:\.\d+)?\s*$"},
        {
            "type": "string",
            "pattern": r"^\s*[+-]?\d+(?:\.\d+)?\s*(in|mm|cm|pt)\s*$",
        },
    ],
    "title": "LengthInches",
    "description": "Length in inches (number or numeric string) or a string with in/mm/cm/pt units.",
}


class LengthUnit(Enum):
    """Units accepted for physical lengths such as a calibration dot diameter."""

    MM = "mm"
    CM = "cm"
    IN = "in"

    @property
    def inches_per_unit(self) -> float:
        return _INCHES_PER_UNIT[self.value]


class DistanceUnit(Enum):
    """Shooting distance units used by the target families."""

    YARDS = "Yards"
    METRES = "Metres"

    @property
    def other(self) -> DistanceUnit:
        """The unit an equivalent distance is cross-quoted in."""
        if self is DistanceUnit.YARDS:
            return DistanceUnit.METRES
        return DistanceUnit.YARDS

    def convert(self, value: float) -> float:
        """Convert a distance in this unit to :attr:`other`."""
        if self is DistanceUnit.YARDS:
            return yards_to_metres(value)
        return metres_to_yards(value)


def round_half_up(value: float, places: int = 0) -> float:
    """Round ``value`` to ``places`` decimals, halves rounding away from zero.

    The float is converted through its shortest ``repr`` so that values such
    as 2.675 round as written (2.68) rather than as their binary expansion.
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    try:
        exact = Decimal(repr(float(value)))
    except InvalidOperation as exc:
        raise ValueError(f"Cannot round non-numeric value {value!r}") from exc
    quantum = Decimal(1).scaleb(-places)
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def inches_to_points(inches: float) -> float:
    return inches * POINTS_PER_INCH


def points_to_inches(points: float) -> float:
    return points / POINTS_PER_INCH


def mm_to_points(mm: float) -> float:
    return mm / MM_PER_INCH * POINTS_PER_INCH


def points_to_mm(points: float) -> float:
    return points / POINTS_PER_INCH * MM_PER_INCH


def mm_to_inches(mm: float) -> float:
    return mm / MM_PER_INCH


def yards_to_metres(yards: float) -> float:
    return yards * METRES_PER_YARD


def metres_to_yards(metres: float) -> float:
    return metres / METRES_PER_YARD


def to_inches(value: float, unit: LengthUnit | str) -> float:
    """Convert ``value`` expressed in ``unit`` to inches."""
    if isinstance(unit, str):
        unit = LengthUnit(unit.lower())
    return value * unit.inches_per_unit


def parse_length_inches(value: str | int | float) -> float:
    """Parse a length value to inches.

    Accepts:
      - Integer or float: treated as inches
      - String "0.25", "1": treated as inches
      - String "6mm", "1.5cm", "0.5in", "18pt": converted to inches
    """
    if isinstance(value, bool):
        raise ValueError("LengthInches does not accept boolean values.")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("LengthInches requires a numeric value.")
        if _NUMBER_RE.match(text):
            return float(text)
        match = _LENGTH_RE.match(text)
        if not match:
            raise ValueError("LengthInches string must be formatted like '0.5in', '6mm', or '18pt'.")
        number_text, unit = match.groups()
        scale = _INCHES_PER_UNIT.get(unit.lower())
        if scale is None:
            raise ValueError(f"Unknown LengthInches unit: {unit!r}")
        return float(number_text) * scale
    raise ValueError(f"Unsupported LengthInches value: {value!r}")


LengthInches = Annotated[float, BeforeValidator(parse_length_inches), WithJsonSchema(_LENGTH_JSON_SCHEMA)]
