from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from .families import Family
from .paper import Orientation
from .units import LengthInches, LengthUnit


def _lower(value: Any) -> Any:
    return value.strip().lower() if isinstance(value, str) else value


def _title(value: Any) -> Any:
    return value.strip().capitalize() if isinstance(value, str) else value


class _SpecBase(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)


class TargetRequest(_SpecBase):
    """Parameters of one target request.

    Field aliases are the documented request parameter names (``Family``,
    ``Class``, ``FigureCentred``, ``CHAS``...); the snake_case field names
    are accepted as well. Values are checked for type and sign here; paper,
    colours, catalog entries and presets are checked by ``resolve_request``.
    """

    family: Annotated[Family, BeforeValidator(_lower)] = Field(..., alias="Family")
    year: int | None = Field(default=None, alias="Year")
    target_class: int | None = Field(default=None, alias="Class")
    target_type: str | None = Field(default=None, alias="Type")
    paper: str = Field(default="A4", alias="Paper", min_length=1)
    orientation: Annotated[Orientation, BeforeValidator(_title)] = Field(
        default=Orientation.PORTRAIT, alias="Orientation"
    )
    trim: LengthInches = Field(default=0.0, alias="Trim", ge=0)
    centre: bool = Field(default=False, alias="Centre")
    top: str | None = Field(default=None, alias="Top")
    bottom: str | None = Field(default=None, alias="Bottom")
    figure_centred: bool = Field(default=False, alias="FigureCentred")
    diameter: float | None = Field(default=None, alias="Diameter", gt=0)
    units: Annotated[LengthUnit, BeforeValidator(_lower)] = Field(default=LengthUnit.MM, alias="Units")
    metres: float | None = Field(default=None, alias="Metres", gt=0)
    equiv: float | None = Field(default=None, alias="Equiv", gt=0)
    colour: str = Field(default="black", alias="Colour", min_length=1)
    background: str = Field(default="white", alias="Background", min_length=1)
    chas: str | None = Field(default=None, alias="CHAS")

    def to_payload(self) -> dict[str, Any]:
        """JSON-compatible payload keyed by the documented parameter names, unset values dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def load_request_payload(path: Path) -> dict[str, Any]:
    """Read the raw parameter mapping of a YAML or JSON request file."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        payload = yaml.safe_load(text)
    else:
        payload = json.loads(text)
    if not isinstance(payload, dict):
        raise ValueError("Target request file must contain a mapping")
    return payload


def load_request(path: Path) -> TargetRequest:
    """Load a TargetRequest from a YAML or JSON file."""
    return TargetRequest.model_validate(load_request_payload(path))
