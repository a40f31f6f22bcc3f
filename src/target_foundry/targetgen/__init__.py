"""Shooting target generator (targetgen) package."""

from .annotations import (
    EquivalentDistance,
    annotation_lines,
    equivalent_distance,
    equivalent_distances,
    printed_size_text,
)
from .api import TargetDocument, compose_target, generate_target, write_target
from .catalog import (
    CATALOG,
    CHAS_PRESETS,
    Band,
    BandKind,
    CanonicalTarget,
    ChasPreset,
    FigureOutline,
    FigurePlacement,
    Ring,
    RingSet,
    catalog_keys,
    entries_for,
    lookup,
    lookup_preset,
)
from .colours import PALETTE, colour_names, resolve_colour
from .compose import ComposedPage, compose_layers, compose_page, compute_scale
from .errors import (
    CatalogMiss,
    DimensionOutOfRange,
    InvalidColour,
    InvalidPaperSize,
    OversizeWarning,
    TargetError,
)
from .families import FAMILY_CONVENTIONS, Family, FamilyConvention, Strategy, convention_for, selector_for
from .hashing import document_id, request_hash
from .paper import PAPER_SIZES, Orientation, PageGeometry, Rect, paper_names, resolve_page
from .render import PDF_CONTENT_TYPE, render_pdf
from .resolve import ResolvedTarget, resolve_request
from .scaling import ScaleResult, fit_to_page, fits, fixed_scale
from .spec import TargetRequest, load_request
from .units import DistanceUnit, LengthInches, LengthUnit, round_half_up

__all__ = [
    "CATALOG",
    "CHAS_PRESETS",
    "FAMILY_CONVENTIONS",
    "PALETTE",
    "PAPER_SIZES",
    "PDF_CONTENT_TYPE",
    "Band",
    "BandKind",
    "CanonicalTarget",
    "CatalogMiss",
    "ChasPreset",
    "ComposedPage",
    "DimensionOutOfRange",
    "DistanceUnit",
    "EquivalentDistance",
    "Family",
    "FamilyConvention",
    "FigureOutline",
    "FigurePlacement",
    "InvalidColour",
    "InvalidPaperSize",
    "LengthInches",
    "LengthUnit",
    "Orientation",
    "OversizeWarning",
    "PageGeometry",
    "Rect",
    "ResolvedTarget",
    "Ring",
    "RingSet",
    "ScaleResult",
    "Strategy",
    "TargetDocument",
    "TargetError",
    "TargetRequest",
    "annotation_lines",
    "catalog_keys",
    "colour_names",
    "compose_layers",
    "compose_page",
    "compose_target",
    "compute_scale",
    "convention_for",
    "document_id",
    "entries_for",
    "equivalent_distance",
    "equivalent_distances",
    "fit_to_page",
    "fits",
    "fixed_scale",
    "generate_target",
    "load_request",
    "lookup",
    "lookup_preset",
    "paper_names",
    "printed_size_text",
    "render_pdf",
    "request_hash",
    "resolve_colour",
    "resolve_page",
    "resolve_request",
    "round_half_up",
    "selector_for",
    "write_target",
]
