"""Request resolution.

``resolve_request`` performs every check that can reject a request (paper,
colours, catalog entry, centre-only variant, numeric ranges, CHAS presets)
before any geometry is computed, and returns an immutable
:class:`ResolvedTarget` carrying everything the later stages need.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from .catalog import CanonicalTarget, ChasPreset, RingSet, lookup, lookup_preset
from .colours import SAFE_BACKGROUND, SAFE_FOREGROUND, resolve_colour
from .errors import CatalogMiss, DimensionOutOfRange, TargetError
from .families import Family, FamilyConvention, convention_for, selector_for
from .paper import PageGeometry, resolve_page
from .spec import TargetRequest
from .units import mm_to_inches, to_inches

logger = logging.getLogger(__name__)

MAX_DOT_DIAMETER_MM = 2000.0


@dataclass(frozen=True, slots=True)
class ResolvedTarget:
    """A validated request bound to its catalog entry and page.

    Attributes:
        request: The request as submitted.
        entry: Catalog entry, recoloured for the dot family.
        convention: Family conventions (distance unit, printed precision).
        page: Resolved page geometry.
        centre_only: Fit the centre ring instead of the whole design.
        figure_centred: Centre figures on evenly spaced stations.
        fixed_scale: Scale dictated by the request, or None to fit the page.
        face: Face colour override.
        top: Colour above the horizon (two-tone entries).
        bottom: Colour below the horizon (two-tone entries).
        preset: CHAS preset applied, if any.
        notes: Non-fatal adjustments made while resolving.
    """

    request: TargetRequest
    entry: CanonicalTarget
    convention: FamilyConvention
    page: PageGeometry
    centre_only: bool = False
    figure_centred: bool = False
    fixed_scale: float | None = None
    face: str | None = None
    top: str | None = None
    bottom: str | None = None
    preset: ChasPreset | None = None
    notes: tuple[str, ...] = ()


def _distance_scale(
    request: TargetRequest,
    entry: CanonicalTarget,
    convention: FamilyConvention,
    preset: ChasPreset | None,
) -> float | None:
    metres = request.metres if request.metres is not None else (preset.metres if preset else None)
    equiv = request.equiv if request.equiv is not None else (preset.equiv if preset else None)
    if metres is None and equiv is None:
        return None
    if not convention.accepts_distance_scale:
        raise CatalogMiss(
            entry.family.value, entry.selector, "does not support Metres/Equiv distance scaling", variant="distance"
        )
    if metres is None or equiv is None:
        raise TargetError("Equiv" if equiv is None else "Metres", "Metres and Equiv must be given together")
    return metres / equiv


def _dot_scale(request: TargetRequest) -> float:
    if request.diameter is None:
        raise TargetError("Diameter", "required for the dot family")
    diameter_in = to_inches(request.diameter, request.units)
    max_in = mm_to_inches(MAX_DOT_DIAMETER_MM)
    if diameter_in > max_in:
        max_value = max_in / request.units.inches_per_unit
        raise DimensionOutOfRange("Diameter", request.diameter, 0, max_value, request.units.value)
    # The dot's canonical design is one inch across.
    return diameter_in


def _recolour_dot(entry: CanonicalTarget, colour: str) -> CanonicalTarget:
    ring_sets = tuple(
        RingSet(tuple(replace(ring, fill=colour) for ring in ring_set.rings), centre=ring_set.centre)
        for ring_set in entry.ring_sets
    )
    return replace(entry, ring_sets=ring_sets)


def _optional_colour(field: str, value: str | None) -> str | None:
    return None if value is None else resolve_colour(field, value)


def resolve_request(request: TargetRequest) -> ResolvedTarget:
    """Validate ``request`` and bind it to a catalog entry and page.

    Raises:
        CatalogMiss: Unknown family/selector, centre-only on an entry without
            a centre ring, or an unknown or inapplicable CHAS preset.
        InvalidPaperSize: Unknown paper name.
        InvalidColour: A colour outside the palette.
        DimensionOutOfRange: Trim or dot diameter out of range.
        TargetError: Missing parameters the family needs.
    """
    family = request.family
    convention = convention_for(family)
    selector = selector_for(
        family,
        year=request.year,
        target_class=request.target_class,
        target_type=request.target_type,
    )
    entry = lookup(family, selector)

    preset = None
    paper = request.paper
    if request.chas:
        preset = lookup_preset(family, request.chas, accepts_distance_scale=convention.accepts_distance_scale)
        if "paper" not in request.model_fields_set:
            paper = preset.paper
        logger.info("Applied CHAS preset %s", preset.name)

    page = resolve_page(paper, request.orientation, request.trim)

    colour = resolve_colour("Colour", request.colour)
    background = resolve_colour("Background", request.background)
    top = _optional_colour("Top", request.top)
    bottom = _optional_colour("Bottom", request.bottom)

    if request.centre:
        entry.centre_size()

    notes: list[str] = []
    face: str | None = None
    if family is Family.DOT:
        fixed = _dot_scale(request)
        if colour == background:
            logger.warning(
                "Colour and Background are both %s; using %s on %s", colour, SAFE_FOREGROUND, SAFE_BACKGROUND
            )
            notes.append(f"Colour and Background were both {colour}; drawn {SAFE_FOREGROUND} on {SAFE_BACKGROUND}")
            colour, background = SAFE_FOREGROUND, SAFE_BACKGROUND
        entry = _recolour_dot(entry, colour)
        face = background
    else:
        fixed = _distance_scale(request, entry, convention, preset)
        if request.diameter is not None:
            logger.info("Diameter ignored for the %s family", family.value)

    if (top or bottom) and not entry.two_tone:
        logger.info("Top/Bottom ignored for %s[%s]", family.value, selector)

    resolved = ResolvedTarget(
        request=request,
        entry=entry,
        convention=convention,
        page=page,
        centre_only=request.centre,
        figure_centred=request.figure_centred,
        fixed_scale=fixed,
        face=face,
        top=top,
        bottom=bottom,
        preset=preset,
        notes=tuple(notes),
    )
    logger.debug(
        "Resolved %s[%s] on %s %s (fixed scale %s)",
        family.value,
        selector,
        page.paper,
        page.orientation.value,
        fixed,
    )
    return resolved
