"""Page composition.

Collects background, figure, ring, boundary and text primitives and orders
them by :class:`~target_foundry.targetgen.geom.primitives.Layer` so later
layers paint over earlier ones. An oversize request yields a page with only
the background and a centred warning block.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .annotations import annotation_lines, layout_lines, layout_warning, oversize_lines
from .errors import OversizeWarning
from .geom.generate import background_primitives, generate_geometry
from .geom.frame import CanonicalFrame
from .geom.primitives import DrawingPrimitive, Layer
from .paper import Rect
from .resolve import ResolvedTarget
from .scaling import ScaleResult, fit_to_page, fits, fixed_scale
from .units import inches_to_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ComposedPage:
    """Primitives for one page in paint order.

    Attributes:
        media: Full page rectangle.
        primitives: Every primitive, sorted by layer.
        layers: Layer of each primitive, parallel to ``primitives``.
        scale: Applied scale, or None when the target was oversize.
        warning: Oversize warning replacing the drawing, if any.
        title: Document title.
    """

    media: Rect
    primitives: tuple[DrawingPrimitive, ...]
    layers: tuple[Layer, ...]
    scale: ScaleResult | None = None
    warning: OversizeWarning | None = None
    title: str = ""

    def __post_init__(self) -> None:
        if len(self.primitives) != len(self.layers):
            raise ValueError("primitives and layers must have the same length")
        if any(later < earlier for earlier, later in zip(self.layers, self.layers[1:])):
            raise ValueError("primitives must be ordered by layer")

    def on_layer(self, layer: Layer) -> tuple[DrawingPrimitive, ...]:
        return tuple(prim for prim, prim_layer in zip(self.primitives, self.layers) if prim_layer is layer)


def compose_layers(
    layered: Mapping[Layer, Sequence[DrawingPrimitive]],
    media: Rect,
    *,
    scale: ScaleResult | None = None,
    warning: OversizeWarning | None = None,
    title: str = "",
) -> ComposedPage:
    """Flatten per-layer primitives into paint order (stable within a layer)."""
    primitives: list[DrawingPrimitive] = []
    layers: list[Layer] = []
    for layer in sorted(Layer):
        items = layered.get(layer, ())
        primitives.extend(items)
        layers.extend([layer] * len(items))
    return ComposedPage(media, tuple(primitives), tuple(layers), scale=scale, warning=warning, title=title)


def compute_scale(resolved: ResolvedTarget) -> ScaleResult | OversizeWarning:
    """Scale for ``resolved``, or the warning describing why it cannot be drawn."""
    entry = resolved.entry
    drawable = resolved.page.drawable
    if resolved.centre_only:
        centre_w, centre_h = entry.centre_size()
        tw, th = inches_to_points(centre_w), inches_to_points(centre_h)
    else:
        tw, th = entry.width_pt, entry.height_pt

    if resolved.fixed_scale is None:
        return fit_to_page(drawable.width, drawable.height, tw, th, centre_only=resolved.centre_only)

    required = (tw * resolved.fixed_scale, th * resolved.fixed_scale)
    if not fits(drawable.width, drawable.height, *required):
        return OversizeWarning(required, (drawable.width, drawable.height))
    return fixed_scale(drawable.width, drawable.height, tw, th, resolved.fixed_scale, centre_only=resolved.centre_only)


def _text_colour(resolved: ResolvedTarget) -> str:
    return "white" if resolved.entry.paint_page and resolved.face == "black" else "black"


def compose_page(resolved: ResolvedTarget) -> ComposedPage:
    """Compose every primitive of a resolved request into one page."""
    entry = resolved.entry
    page = resolved.page
    text_colour = _text_colour(resolved)
    scale = compute_scale(resolved)

    if isinstance(scale, OversizeWarning):
        logger.warning("%s[%s]: %s", entry.family.value, entry.selector, scale)
        background = []
        if entry.paint_page:
            # Any positive scale will do; only the drawable rectangle is painted.
            frame = CanonicalFrame.centred_in(page.drawable, 1.0, entry.width, entry.height)
            background = background_primitives(entry, frame, page.drawable, face=resolved.face)
        return compose_layers(
            {
                Layer.BACKGROUND: background,
                Layer.TEXT: layout_warning(oversize_lines(entry, scale, page.paper), page.drawable, colour=text_colour),
            },
            page.media,
            warning=scale,
            title=entry.title,
        )

    geometry = generate_geometry(
        entry,
        page.drawable,
        scale,
        face=resolved.face,
        top=resolved.top,
        bottom=resolved.bottom,
        figure_centred=resolved.figure_centred,
    )
    description = resolved.preset.description if resolved.preset else None
    lines = annotation_lines(entry, scale, resolved.convention, description=description)
    lines.extend(resolved.notes)
    composed = compose_layers(
        {
            Layer.BACKGROUND: geometry.background,
            Layer.FIGURES: geometry.figures,
            Layer.RINGS: geometry.rings,
            Layer.BOUNDARY: geometry.boundary,
            Layer.TEXT: layout_lines(lines, page.drawable, colour=text_colour),
        },
        page.media,
        scale=scale,
        title=entry.title,
    )
    logger.info(
        "Composed %s[%s] at scale %.6f: %d primitives",
        entry.family.value,
        entry.selector,
        scale.image_scale,
        len(composed.primitives),
    )
    return composed
