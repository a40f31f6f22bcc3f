"""Aspect-preserving scale computation.

Two ways of arriving at a scale share one result type:

- :func:`fit_to_page` picks the largest uniform scale at which the canonical
  design fits the drawable rectangle, touching it on at least one axis.
- :func:`fixed_scale` applies a scale dictated by the request (a distance
  ratio or a physical diameter) and centres the result; callers check
  :func:`fits` first because an oversize design has negative offsets.

All lengths are in points.
"""

from __future__ import annotations

from dataclasses import dataclass

ASPECT_TOLERANCE = 1e-9
_OFFSET_TOLERANCE = 1e-6


@dataclass(frozen=True, slots=True)
class ScaleResult:
    """Scale factor and centring offsets for one request.

    Attributes:
        image_scale: Uniform multiplier applied to canonical measurements.
        scaled_width: Width of the scaled design in points.
        scaled_height: Height of the scaled design in points.
        delta_w: Horizontal centring offset inside the drawable rectangle.
        delta_h: Vertical centring offset inside the drawable rectangle.
        canonical_aspect: Width-to-height ratio of the unscaled design.
        centre_only: True when only the scoring centre was fitted.
    """

    image_scale: float
    scaled_width: float
    scaled_height: float
    delta_w: float
    delta_h: float
    canonical_aspect: float
    centre_only: bool = False

    def __post_init__(self) -> None:
        if self.image_scale <= 0:
            raise ValueError(f"image_scale must be positive, got {self.image_scale}")
        if self.delta_w < -_OFFSET_TOLERANCE or self.delta_h < -_OFFSET_TOLERANCE:
            raise ValueError(f"Centring offsets must be non-negative, got ({self.delta_w}, {self.delta_h})")
        if self.scaled_width <= 0 or self.scaled_height <= 0 or self.canonical_aspect <= 0:
            raise ValueError(
                f"Scaled size and aspect must be positive, got {self.scaled_width} x {self.scaled_height}"
                f" at aspect {self.canonical_aspect}"
            )
        scaled_aspect = self.scaled_width / self.scaled_height
        if abs(scaled_aspect - self.canonical_aspect) > ASPECT_TOLERANCE * self.canonical_aspect:
            raise ValueError(
                f"Scaled aspect {scaled_aspect:.9g} does not preserve canonical aspect {self.canonical_aspect:.9g}"
            )

    @property
    def has_margin(self) -> bool:
        """True when the design leaves uncovered space on either axis."""
        return self.delta_w > _OFFSET_TOLERANCE or self.delta_h > _OFFSET_TOLERANCE


def _check_positive(**values: float) -> None:
    for name, value in values.items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


def fit_to_page(
    pw: float,
    ph: float,
    tw: float,
    th: float,
    *,
    centre_only: bool = False,
) -> ScaleResult:
    """Fit a ``tw`` x ``th`` design into a ``pw`` x ``ph`` drawable rectangle.

    If the page is relatively wider than the target the height is the
    binding axis, otherwise the width is. The aspect ratio ``tw/th`` is
    preserved and both offsets are non-negative by construction.

    Args:
        pw: Drawable width.
        ph: Drawable height.
        tw: Canonical design width (or centre diameter in centre-only mode).
        th: Canonical design height (or centre diameter in centre-only mode).
        centre_only: Marks the result as a centre-only fit.

    Returns:
        ScaleResult for the fitted design.
    """
    _check_positive(pw=pw, ph=ph, tw=tw, th=th)
    rt = tw / th
    rp = pw / ph
    if rp > rt:
        scaled_height = ph
        scaled_width = tw * ph / th
    else:
        scaled_width = pw
        scaled_height = th * pw / tw
    return ScaleResult(
        image_scale=scaled_height / th,
        scaled_width=scaled_width,
        scaled_height=scaled_height,
        delta_w=(pw - scaled_width) / 2,
        delta_h=(ph - scaled_height) / 2,
        canonical_aspect=rt,
        centre_only=centre_only,
    )


def fits(pw: float, ph: float, width: float, height: float) -> bool:
    """True when a ``width`` x ``height`` design fits inside ``pw`` x ``ph``."""
    return width <= pw + _OFFSET_TOLERANCE and height <= ph + _OFFSET_TOLERANCE


def fixed_scale(
    pw: float,
    ph: float,
    tw: float,
    th: float,
    scale: float,
    *,
    centre_only: bool = False,
) -> ScaleResult:
    """Centre a design drawn at a caller-chosen ``scale``.

    Raises:
        ValueError: If the scaled design does not fit the drawable rectangle.
    """
    _check_positive(pw=pw, ph=ph, tw=tw, th=th, scale=scale)
    scaled_width = tw * scale
    scaled_height = th * scale
    if not fits(pw, ph, scaled_width, scaled_height):
        raise ValueError(
            f"Design of {scaled_width:.1f} x {scaled_height:.1f} pt does not fit {pw:.1f} x {ph:.1f} pt"
        )
    return ScaleResult(
        image_scale=scale,
        scaled_width=scaled_width,
        scaled_height=scaled_height,
        delta_w=max(0.0, (pw - scaled_width) / 2),
        delta_h=max(0.0, (ph - scaled_height) / 2),
        canonical_aspect=tw / th,
        centre_only=centre_only,
    )
