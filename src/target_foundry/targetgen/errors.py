"""Error taxonomy for target generation.

Every invalid-input error derives from :class:`TargetError` and is raised
while a request is resolved, before any drawing work starts. The only
recoverable condition, an oversize target, is a :class:`UserWarning`
subclass that is recorded on the result instead of being raised.
"""

from __future__ import annotations


class TargetError(ValueError):
    """Base class for request errors that abort generation.

    Attributes:
        field: The request parameter that caused the failure (if any).
        reason: Description of why the request was rejected.
    """

    def __init__(self, field: str | None, reason: str) -> None:
        self.field = field
        self.reason = reason
        msg = f"{field}: {reason}" if field else reason
        super().__init__(msg)


class InvalidPaperSize(TargetError):
    """Raised when a paper name is not in the enumerated set."""

    def __init__(self, paper: str, choices: tuple[str, ...]) -> None:
        self.paper = paper
        self.choices = choices
        super().__init__("Paper", f"unknown paper size {paper!r}. Must be one of: {', '.join(choices)}")


class InvalidColour(TargetError):
    """Raised when a colour name is not in the palette."""

    def __init__(self, field: str, colour: str, choices: tuple[str, ...]) -> None:
        self.colour = colour
        self.choices = choices
        super().__init__(field, f"unknown colour {colour!r}. Must be one of: {', '.join(choices)}")


class CatalogMiss(TargetError):
    """Raised when a (family, selector, variant) combination has no catalog entry.

    Attributes:
        family: Target family value.
        selector: Class/year/type selector that was looked up.
        variant: Requested variant ("standard", "centre" or a preset name).
    """

    def __init__(self, family: str, selector: str | None, reason: str, *, variant: str = "standard") -> None:
        self.family = family
        self.selector = selector
        self.variant = variant
        label = family if selector is None else f"{family}[{selector}]"
        if variant != "standard":
            label = f"{label}/{variant}"
        super().__init__(None, f"{label}: {reason}")


class DimensionOutOfRange(TargetError):
    """Raised when a numeric parameter lies outside its allowed bounds."""

    def __init__(self, field: str, value: float, low: float, high: float, unit: str = "") -> None:
        self.value = value
        self.low = low
        self.high = high
        suffix = f" {unit}" if unit else ""
        super().__init__(field, f"{value:g}{suffix} is outside the allowed range {low:g} to {high:g}{suffix}")


class OversizeWarning(UserWarning):
    """The requested target does not fit in the drawable rectangle.

    Not fatal: the composer replaces the drawing with a warning block.

    Attributes:
        required: (width, height) of the target in points.
        available: (width, height) of the drawable rectangle in points.
    """

    def __init__(self, required: tuple[float, float], available: tuple[float, float]) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"target needs {required[0]:.1f} x {required[1]:.1f} pt but only "
            f"{available[0]:.1f} x {available[1]:.1f} pt are available"
        )
