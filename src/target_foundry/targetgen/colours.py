from __future__ import annotations

from types import MappingProxyType

from .errors import InvalidColour

PALETTE: MappingProxyType[str, str] = MappingProxyType(
    {
        "black": "#000000",
        "white": "#FFFFFF",
        "buff": "#E8D8B0",
        "khaki": "#BDB07A",
        "brown": "#6B4A2B",
        "olive": "#6B6B2A",
        "green": "#4F7F3A",
        "grey": "#9A9A9A",
        "red": "#C0271F",
        "orange": "#E8731A",
        "yellow": "#F2D21B",
        "blue": "#2C5AA0",
        "sky": "#BFD9EE",
    }
)

# Used when a requested foreground/background pair would be invisible.
SAFE_FOREGROUND = "black"
SAFE_BACKGROUND = "white"


def colour_names() -> tuple[str, ...]:
    return tuple(PALETTE)


def resolve_colour(field: str, name: str) -> str:
    """Return the canonical palette name for ``name`` (case-insensitive).

    Raises:
        InvalidColour: If the name is not in the palette.
    """
    key = name.strip().lower()
    if key == "gray":
        key = "grey"
    if key not in PALETTE:
        raise InvalidColour(field, name, colour_names())
    return key


def hex_for(name: str) -> str:
    return PALETTE[name]
