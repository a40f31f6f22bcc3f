"""Target Foundry: print-accurate shooting target generator.

Historical and modern shooting targets are described once, in canonical
real-world units, and scaled onto any supported paper size with their
aspect ratio preserved. The printed target is annotated with the shooting
distances at which it matches the original.

Public API
----------
- :func:`load_request` - Load a TargetRequest from a YAML/JSON file
- :func:`resolve_request` - Validate a request against the catalog and paper tables
- :func:`compose_target` - Resolve and lay out a request as layered primitives
- :func:`generate_target` - Full pipeline producing a PDF TargetDocument

Example
-------
>>> from target_foundry import generate_target
>>> doc = generate_target({"Family": "bullseye", "Year": 1880, "Class": 3, "Paper": "Letter"})
>>> doc.content_type
'application/pdf'
"""

from __future__ import annotations

from target_foundry.targetgen import (
    CatalogMiss,
    DimensionOutOfRange,
    InvalidColour,
    InvalidPaperSize,
    OversizeWarning,
    TargetDocument,
    TargetError,
    TargetRequest,
    compose_target,
    generate_target,
    load_request,
    resolve_request,
)

__version__ = "0.1.0"

__all__ = [
    "CatalogMiss",
    "DimensionOutOfRange",
    "InvalidColour",
    "InvalidPaperSize",
    "OversizeWarning",
    "TargetDocument",
    "TargetError",
    "TargetRequest",
    "__version__",
    "compose_target",
    "generate_target",
    "load_request",
    "resolve_request",
]
