"""Public API for target generation.

This module provides:
- load_request: Load a TargetRequest from a YAML/JSON file
- resolve_request: Validate a request against the catalog and page tables
- compose_target: Resolve and compose a request into layered primitives
- generate_target: Full pipeline (resolve -> scale -> geometry -> compose -> PDF)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .compose import ComposedPage, compose_page
from .hashing import document_id
from .render import PDF_CONTENT_TYPE, render_pdf
from .resolve import ResolvedTarget, resolve_request
from .spec import TargetRequest, load_request

logger = logging.getLogger(__name__)

__all__ = [
    "TargetDocument",
    "compose_target",
    "generate_target",
    "load_request",
    "resolve_request",
    "write_target",
]


@dataclass(frozen=True, slots=True)
class TargetDocument:
    """A rendered target.

    Attributes:
        content: PDF bytes.
        content_type: MIME type of ``content``.
        filename: Suggested file name.
        warnings: Non-fatal conditions (oversize target, colour fallback).
    """

    content: bytes
    content_type: str = PDF_CONTENT_TYPE
    filename: str = "target.pdf"
    warnings: tuple[str, ...] = ()


def _coerce(request: TargetRequest | Mapping[str, Any]) -> TargetRequest:
    if isinstance(request, TargetRequest):
        return request
    return TargetRequest.model_validate(dict(request))


def compose_target(request: TargetRequest | Mapping[str, Any]) -> tuple[ResolvedTarget, ComposedPage]:
    resolved = resolve_request(_coerce(request))
    return resolved, compose_page(resolved)


def generate_target(request: TargetRequest | Mapping[str, Any]) -> TargetDocument:
    """Generate the PDF document for one request.

    Args:
        request: A TargetRequest or a mapping of request parameters.

    Returns:
        TargetDocument with the PDF bytes. An oversize target still yields a
        document (a warning page) with the warning recorded.

    Raises:
        TargetError: If the request is rejected during resolution.
        pydantic.ValidationError: If a mapping fails request validation.
    """
    resolved, page = compose_target(request)
    doc_id = document_id(resolved.request)
    entry = resolved.entry
    warnings = list(resolved.notes)
    if page.warning is not None:
        warnings.append(str(page.warning))
    content = render_pdf(page, subject=doc_id)
    filename = f"{entry.family.value}-{entry.selector}-{doc_id}.pdf"
    logger.info("Generated %s (%d bytes)", filename, len(content))
    return TargetDocument(content=content, filename=filename, warnings=tuple(warnings))


def write_target(document: TargetDocument, out: Path) -> Path:
    """Write ``document`` to ``out`` (a file, or a directory that receives the suggested name)."""
    path = out / document.filename if out.is_dir() else out
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(document.content)
    return path
