"""targetgen CLI: render shooting targets to PDF.

Commands:
    render: Render a target from flags or a request file.
    catalog: List every family and selector in the catalog.
    papers: List the enumerated paper sizes.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from target_foundry import __version__

from .api import generate_target, write_target
from .catalog import CATALOG, CHAS_PRESETS
from .errors import TargetError
from .families import Family
from .paper import PAPER_SIZES, Orientation
from .spec import TargetRequest, load_request_payload
from .units import LengthUnit, points_to_mm

logger = logging.getLogger(__name__)


# Flag destination -> request parameter name.
_FLAG_PARAMS = {
    "family": "Family",
    "year": "Year",
    "target_class": "Class",
    "target_type": "Type",
    "paper": "Paper",
    "orientation": "Orientation",
    "trim": "Trim",
    "top": "Top",
    "bottom": "Bottom",
    "diameter": "Diameter",
    "units": "Units",
    "metres": "Metres",
    "equiv": "Equiv",
    "colour": "Colour",
    "background": "Background",
    "chas": "CHAS",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="targetgen", description="Print-accurate shooting target generator")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be repeated)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Render a target to PDF")
    render.add_argument("--request", type=Path, help="Request file (JSON/YAML); flags override its values")
    render.add_argument("--family", choices=[family.value for family in Family])
    render.add_argument("--year", type=int)
    render.add_argument("--class", dest="target_class", type=int)
    render.add_argument("--type", dest="target_type")
    render.add_argument("--paper")
    render.add_argument("--orientation", choices=[o.value for o in Orientation])
    render.add_argument("--trim", help="Trim margin, e.g. 0.25, 6mm or 0.5in")
    render.add_argument("--centre", action="store_true", default=None, help="Fit only the scoring centre")
    render.add_argument("--top")
    render.add_argument("--bottom")
    render.add_argument("--figure-centred", dest="figure_centred", action="store_true", default=None)
    render.add_argument("--diameter", type=float)
    render.add_argument("--units", choices=[unit.value for unit in LengthUnit])
    render.add_argument("--metres", type=float)
    render.add_argument("--equiv", type=float)
    render.add_argument("--colour")
    render.add_argument("--background")
    render.add_argument("--chas")
    render.add_argument("-o", "--out", type=Path, help="Output file or directory (default: stdout)")

    subparsers.add_parser("catalog", help="List catalog families and selectors")
    subparsers.add_parser("papers", help="List paper sizes")
    return parser


def _aliased(payload: dict[str, Any]) -> dict[str, Any]:
    """Re-key a request payload by the documented parameter names."""
    aliases = {name: field.alias for name, field in TargetRequest.model_fields.items() if field.alias}
    return {aliases.get(key, key): value for key, value in payload.items()}


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _request_from_args(args: argparse.Namespace) -> TargetRequest:
    payload: dict[str, Any] = {}
    if args.request is not None:
        payload.update(_aliased(load_request_payload(args.request)))
    for dest, name in _FLAG_PARAMS.items():
        value = getattr(args, dest)
        if value is not None:
            payload[name] = value
    if args.centre is not None:
        payload["Centre"] = args.centre
    if args.figure_centred is not None:
        payload["FigureCentred"] = args.figure_centred
    if "Family" not in payload:
        raise TargetError("Family", "required (use --family or --request)")
    return TargetRequest.model_validate(payload)


def _run_render(args: argparse.Namespace) -> int:
    request = _request_from_args(args)
    document = generate_target(request)
    for warning in document.warnings:
        sys.stderr.write(f"warning: {warning}\n")
    if args.out is None:
        sys.stdout.buffer.write(document.content)
        sys.stdout.flush()
        return 0
    path = write_target(document, args.out)
    sys.stdout.write(f"{path}\n")
    return 0


def _run_catalog() -> int:
    for family, selector in CATALOG:
        sys.stdout.write(f"{family.value}\t{selector}\t{CATALOG[(family, selector)].title}\n")
    for name, preset in CHAS_PRESETS.items():
        sys.stdout.write(f"chas\t{name}\t{preset.description}\n")
    return 0


def _run_papers() -> int:
    for name, (width, height) in PAPER_SIZES.items():
        sys.stdout.write(f"{name}\t{points_to_mm(width):.1f} x {points_to_mm(height):.1f} mm\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.command == "render":
            return _run_render(args)
        if args.command == "catalog":
            return _run_catalog()
        if args.command == "papers":
            return _run_papers()
    except (TargetError, ValidationError) as exc:
        logger.debug("Request rejected", exc_info=True)
        sys.stderr.write(f"error: {exc}\n")
        return 2

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
