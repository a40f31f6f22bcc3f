"""PDF backend.

Paints a :class:`ComposedPage` onto a single-page reportlab canvas held in
memory. The canvas runs in invariant mode, so identical pages give identical
bytes.
"""

from __future__ import annotations

import io
import logging

from reportlab.lib.colors import Color, HexColor
from reportlab.pdfgen import canvas

from .colours import hex_for
from .compose import ComposedPage
from .geom.primitives import (
    Circle,
    Curve,
    DrawingPrimitive,
    Ellipse,
    Path,
    Point,
    Polyline,
    Rectangle,
    TextAnchor,
    TextRun,
)

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
FONT_NAME = "Helvetica"
CREATOR = "target-foundry"


def _colour(name: str) -> Color:
    return HexColor(hex_for(name))


def _apply_style(pdf: canvas.Canvas, fill: str | None, stroke: str | None, line_width: float) -> tuple[int, int]:
    if fill is not None:
        pdf.setFillColor(_colour(fill))
    if stroke is not None:
        pdf.setStrokeColor(_colour(stroke))
        pdf.setLineWidth(line_width)
    return (int(stroke is not None), int(fill is not None))


def _cubic_controls(start: Point, curve: Curve) -> tuple[float, float, float, float]:
    """Cubic control points equivalent to a quadratic segment."""
    c1x = start.x + 2 / 3 * (curve.control.x - start.x)
    c1y = start.y + 2 / 3 * (curve.control.y - start.y)
    c2x = curve.end.x + 2 / 3 * (curve.control.x - curve.end.x)
    c2y = curve.end.y + 2 / 3 * (curve.control.y - curve.end.y)
    return (c1x, c1y, c2x, c2y)


def _draw_path(pdf: canvas.Canvas, path: Path) -> None:
    stroke, fill = _apply_style(pdf, path.fill, path.stroke, path.line_width)
    outline = pdf.beginPath()
    outline.moveTo(path.start.x, path.start.y)
    current = path.start
    for segment in path.segments:
        if isinstance(segment, Curve):
            outline.curveTo(*_cubic_controls(current, segment), segment.end.x, segment.end.y)
            current = segment.end
        else:
            outline.lineTo(segment.x, segment.y)
            current = segment
    outline.close()
    pdf.drawPath(outline, stroke=stroke, fill=fill)


def _draw_polyline(pdf: canvas.Canvas, line: Polyline) -> None:
    stroke, fill = _apply_style(pdf, line.fill, line.stroke, line.line_width)
    outline = pdf.beginPath()
    first, *rest = line.points
    outline.moveTo(first.x, first.y)
    for point in rest:
        outline.lineTo(point.x, point.y)
    if line.closed:
        outline.close()
    pdf.drawPath(outline, stroke=stroke, fill=fill if line.closed else 0)


def _draw_text(pdf: canvas.Canvas, run: TextRun) -> None:
    pdf.setFillColor(_colour(run.colour))
    pdf.setFont(FONT_NAME, run.font_size)
    if run.anchor is TextAnchor.CENTER:
        pdf.drawCentredString(run.position.x, run.position.y, run.text)
    else:
        pdf.drawString(run.position.x, run.position.y, run.text)


def draw_primitive(pdf: canvas.Canvas, primitive: DrawingPrimitive) -> None:
    if isinstance(primitive, Circle):
        stroke, fill = _apply_style(pdf, primitive.fill, primitive.stroke, primitive.line_width)
        pdf.circle(primitive.center.x, primitive.center.y, primitive.radius, stroke=stroke, fill=fill)
    elif isinstance(primitive, Ellipse):
        stroke, fill = _apply_style(pdf, primitive.fill, primitive.stroke, primitive.line_width)
        cx, cy = primitive.center.x, primitive.center.y
        pdf.ellipse(cx - primitive.rx, cy - primitive.ry, cx + primitive.rx, cy + primitive.ry, stroke=stroke, fill=fill)
    elif isinstance(primitive, Rectangle):
        stroke, fill = _apply_style(pdf, primitive.fill, primitive.stroke, primitive.line_width)
        x = min(primitive.corner1.x, primitive.corner2.x)
        y = min(primitive.corner1.y, primitive.corner2.y)
        pdf.rect(x, y, primitive.width, primitive.height, stroke=stroke, fill=fill)
    elif isinstance(primitive, Polyline):
        _draw_polyline(pdf, primitive)
    elif isinstance(primitive, Path):
        _draw_path(pdf, primitive)
    elif isinstance(primitive, TextRun):
        _draw_text(pdf, primitive)
    else:
        raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")


def render_pdf(page: ComposedPage, *, subject: str = "") -> bytes:
    """Render ``page`` to PDF bytes.

    Args:
        page: Composed page to paint.
        subject: Stored in the PDF subject field (the document id).

    Returns:
        The complete PDF document.
    """
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=(page.media.width, page.media.height), invariant=1)
    pdf.setTitle(page.title)
    pdf.setSubject(subject)
    pdf.setCreator(CREATOR)
    for primitive in page.primitives:
        draw_primitive(pdf, primitive)
    pdf.showPage()
    pdf.save()
    content = buffer.getvalue()
    logger.debug("Rendered %d primitives into %d bytes", len(page.primitives), len(content))
    return content
