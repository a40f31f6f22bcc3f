"""Unit tests for the PDF backend and the public API."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from reportlab.pdfgen import canvas

from target_foundry import generate_target
from target_foundry.targetgen.api import TargetDocument, compose_target, write_target
from target_foundry.targetgen.compose import compose_layers
from target_foundry.targetgen.geom import Curve, Ellipse, Layer, Path as OutlinePath, Point, Polyline, TextRun
from target_foundry.targetgen.paper import Rect
from target_foundry.targetgen.render import PDF_CONTENT_TYPE, _cubic_controls, draw_primitive, render_pdf
from target_foundry.targetgen.spec import TargetRequest

RequestFactory = Callable[..., TargetRequest]


class TestRenderPdf:
    """Tests for render_pdf."""

    def test_every_primitive_kind(self) -> None:
        outline = OutlinePath(
            Point(10.0, 10.0),
            (Point(10.0, 50.0), Curve(Point(10.0, 60.0), Point(20.0, 60.0)), Point(30.0, 10.0)),
            fill="brown",
        )
        page = compose_layers(
            {
                Layer.FIGURES: [outline],
                Layer.RINGS: [Ellipse(Point(100.0, 100.0), 40.0, 20.0, fill="blue")],
                Layer.BOUNDARY: [Polyline((Point(0.0, 0.0), Point(100.0, 0.0)))],
                Layer.TEXT: [TextRun(Point(5.0, 5.0), 8, "label")],
            },
            Rect(0.0, 0.0, 200.0, 200.0),
            title="sample",
        )
        content = render_pdf(page, subject="abc")
        assert content.startswith(b"%PDF")
        assert content.rstrip().endswith(b"%%EOF")

    def test_deterministic(self, bullseye_request: TargetRequest) -> None:
        """Invariant mode makes identical pages render to identical bytes."""
        _, page = compose_target(bullseye_request)
        assert render_pdf(page, subject="x") == render_pdf(page, subject="x")

    def test_unsupported_primitive(self) -> None:
        pdf = canvas.Canvas(io.BytesIO(), pagesize=(100, 100))
        with pytest.raises(TypeError, match="Unsupported primitive"):
            draw_primitive(pdf, object())  # type: ignore[arg-type]

    def test_quadratic_to_cubic(self) -> None:
        c1x, c1y, c2x, c2y = _cubic_controls(Point(0.0, 0.0), Curve(Point(3.0, 3.0), Point(6.0, 0.0)))
        assert (c1x, c1y) == pytest.approx((2.0, 2.0))
        assert (c2x, c2y) == pytest.approx((4.0, 2.0))


class TestGenerateTarget:
    """Tests for the end-to-end API."""

    def test_document(self, bullseye_request: TargetRequest) -> None:
        document = generate_target(bullseye_request)
        assert isinstance(document, TargetDocument)
        assert document.content.startswith(b"%PDF")
        assert document.content_type == PDF_CONTENT_TYPE == "application/pdf"
        assert document.filename.startswith("bullseye-1880-3-")
        assert document.filename.endswith(".pdf")
        assert document.warnings == ()

    def test_accepts_mapping(self) -> None:
        document = generate_target({"Family": "service", "Class": 2, "Paper": "A3", "Orientation": "Landscape"})
        assert document.content.startswith(b"%PDF")

    @pytest.mark.parametrize(
        "params",
        [
            {"Family": "figure", "Class": 3, "FigureCentred": True},
            {"Family": "bullseye", "Year": 1862, "Class": 1, "Centre": True},
            {"Family": "biathlon", "Type": "standing", "CHAS": "biathlon-10"},
            {"Family": "issf", "Type": "25m-pistol", "Paper": "36x48", "Trim": 1},
            {"Family": "dot", "Diameter": 1, "Units": "in", "Colour": "white", "Background": "black"},
        ],
    )
    def test_families_render(self, params: dict[str, object]) -> None:
        assert generate_target(params).content.startswith(b"%PDF")

    def test_oversize_warning_recorded(self, make_request: RequestFactory) -> None:
        document = generate_target(make_request(Family="dot", Diameter=500, Paper="Letter"))
        assert document.content.startswith(b"%PDF")
        assert len(document.warnings) == 1
        assert "only 612.0 x 792.0 pt" in document.warnings[0]

    def test_write_target(self, tmp_path: Path, bullseye_request: TargetRequest) -> None:
        document = generate_target(bullseye_request)
        written = write_target(document, tmp_path)
        assert written == tmp_path / document.filename
        assert written.read_bytes() == document.content
        explicit = write_target(document, tmp_path / "nested" / "out.pdf")
        assert explicit.exists()
