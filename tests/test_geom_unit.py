"""Unit tests for targetgen geometry generation."""

from __future__ import annotations

import numpy as np
import pytest

from target_foundry.targetgen.catalog import CanonicalTarget, lookup
from target_foundry.targetgen.families import Family
from target_foundry.targetgen.geom import (
    MIN_LINE_WIDTH_PT,
    CanonicalFrame,
    Circle,
    Curve,
    Ellipse,
    Point,
    Polyline,
    Rectangle,
    boundary_lines,
    figure_anchors,
    generate_bands,
    generate_figures,
    generate_geometry,
    generate_rings,
    line_width_pt,
)
from target_foundry.targetgen.paper import PageGeometry, Rect, resolve_page
from target_foundry.targetgen.scaling import ScaleResult, fit_to_page

# 1880 third class (48 x 72 in) fitted to Letter: 11 points per canonical inch.
BULLSEYE_1880_3_SCALE = 792 / (72 * 72)


def _fit(entry: CanonicalTarget, page: PageGeometry) -> ScaleResult:
    return fit_to_page(page.drawable.width, page.drawable.height, entry.width_pt, entry.height_pt)


def _frame(entry: CanonicalTarget, page: PageGeometry) -> CanonicalFrame:
    return CanonicalFrame.centred_in(page.drawable, _fit(entry, page).image_scale, entry.width, entry.height)


class TestCanonicalFrame:
    """Tests for the canonical-to-page transform."""

    def test_points_per_inch(self, bullseye_1880_3: CanonicalTarget, letter_page: PageGeometry) -> None:
        frame = _frame(bullseye_1880_3, letter_page)
        assert frame.points_per_inch == pytest.approx(11.0)

    def test_centre_maps_to_drawable_centre(self, bullseye_1880_3: CanonicalTarget, letter_page: PageGeometry) -> None:
        frame = _frame(bullseye_1880_3, letter_page)
        assert frame.point(0, 0) == Point(306.0, 396.0)
        assert frame.point(1, -1).to_tuple() == pytest.approx((317.0, 385.0))

    def test_vectorised_transform(self) -> None:
        frame = CanonicalFrame(Point(10.0, 20.0), 0.5, 4, 4)
        page = frame.to_page(np.array([[0.0, 0.0], [1.0, 2.0], [-2.0, 0.0]]))
        assert page.shape == (3, 2)
        np.testing.assert_allclose(page, [[10.0, 20.0], [46.0, 92.0], [-62.0, 20.0]])

    def test_region(self, bullseye_1880_3: CanonicalTarget, letter_page: PageGeometry) -> None:
        region = _frame(bullseye_1880_3, letter_page).region
        assert (region.x1, region.y1, region.x2, region.y2) == pytest.approx((42.0, 0.0, 570.0, 792.0))

    def test_from_bottom_left(self) -> None:
        frame = CanonicalFrame(Point(0.0, 0.0), 1 / 72, 10, 4)
        np.testing.assert_allclose(frame.from_bottom_left((0.0, 0.0)), [[-5.0, -2.0]])

    def test_rejects_non_positive_scale(self) -> None:
        with pytest.raises(ValueError):
            CanonicalFrame(Point(0.0, 0.0), 0.0, 1, 1)


class TestRings:
    """Tests for ring emission."""

    def test_annuli_by_overpainting(self, bullseye_1880_3: CanonicalTarget, letter_page: PageGeometry) -> None:
        """Lined rings become a line-colour disc followed by a zone-colour disc."""
        primitives = generate_rings(bullseye_1880_3, _frame(bullseye_1880_3, letter_page))
        assert all(isinstance(prim, Circle) for prim in primitives)
        radii = [prim.radius for prim in primitives]
        assert radii == pytest.approx([178.75, 173.25, 112.75, 107.25, 44.0])
        assert [prim.fill for prim in primitives] == ["black", "white", "black", "white", "black"]
        assert all(prim.stroke is None for prim in primitives)

    def test_elliptical_rings(self, letter_page: PageGeometry) -> None:
        entry = lookup(Family.BULLSEYE, "1862-1")
        primitives = generate_rings(entry, _frame(entry, letter_page))
        assert isinstance(primitives[0], Ellipse)
        assert primitives[0].rx > primitives[0].ry
        assert isinstance(primitives[-1], Circle)

    def test_minimum_line_width(self) -> None:
        entry = lookup(Family.ISSF, "10m-air-rifle")
        tiny = CanonicalFrame(Point(0.0, 0.0), 0.01, entry.width, entry.height)
        assert line_width_pt(entry, tiny) == MIN_LINE_WIDTH_PT

    def test_ring_sets_offset(self) -> None:
        entry = lookup(Family.BIATHLON, "standing")
        page = resolve_page("A4", "Landscape")
        primitives = generate_rings(entry, _frame(entry, page))
        assert len(primitives) == 5
        xs = [prim.center.x for prim in primitives]
        assert xs == sorted(xs)
        assert xs[2] == pytest.approx(page.drawable.midx)


class TestFigures:
    """Tests for figure emission."""

    def test_head_and_shoulders(self, letter_page: PageGeometry) -> None:
        entry = lookup(Family.FIGURE, "1")
        paths = generate_figures(entry, _frame(entry, letter_page))
        assert len(paths) == 4
        assert all(path.curve_count == 2 for path in paths)
        assert all(path.fill == "brown" for path in paths)
        # 612 / 96 = 6.375 points per inch; offset 3 in, baseline 10 in.
        assert paths[0].start.to_tuple() == pytest.approx((19.125, 345.0))

    def test_curves_convert_to_page_space(self, letter_page: PageGeometry) -> None:
        entry = lookup(Family.FIGURE, "3")
        path = generate_figures(entry, _frame(entry, letter_page))[0]
        curves = [segment for segment in path.segments if isinstance(segment, Curve)]
        assert len(curves) == 2
        region = _frame(entry, letter_page).region
        for curve in curves:
            assert region.x1 <= curve.end.x <= region.x2
            assert region.y1 <= curve.control.y <= region.y2

    def test_catalog_anchors(self) -> None:
        assert figure_anchors(lookup(Family.FIGURE, "2")) == [4, 26, 48]

    def test_centred_anchors(self) -> None:
        """Centred figures sit on evenly spaced stations across the width."""
        assert figure_anchors(lookup(Family.FIGURE, "2"), centred=True) == pytest.approx([2, 26, 50])


class TestBands:
    """Tests for band emission."""

    def test_service_bands(self, letter_page: PageGeometry) -> None:
        entry = lookup(Family.SERVICE, "1")
        rectangles = generate_bands(entry, _frame(entry, letter_page))
        assert len(rectangles) == 5
        band = rectangles[0]
        assert band.fill == "khaki"
        assert band.width == pytest.approx(12 * 8.5)
        assert band.height == pytest.approx(612)
        upper, lower = rectangles[1], rectangles[2]
        assert (upper.corner1.y + upper.corner2.y) / 2 == pytest.approx(396 + 20 * 8.5)
        assert (lower.corner1.y + lower.corner2.y) / 2 == pytest.approx(396 - 20 * 8.5)


class TestBoundary:
    """Tests for boundary marker emission."""

    REGION = Rect(42.0, 0.0, 570.0, 792.0)

    def test_four_lines_with_margin(self) -> None:
        lines = boundary_lines(self.REGION, fit_to_page(612, 792, 3456, 5184))
        assert len(lines) == 4
        assert all(isinstance(line, Polyline) and len(line.points) == 2 for line in lines)
        assert lines[0].points == (Point(42.0, 0.0), Point(570.0, 0.0))

    def test_none_without_margin(self) -> None:
        assert boundary_lines(self.REGION, fit_to_page(612, 792, 612, 792)) == []

    def test_none_for_centre_only(self) -> None:
        assert boundary_lines(self.REGION, fit_to_page(612, 792, 10, 10, centre_only=True)) == []


class TestGenerateGeometry:
    """Tests for generate_geometry dispatch."""

    def test_ring_target(self, bullseye_1880_3: CanonicalTarget, letter_page: PageGeometry) -> None:
        scale = _fit(bullseye_1880_3, letter_page)
        geometry = generate_geometry(bullseye_1880_3, letter_page.drawable, scale)
        assert scale.image_scale == pytest.approx(BULLSEYE_1880_3_SCALE)
        assert geometry.figures == ()
        assert len(geometry.rings) == 5
        assert len(geometry.boundary) == 4
        (face,) = geometry.background
        assert face.fill == "white"
        assert (face.width, face.height) == pytest.approx((528, 792))

    def test_two_tone_background(self, letter_page: PageGeometry) -> None:
        entry = lookup(Family.FIGURE, "2")
        geometry = generate_geometry(entry, letter_page.drawable, _fit(entry, letter_page), top="sky")
        bottom, top = geometry.background
        assert bottom.fill == "buff"
        assert top.fill == "sky"
        # 612 / 72 = 8.5 points per inch; design spans y 192 to 600, horizon 16 in up.
        assert bottom.corner1.to_tuple() == pytest.approx((0.0, 192.0))
        assert bottom.corner2.y == pytest.approx(192 + 16 * 8.5)
        assert top.corner2.y == pytest.approx(600.0)
        assert len(geometry.figures) == 3

    def test_banded_target_has_bull(self, letter_page: PageGeometry) -> None:
        entry = lookup(Family.SERVICE, "2")
        geometry = generate_geometry(entry, letter_page.drawable, _fit(entry, letter_page))
        assert all(isinstance(shape, Rectangle) for shape in geometry.figures)
        assert len(geometry.rings) == 1
        assert geometry.background[0].fill == "buff"

    def test_paint_page(self, letter_page: PageGeometry) -> None:
        entry = lookup(Family.DOT, "standard")
        scale = ScaleResult(0.5, 36, 36, 288, 378, 1.0)
        geometry = generate_geometry(entry, letter_page.drawable, scale, face="yellow")
        (background,) = geometry.background
        assert background.fill == "yellow"
        assert (background.width, background.height) == (612, 792)
