"""Unit tests for the target catalog and family selectors."""

from __future__ import annotations

import pytest

from target_foundry.targetgen.catalog import (
    CATALOG,
    CHAS_PRESETS,
    FigureOutline,
    OutlineCurve,
    OutlineLine,
    Ring,
    RingSet,
    RingShape,
    catalog_keys,
    entries_for,
    lookup,
    lookup_preset,
)
from target_foundry.targetgen.errors import CatalogMiss
from target_foundry.targetgen.families import FAMILY_CONVENTIONS, Family, Strategy, selector_for
from target_foundry.targetgen.units import DistanceUnit, mm_to_inches, round_half_up


class TestCatalogCompleteness:
    """Every enumerated combination resolves to an entry."""

    @pytest.mark.parametrize("year", [1862, 1880, 1908])
    @pytest.mark.parametrize("target_class", [1, 2, 3])
    def test_bullseye_years_and_classes(self, year: int, target_class: int) -> None:
        entry = lookup(Family.BULLSEYE, selector_for(Family.BULLSEYE, year=year, target_class=target_class))
        assert entry.strategy is Strategy.RINGS
        assert entry.distances

    @pytest.mark.parametrize(
        ("family", "selectors"),
        [
            (Family.FIGURE, ("1", "2", "3")),
            (Family.SERVICE, ("1", "2")),
            (Family.DOT, ("standard",)),
            (Family.BIATHLON, ("prone", "standing")),
            (Family.ISSF, ("300m-rifle", "50m-rifle", "25m-pistol", "10m-air-rifle", "10m-air-pistol")),
        ],
    )
    def test_family_selectors(self, family: Family, selectors: tuple[str, ...]) -> None:
        assert tuple(entry.selector for entry in entries_for(family)) == selectors

    def test_every_family_has_convention(self) -> None:
        for family in Family:
            assert family in FAMILY_CONVENTIONS
            assert entries_for(family)

    def test_keys_match_entries(self) -> None:
        for key in catalog_keys():
            assert CATALOG[key].key == key

    def test_lookup_miss(self) -> None:
        with pytest.raises(CatalogMiss) as excinfo:
            lookup(Family.BULLSEYE, "1900-1")
        assert excinfo.value.family == "bullseye"
        assert excinfo.value.selector == "1900-1"
        assert "1880-3" in str(excinfo.value)


class TestSelectors:
    """Tests for selector_for dispatch."""

    def test_bullseye_requires_year_and_class(self) -> None:
        with pytest.raises(CatalogMiss, match="Year and Class"):
            selector_for(Family.BULLSEYE, target_class=3)

    def test_figure_requires_class(self) -> None:
        with pytest.raises(CatalogMiss, match="Class"):
            selector_for(Family.FIGURE)

    def test_issf_type_normalised(self) -> None:
        assert selector_for(Family.ISSF, target_type=" 10M-Air-Rifle ") == "10m-air-rifle"

    def test_dot_fixed_selector(self) -> None:
        assert selector_for(Family.DOT, target_class=9) == "standard"


class TestEntries:
    """Tests for specific catalog entries."""

    def test_1880_third_class(self) -> None:
        entry = lookup(Family.BULLSEYE, "1880-3")
        assert (entry.width, entry.height) == (48, 72)
        assert entry.distances == (200, 300)
        assert [ring.name for ring in entry.ring_sets[0].rings] == ["magpie", "inner", "bull"]
        assert entry.centre_size() == (20, 20)

    def test_1862_rings_are_elliptical(self) -> None:
        entry = lookup(Family.BULLSEYE, "1862-1")
        outer, inner, bull = entry.ring_sets[0].rings
        assert outer.shape is RingShape.ELLIPSE
        assert inner.size == (72, 48)
        assert bull.shape is RingShape.CIRCLE

    def test_issf_air_rifle_rings(self) -> None:
        entry = lookup(Family.ISSF, "10m-air-rifle")
        rings = {ring.name: ring for ring in entry.ring_sets[0].rings}
        assert rings["10"].radius == pytest.approx(mm_to_inches(0.5) / 2)
        assert rings["1"].radius == pytest.approx(mm_to_inches(45.5) / 2)
        assert rings["aiming"].line is None
        assert rings["1"].line == "black"
        assert rings["9"].fill == "black"
        assert rings["9"].line == "white"

    def test_issf_rings_outer_first(self) -> None:
        for entry in entries_for(Family.ISSF):
            names = [ring.name for ring in entry.ring_sets[0].rings]
            numbered = [int(name) for name in names if name != "aiming"]
            assert numbered == list(range(1, 11))

    def test_biathlon_has_five_ring_sets(self) -> None:
        entry = lookup(Family.BIATHLON, "prone")
        offsets = [ring_set.centre[0] for ring_set in entry.ring_sets]
        assert len(offsets) == 5
        assert offsets[2] == 0
        assert offsets[3] - offsets[2] == pytest.approx(mm_to_inches(150))

    def test_biathlon_has_no_centre_variant(self) -> None:
        entry = lookup(Family.BIATHLON, "standing")
        with pytest.raises(CatalogMiss) as excinfo:
            entry.centre_size()
        assert excinfo.value.variant == "centre"

    def test_figure_entries_are_two_tone(self) -> None:
        for entry in entries_for(Family.FIGURE):
            assert entry.two_tone
            assert entry.top == "white"
            assert entry.bottom == "buff"
            assert entry.figures

    def test_figure_families_use_yards(self) -> None:
        assert FAMILY_CONVENTIONS[Family.FIGURE].distance_unit is DistanceUnit.YARDS
        assert FAMILY_CONVENTIONS[Family.FIGURE].size_places == 1
        assert FAMILY_CONVENTIONS[Family.BULLSEYE].size_places == 2


class TestCatalogValidation:
    """Catalog dataclasses reject inconsistent data."""

    def test_ring_set_must_nest(self) -> None:
        with pytest.raises(ValueError, match="inside"):
            RingSet((Ring("inner", 1.0, "white"), Ring("outer", 2.0, "white")))

    def test_ring_needs_positive_radius(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            Ring("bad", 0.0, "white")

    def test_outline_needs_a_curve(self) -> None:
        with pytest.raises(ValueError, match="curve"):
            FigureOutline("box", 2, 2, (0, 0), (OutlineLine(0, 2), OutlineLine(2, 2), OutlineLine(2, 0)))

    def test_outline_points_within_bounds(self) -> None:
        with pytest.raises(ValueError, match="outside"):
            FigureOutline(
                "tall",
                2,
                2,
                (0, 0),
                (OutlineCurve(0, 1, 0, 3),),
            )


class TestPresets:
    """Tests for CHAS preset lookup."""

    def test_known_preset(self) -> None:
        preset = lookup_preset(Family.ISSF, "Club-25", accepts_distance_scale=True)
        assert preset is CHAS_PRESETS["club-25"]
        assert (preset.metres, preset.equiv) == (25, 50)

    @pytest.mark.parametrize("name", sorted(CHAS_PRESETS))
    def test_description_matches_distances(self, name: str) -> None:
        preset = CHAS_PRESETS[name]
        assert f"{round_half_up(preset.metres, 1):g} m" in preset.description
        assert f"{preset.equiv:g} metre" in preset.description

    def test_unknown_preset(self) -> None:
        with pytest.raises(CatalogMiss) as excinfo:
            lookup_preset(Family.ISSF, "nope", accepts_distance_scale=True)
        assert excinfo.value.variant == "nope"

    def test_preset_on_family_without_distance_scaling(self) -> None:
        with pytest.raises(CatalogMiss, match="not available"):
            lookup_preset(Family.BULLSEYE, "club-25", accepts_distance_scale=False)
