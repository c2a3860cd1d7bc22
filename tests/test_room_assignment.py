"""
Unit tests for room auto-fill.
"""

import pytest

from colorfit.services.assignment.items import Item, ItemRole, Tendency
from colorfit.services.assignment.room import (
    assigned_cohesion,
    auto_fill_room,
    diversity_bonus,
    lightness_fit,
    role_fit,
    tendency_bonus,
)
from colorfit.services.cohesion.scorer import FillAlgorithm
from colorfit.services.colors.model import Color
from colorfit.utils.ids import ItemIdSequence


def _items(*names, weights=None):
    next_id = ItemIdSequence()
    weights = weights or [3.0] * len(names)
    return [Item(id=next_id(), name=name, weight=w) for name, w in zip(names, weights)]


class TestFitnessTerms:
    """Individual fitness terms."""

    def test_lightness_fit_peaks_at_midpoint(self):
        assert lightness_fit(50, (20, 80)) == pytest.approx(30)
        assert lightness_fit(80, (20, 80)) == pytest.approx(20)
        assert lightness_fit(10, (20, 80)) == pytest.approx(-8)
        assert lightness_fit(90, (20, 80)) == pytest.approx(-8)

    def test_lightness_fit_zero_width_range(self):
        assert lightness_fit(50, (50, 50)) == pytest.approx(30)

    def test_role_fit_background_prefers_quiet_light(self):
        assert role_fit(90, 3, ItemRole.BACKGROUND) == 15
        assert role_fit(40, 40, ItemRole.BACKGROUND) == -5

    def test_role_fit_ground(self):
        assert role_fit(40, 20, ItemRole.GROUND) == 15
        assert role_fit(80, 2, ItemRole.GROUND) == -5

    def test_role_fit_accent_neutral_anchor(self):
        assert role_fit(50, 30, ItemRole.ACCENT) == 12
        assert role_fit(50, 15, ItemRole.ACCENT) == 6
        assert role_fit(50, 5, ItemRole.NEUTRAL) == 10
        assert role_fit(50, 30, ItemRole.NEUTRAL) == -8
        assert role_fit(50, 10, ItemRole.ANCHOR) == 8

    def test_diversity_bonus(self):
        assert diversity_bonus(0, 5, 5) == 25
        assert diversity_bonus(1, 5, 5) == 8
        assert diversity_bonus(2, 5, 5) == -5
        assert diversity_bonus(5, 5, 5) == -10
        # Palette larger than remaining items: reuse costs more
        assert diversity_bonus(1, 8, 3) == -2
        assert diversity_bonus(0, 8, 3) == 25

    def test_tendency_bonus(self):
        light_cream = Color.from_lch(92, 5, 85)
        dark_navy = Color.from_lch(25, 25, 265)
        assert tendency_bonus(light_cream, Tendency.LIGHTER) == 8
        assert tendency_bonus(dark_navy, Tendency.LIGHTER) == -6
        assert tendency_bonus(dark_navy, Tendency.DARKER) == 4
        assert tendency_bonus(dark_navy, Tendency.COOLER) == 4
        assert tendency_bonus(dark_navy, Tendency.WARMER) == -1
        assert tendency_bonus(light_cream, Tendency.NEUTRAL) == 7
        assert tendency_bonus(light_cream, Tendency.ANY) == 0


class TestAutoFillRoom:
    """End-to-end behavior of the greedy fill."""

    def test_empty_palette_returns_items_unchanged(self):
        items = _items("Floors", "Main Wall")
        result = auto_fill_room(items, [])
        assert result == items
        assert result is not items

    def test_empty_items(self, spread_palette):
        assert auto_fill_room([], spread_palette) == []

    def test_fills_every_item(self, spread_palette):
        items = _items("Floors", "Main Wall", "Couch", "Rug", "Drapes")
        result = auto_fill_room(items, spread_palette)
        assert all(item.is_assigned for item in result)
        assert [i.id for i in result] == [i.id for i in items]

    def test_inputs_not_mutated(self, spread_palette):
        items = _items("Floors", "Main Wall", "Couch")
        palette = list(spread_palette)
        auto_fill_room(items, palette)
        assert all(not item.is_assigned for item in items)
        assert palette == spread_palette

    def test_colors_come_from_palette(self, spread_palette):
        result = auto_fill_room(_items("Floors", "Main Wall", "Doors", "Rug"), spread_palette)
        palette_hexes = {c.to_hex() for c in spread_palette}
        assert all(item.color.to_hex() in palette_hexes for item in result)

    def test_pinned_items_untouched(self, spread_palette):
        items = _items("Floors", "Main Wall", "Couch")
        pinned_color = Color.from_hex("#123456")
        items[1] = items[1].with_color(pinned_color)
        result = auto_fill_room(items, spread_palette)
        assert result[1].color == pinned_color

    def test_fully_pinned_is_idempotent(self, spread_palette):
        """Running the fill on an already-filled room changes nothing."""
        first = auto_fill_room(_items("Floors", "Main Wall", "Couch", "Rug"), spread_palette)
        second = auto_fill_room(first, spread_palette)
        assert [i.color.to_hex() for i in second] == [i.color.to_hex() for i in first]

    def test_deterministic(self, spread_palette):
        items = _items("Floors", "Main Wall", "Accent Wall", "Couch", "Rug", "Drapes")
        a = auto_fill_room(items, spread_palette, FillAlgorithm.ANCHOR_PIECE)
        b = auto_fill_room(items, spread_palette, FillAlgorithm.ANCHOR_PIECE)
        assert [i.color.to_hex() for i in a] == [i.color.to_hex() for i in b]

    @pytest.mark.parametrize("algorithm", list(FillAlgorithm))
    def test_diversity_pressure(self, spread_palette, algorithm):
        """With a bigger palette than items, the fill does not collapse onto 1-2 colors."""
        items = _items("Floors", "Main Wall", "Couch", "Drapes", "Throw Pillows")
        result = auto_fill_room(items, spread_palette, algorithm)
        assert len({item.color.to_hex() for item in result}) > 2

    def test_main_wall_lighter_than_floors(self, spread_palette):
        result = auto_fill_room(_items("Floors", "Main Wall", weights=[10, 10]), spread_palette)
        assert result[0].color.l < result[1].color.l

    def test_explicit_order(self, spread_palette):
        items = _items("Floors", "Main Wall", "Couch", weights=[10, 10, 7])
        reverse = [item.id for item in reversed(items)]
        result = auto_fill_room(items, spread_palette, order=reverse)
        assert all(item.is_assigned for item in result)

    @pytest.mark.parametrize("algorithm", list(FillAlgorithm))
    def test_default_order_never_less_cohesive_than_list_orders(self, spread_palette, algorithm):
        items = _items("Floors", "Main Wall", "Couch", "Rug", "Throw Pillows", weights=[10, 10, 7, 8, 2])
        ids = [item.id for item in items]
        default = assigned_cohesion(auto_fill_room(items, spread_palette, algorithm), spread_palette, algorithm)
        for order in (ids, ids[::-1]):
            filled = auto_fill_room(items, spread_palette, algorithm, order)
            assert default >= assigned_cohesion(filled, spread_palette, algorithm)

    def test_assigned_cohesion_ignores_unassigned(self, spread_palette):
        items = _items("Floors", "Main Wall")
        assert assigned_cohesion(items, spread_palette) == 100
        filled = auto_fill_room(items, spread_palette)
        assert 0 <= assigned_cohesion(filled, spread_palette) <= 100

    def test_order_with_unlisted_items(self, spread_palette):
        items = _items("Floors", "Main Wall", "Couch")
        result = auto_fill_room(items, spread_palette, order=[items[2].id])
        assert all(item.is_assigned for item in result)

    def test_unknown_item_uses_fallback_metadata(self, spread_palette):
        result = auto_fill_room(_items("Mystery Object"), spread_palette)
        assert result[0].is_assigned
