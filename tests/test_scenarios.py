"""
End-to-end scenarios: harmony generation feeding room auto-fill.
"""

from colorfit.services.assignment.room import assigned_cohesion, auto_fill_room
from colorfit.services.assignment.templates import find_room_template, instantiate_room_template
from colorfit.services.colors.harmony import HarmonyMode, generate_harmony
from colorfit.utils.ids import ItemIdSequence

SEEDS = [11, 23, 42, 97, 512, 2024, 31337, 20240101]


def _living_room():
    return instantiate_room_template(find_room_template("Living Room"), ItemIdSequence())


def _palette(bases, seed):
    return list(bases) + generate_harmony(bases, HarmonyMode.ANALOGOUS, 6, 0, seed)


class TestLivingRoomScenario:
    """Eight-item living room filled from an eleven-color palette."""

    def test_template_shape(self):
        items = _living_room()
        assert len(items) == 8
        assert items[0].name == "Floors"

    def test_nothing_left_unassigned(self, scenario_bases):
        for seed in SEEDS:
            palette = _palette(scenario_bases, seed)
            assert len(palette) == 11
            result = auto_fill_room(_living_room(), palette)
            assert all(item.is_assigned for item in result)

    def test_floors_darker_than_main_wall(self, scenario_bases):
        darker = 0
        for seed in SEEDS:
            result = auto_fill_room(_living_room(), _palette(scenario_bases, seed))
            by_name = {item.name: item for item in result}
            if by_name["Floors"].color.l < by_name["Main Wall"].color.l:
                darker += 1
        assert darker > len(SEEDS) // 2

    def test_default_fill_at_least_as_cohesive_as_list_orders(self, scenario_bases):
        for seed in SEEDS:
            palette = _palette(scenario_bases, seed)
            items = _living_room()
            ids = [item.id for item in items]
            default = assigned_cohesion(auto_fill_room(items, palette), palette)
            listed = assigned_cohesion(auto_fill_room(items, palette, order=ids), palette)
            reverse = assigned_cohesion(auto_fill_room(items, palette, order=ids[::-1]), palette)
            assert default >= listed, seed
            assert default >= reverse, seed
