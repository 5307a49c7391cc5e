import pytest

from grid_combat.components import Attack, Faction, Health, Position
from grid_combat.levels.convert import from_text
from grid_combat.types import Occupied, Terrain
from grid_combat.utils.render import to_text
from tests.test_utils import EXAMPLE_MAP, REFERENCE_BATTLES


def test_parse_example() -> None:
    state = from_text(EXAMPLE_MAP)
    assert (state.width, state.height) == (7, 7)
    assert len(state.entity) == 6
    assert state.faction[0] == Faction.GOBLIN
    assert state.position[0] == Position(1, 2)
    assert state.health[0] == Health(health=200, max_health=200)
    assert state.attack[0] == Attack(power=3)
    assert state.cells[1][2] == Occupied(0)
    assert state.rounds == 0
    assert not state.ended


def test_ids_are_assigned_in_reading_order() -> None:
    state = from_text(EXAMPLE_MAP)
    positions = [state.position[eid] for eid in sorted(state.entity)]
    assert positions == sorted(positions)


def test_custom_starting_stats() -> None:
    state = from_text("#EG#", health=10, attack=4)
    assert state.health[0] == Health(health=10, max_health=10)
    assert state.attack[1] == Attack(power=4)


@pytest.mark.parametrize("health, attack", [(0, 3), (200, 0), (-1, -1)])
def test_rejects_non_positive_stats(health: int, attack: int) -> None:
    with pytest.raises(ValueError):
        from_text(EXAMPLE_MAP, health=health, attack=attack)


def test_unknown_symbols_are_walls() -> None:
    state = from_text("#.x?E#")
    assert state.cells[0][2] == Terrain.WALL
    assert state.cells[0][3] == Terrain.WALL
    assert to_text(state) == "#.##E#\n"


def test_ragged_rows_are_padded_with_walls() -> None:
    state = from_text("#...#\n#.#\n")
    assert state.width == 5
    assert state.cells[1][3] == Terrain.WALL
    assert state.cells[1][4] == Terrain.WALL


@pytest.mark.parametrize("text", [battle[0] for battle in REFERENCE_BATTLES])
def test_parse_render_round_trip(text: str) -> None:
    assert to_text(from_text(text)) == text


def test_annotated_render_lists_occupants() -> None:
    assert to_text(from_text(EXAMPLE_MAP), annotate=True) == (
        "#######\n"
        "#.G...#   G(200)\n"
        "#...EG#   E(200), G(200)\n"
        "#.#.#G#   G(200)\n"
        "#..G#E#   G(200), E(200)\n"
        "#.....#\n"
        "#######\n"
    )
