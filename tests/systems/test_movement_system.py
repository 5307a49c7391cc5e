from dataclasses import replace

import pytest
from pyrsistent import pmap

from grid_combat.components import Dead, Position
from grid_combat.errors import GridInvariantError
from grid_combat.levels.convert import from_text
from grid_combat.systems.movement import move_entity, movement_system
from grid_combat.types import Occupied, Terrain
from grid_combat.utils.grid import check_invariants
from tests.test_utils import entity_at

CORRIDOR = """\
#######
#E...G#
#######
"""


def test_move_entity_updates_grid_and_position() -> None:
    state = from_text(CORRIDOR)
    elf = entity_at(state, 1, 1)
    moved = move_entity(state, elf, Position(1, 2))
    assert moved.position[elf] == Position(1, 2)
    assert moved.cells[1][1] == Terrain.OPEN
    assert moved.cells[1][2] == Occupied(elf)
    check_invariants(moved)
    # original snapshot is untouched
    assert state.position[elf] == Position(1, 1)
    assert state.cells[1][2] == Terrain.OPEN


@pytest.mark.parametrize(
    "dest",
    [
        Position(1, 3),  # not adjacent
        Position(0, 1),  # wall
        Position(1, 1),  # own cell
    ],
)
def test_move_entity_rejects_invalid_destination(dest: Position) -> None:
    state = from_text(CORRIDOR)
    with pytest.raises(GridInvariantError):
        move_entity(state, entity_at(state, 1, 1), dest)


def test_move_entity_rejects_occupied_destination() -> None:
    state = from_text("#EG.#\n")
    with pytest.raises(GridInvariantError):
        move_entity(state, entity_at(state, 0, 1), Position(0, 2))


def test_move_entity_rejects_dead_unit() -> None:
    state = from_text(CORRIDOR)
    elf = entity_at(state, 1, 1)
    state = replace(state, dead=pmap({elf: Dead()}))
    with pytest.raises(GridInvariantError):
        move_entity(state, elf, Position(1, 2))


def test_move_entity_detects_stale_position() -> None:
    state = from_text(CORRIDOR)
    elf = entity_at(state, 1, 1)
    state = replace(state, position=state.position.set(elf, Position(1, 3)))
    with pytest.raises(GridInvariantError):
        move_entity(state, elf, Position(1, 2))


def test_movement_system_steps_toward_enemy() -> None:
    state = from_text(CORRIDOR)
    elf = entity_at(state, 1, 1)
    moved = movement_system(state, elf)
    assert moved.position[elf] == Position(1, 2)


def test_movement_system_stays_when_enemy_adjacent() -> None:
    state = from_text("#.EG.#\n")
    elf = entity_at(state, 0, 2)
    assert movement_system(state, elf) is state


def test_movement_system_stays_without_route() -> None:
    state = from_text("#E#.G#\n")
    elf = entity_at(state, 0, 1)
    assert movement_system(state, elf) is state
