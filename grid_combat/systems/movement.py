"""Unit movement system.

Relocates a live unit by one cell, keeping ``State.cells`` and
``State.position`` in step. :func:`movement_system` is the turn-level entry
point: it leaves a unit that already has an enemy in reach where it is and
otherwise takes one step chosen by
:func:`grid_combat.systems.pathfinding.choose_step`.

Returns the original ``State`` when the unit does not move.
"""

import logging
from dataclasses import replace

from grid_combat.components import Position
from grid_combat.errors import GridInvariantError
from grid_combat.state import State
from grid_combat.systems.pathfinding import choose_step, destination_squares
from grid_combat.types import EntityID, Occupied, Terrain
from grid_combat.utils.ecs import adjacent_enemies
from grid_combat.utils.grid import assert_occupies, distance, is_open, with_cell

logger = logging.getLogger(__name__)


def move_entity(state: State, entity_id: EntityID, dest: Position) -> State:
    """Move a unit onto the adjacent open cell ``dest``.

    Args:
        state (State): Current state.
        entity_id (EntityID): Live unit to move.
        dest (Position): Orthogonal neighbour of the unit's cell.

    Returns:
        State: New state with the old cell reopened, ``dest`` occupied and the
        unit's position updated.

    Raises:
        GridInvariantError: If the unit is not where the grid says, or
            ``dest`` is not an adjacent open cell.
    """
    if entity_id in state.dead:
        raise GridInvariantError(f"Dead entity {entity_id} cannot move")
    src = assert_occupies(state, entity_id)
    if distance(src, dest) != 1 or not is_open(state, dest):
        raise GridInvariantError(
            f"Entity {entity_id} cannot move from {src} to {dest}"
        )
    cells = with_cell(state.cells, src, Terrain.OPEN)
    cells = with_cell(cells, dest, Occupied(entity_id))
    return replace(
        state,
        cells=cells,
        position=state.position.set(entity_id, dest),
    )


def movement_system(state: State, entity_id: EntityID) -> State:
    """Step a unit toward the nearest square in range of an enemy.

    Args:
        state (State): Current state.
        entity_id (EntityID): Unit whose turn it is.

    Returns:
        State: Same state if the unit is already in range or has no route;
        otherwise the state after a single step.
    """
    if adjacent_enemies(state, entity_id):
        return state

    start = state.position[entity_id]
    step = choose_step(state, start, destination_squares(state, entity_id))
    if step is None:
        return state

    logger.debug("Entity %d moves %s -> %s", entity_id, start, step)
    return move_entity(state, entity_id, step)
