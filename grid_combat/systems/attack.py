"""Attack resolution system.

After moving, a unit strikes one orthogonally adjacent enemy: the one with
the fewest hit points, reading order breaking ties. A blow that takes the
target to zero kills it; its cell is reopened immediately so later units in
the same round can walk through.
"""

import logging
from dataclasses import replace
from typing import Optional

from grid_combat.state import State
from grid_combat.types import EntityID, Terrain
from grid_combat.utils.ecs import adjacent_enemies
from grid_combat.utils.grid import assert_occupies, with_cell
from grid_combat.utils.health import apply_damage_and_check_death

logger = logging.getLogger(__name__)


def select_target(state: State, entity_id: EntityID) -> Optional[EntityID]:
    """Return the adjacent enemy to strike, or ``None`` if none is in reach."""
    candidates = adjacent_enemies(state, entity_id)
    if not candidates:
        return None
    return min(
        candidates,
        key=lambda eid: (state.health[eid].health, state.position[eid]),
    )


def attack_system(state: State, entity_id: EntityID) -> State:
    """Let ``entity_id`` strike its chosen target, if it has one."""
    target = select_target(state, entity_id)
    if target is None:
        return state

    health, dead = apply_damage_and_check_death(
        state.health, state.dead, target, state.attack[entity_id].power
    )
    state = replace(state, health=health, dead=dead)

    if target in dead:
        pos = assert_occupies(state, target)
        logger.debug(
            "Entity %d (%s) kills entity %d at %s",
            entity_id,
            state.faction[entity_id],
            target,
            pos,
        )
        state = replace(state, cells=with_cell(state.cells, pos, Terrain.OPEN))
    return state
