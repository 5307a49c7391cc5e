"""Round reducer and battle orchestration.

This module wires the systems together into unit turns, rounds and whole
battles. Every function is pure: it returns a *new*
:class:`grid_combat.state.State`.

Ordering (per round):

1. Initiative: live units sorted by position in reading order. The order is
    fixed for the round even though units move during it.
2. For each unit still alive: ``victory_system`` ends the battle if it has no
    enemy left; ``movement_system`` takes at most one step unless an enemy is
    already in reach; ``attack_system`` strikes the weakest adjacent enemy.
3. In early-stop mode ``casualty_system`` ends the battle the moment the
    protected faction loses a unit.
4. A round that runs to completion increments ``rounds``; a round cut short
    by the end of the battle does not.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from grid_combat.components import Faction
from grid_combat.errors import CombatStalledError
from grid_combat.state import State
from grid_combat.systems.attack import attack_system
from grid_combat.systems.movement import movement_system
from grid_combat.systems.terminal import casualty_system, victory_system
from grid_combat.types import EntityID, ObserverFn
from grid_combat.utils.ecs import headcount, live_entities
from grid_combat.utils.grid import check_invariants

logger = logging.getLogger(__name__)


def initiative_order(state: State) -> List[EntityID]:
    """Live unit ids in reading order of their positions."""
    return sorted(live_entities(state), key=lambda eid: state.position[eid])


def take_turn(state: State, entity_id: EntityID) -> State:
    """Resolve one unit's turn: identify targets, move, attack.

    Units that fell earlier in the round and turns in an ended battle are
    skipped and return ``state`` unchanged.
    """
    if state.ended or entity_id in state.dead:
        return state

    state = victory_system(state, entity_id)
    if state.ended:
        return state

    state = movement_system(state, entity_id)
    state = attack_system(state, entity_id)
    return state


def step_round(state: State, stop_on_death_of: Optional[Faction] = None) -> State:
    """Run every turn of one round.

    Args:
        state (State): State at a round boundary.
        stop_on_death_of (Faction | None): Faction whose first loss ends the
            battle immediately (early-stop mode).

    Returns:
        State: State at the next round boundary, or the ended state.
    """
    if state.ended:
        return state

    before = headcount(state)[stop_on_death_of] if stop_on_death_of is not None else 0
    for entity_id in initiative_order(state):
        state = take_turn(state, entity_id)
        state = casualty_system(state, stop_on_death_of, before)
        if state.ended:
            return state

    return replace(state, rounds=state.rounds + 1)


def run_combat(
    state: State,
    stop_on_death_of: Optional[Faction] = None,
    observer: Optional[ObserverFn] = None,
    max_rounds: Optional[int] = None,
) -> State:
    """Play rounds until the battle ends.

    Args:
        state (State): Initial state.
        stop_on_death_of (Faction | None): Early-stop faction, see
            :func:`step_round`.
        observer (ObserverFn | None): Called with the state at every round
            boundary and once with the final state.
        max_rounds (int | None): Upper bound on completed rounds.

    Returns:
        State: Ended state.

    Raises:
        CombatStalledError: If a full round changes nothing (the battle can
            never end) or ``max_rounds`` is exceeded.
        GridInvariantError: If the grid and unit positions diverge.
    """
    check_invariants(state)
    while not state.ended:
        if observer is not None:
            observer(state)
        previous = state
        state = step_round(state, stop_on_death_of)
        check_invariants(state)
        if state.ended:
            break
        logger.debug(
            "Round %d complete: %s",
            state.rounds,
            {str(f): n for f, n in headcount(state).items()},
        )
        if state.position == previous.position and state.health == previous.health:
            raise CombatStalledError(
                f"No unit can move or attack after {state.rounds} rounds"
            )
        if max_rounds is not None and state.rounds >= max_rounds:
            raise CombatStalledError(f"Battle still running after {max_rounds} rounds")

    if observer is not None:
        observer(state)
    return state
