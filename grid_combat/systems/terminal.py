"""Terminal condition systems.

Set ``state.ended`` (and ``state.winner`` when one side is wiped out) exactly
once. Other systems short-circuit on an ended state.
"""

from dataclasses import replace
from typing import Optional

from grid_combat.components import Faction
from grid_combat.state import State
from grid_combat.types import EntityID
from grid_combat.utils.ecs import enemies_of, headcount


def victory_system(state: State, entity_id: EntityID) -> State:
    """End the battle if ``entity_id`` has no live enemy left to fight."""
    if state.ended or enemies_of(state, entity_id):
        return state
    winner = state.faction[entity_id]
    return replace(
        state,
        ended=True,
        winner=winner,
        message=f"{winner} win after {state.rounds} full rounds",
    )


def casualty_system(state: State, protected: Optional[Faction], before: int) -> State:
    """End the battle as soon as ``protected`` has fewer than ``before`` units.

    Used by the power search, where any loss disqualifies the trial.
    """
    if state.ended or protected is None:
        return state
    if headcount(state)[protected] < before:
        return replace(state, ended=True, message=f"{protected} casualty")
    return state
