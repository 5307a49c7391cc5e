"""Deterministic elves-versus-goblins grid combat.

Typical use::

    from grid_combat import from_text, simulate, find_minimal_power

    state = from_text(open("map.txt").read())
    print(simulate(state).outcome)
    power, result = find_minimal_power(state)
"""

from grid_combat.errors import CombatStalledError, GridInvariantError
from grid_combat.levels.convert import from_text
from grid_combat.outcome import (
    CombatResult,
    find_minimal_power,
    outcome,
    simulate,
    solve,
    with_attack_power,
)
from grid_combat.search import SearchProblem, best_first_search
from grid_combat.state import State
from grid_combat.step import run_combat, step_round, take_turn
from grid_combat.utils.render import to_text

__all__ = [
    "CombatResult",
    "CombatStalledError",
    "GridInvariantError",
    "SearchProblem",
    "State",
    "best_first_search",
    "find_minimal_power",
    "from_text",
    "outcome",
    "run_combat",
    "simulate",
    "solve",
    "step_round",
    "take_turn",
    "to_text",
    "with_attack_power",
]
