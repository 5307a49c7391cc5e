"""Battle outcome and the attack power search.

``simulate`` plays one battle and summarises it as a :class:`CombatResult`.
``find_minimal_power`` re-runs the battle with increasing attack power for
one faction until that faction finishes without a single loss. Each trial
starts from the same immutable initial ``State``, so trials are independent.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from pyrsistent import PMap, pmap

from grid_combat.components import Attack, Faction
from grid_combat.levels.convert import from_text
from grid_combat.state import State
from grid_combat.step import run_combat
from grid_combat.types import ObserverFn
from grid_combat.utils.ecs import headcount
from grid_combat.utils.health import total_health

logger = logging.getLogger(__name__)

PROTECTED_FACTION = Faction.ELF


@dataclass(frozen=True)
class CombatResult:
    """Summary of one finished battle.

    Attributes:
        outcome: ``rounds * hit_points``.
        rounds: Completed full rounds.
        hit_points: Remaining hit points summed over every unit.
        winner: Surviving faction, or ``None`` if the battle was cut short.
        survivors: Live units per faction at the end.
        losses: Units lost per faction.
        state: Final state.
    """

    outcome: int
    rounds: int
    hit_points: int
    winner: Optional[Faction]
    survivors: PMap[Faction, int]
    losses: PMap[Faction, int]
    state: State


def outcome(state: State) -> int:
    """Completed rounds times total remaining hit points."""
    return state.rounds * total_health(state.health)


def summarize(initial: State, final: State) -> CombatResult:
    before = headcount(initial)
    after = headcount(final)
    return CombatResult(
        outcome=outcome(final),
        rounds=final.rounds,
        hit_points=total_health(final.health),
        winner=final.winner,
        survivors=pmap(after),
        losses=pmap({faction: before[faction] - after[faction] for faction in Faction}),
        state=final,
    )


def simulate(
    state: State,
    stop_on_death_of: Optional[Faction] = None,
    observer: Optional[ObserverFn] = None,
) -> CombatResult:
    """Play ``state`` to the end and summarise the result."""
    final = run_combat(state, stop_on_death_of=stop_on_death_of, observer=observer)
    result = summarize(state, final)
    logger.info(
        "Battle over after %d rounds: %s, %d hit points left, outcome %d",
        result.rounds,
        final.message,
        result.hit_points,
        result.outcome,
    )
    return result


def with_attack_power(state: State, faction: Faction, power: int) -> State:
    """Return ``state`` with every unit of ``faction`` hitting for ``power``.

    Raises:
        ValueError: If ``power`` is not positive.
    """
    if power < 1:
        raise ValueError(f"Attack power must be positive, got {power}")
    attack = state.attack
    for eid, side in state.faction.items():
        if side == faction:
            attack = attack.set(eid, Attack(power=power))
    return replace(state, attack=attack)


def base_power(state: State, faction: Faction) -> int:
    """Highest attack power among units of ``faction`` (0 if it has none)."""
    return max(
        (state.attack[eid].power for eid, side in state.faction.items() if side == faction),
        default=0,
    )


def find_minimal_power(
    state: State,
    faction: Faction = PROTECTED_FACTION,
    start: Optional[int] = None,
) -> Tuple[int, CombatResult]:
    """Find the lowest attack power with which ``faction`` loses nobody.

    Scans upward from ``start`` (default: the faction's current power plus
    one). Every trial stops at the first loss. The scan is unbounded; a map
    on which ``faction`` can never win without losses does not terminate.

    Returns:
        tuple[int, CombatResult]: The power and the result of that battle.
    """
    power = base_power(state, faction) + 1 if start is None else start
    while True:
        result = simulate(
            with_attack_power(state, faction, power), stop_on_death_of=faction
        )
        logger.info(
            "Trial with %s power %d: %d lost", faction, power, result.losses[faction]
        )
        if result.losses[faction] == 0:
            return power, result
        power += 1


def solve(text: str) -> Tuple[int, int]:
    """Return (baseline outcome, outcome with minimal flawless elf power)."""
    state = from_text(text)
    baseline = simulate(state)
    _, boosted = find_minimal_power(state, PROTECTED_FACTION)
    return baseline.outcome, boosted.outcome

