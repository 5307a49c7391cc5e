"""ECS convenience queries.

Helpers for asking "who is alive" and "who is hostile" without repeating
component lookups inside systems. All functions are pure.
"""

from typing import Dict, List, Optional

from grid_combat.components import Faction
from grid_combat.state import State
from grid_combat.types import EntityID
from grid_combat.utils.grid import neighbors, occupant_at


def live_entities(state: State, faction: Optional[Faction] = None) -> List[EntityID]:
    """Return live unit ids, optionally restricted to one ``faction``."""
    return [
        eid
        for eid in state.entity
        if eid not in state.dead and (faction is None or state.faction[eid] == faction)
    ]


def enemies_of(state: State, entity_id: EntityID) -> List[EntityID]:
    """Return live units fighting for the other side."""
    own = state.faction[entity_id]
    return [eid for eid in live_entities(state) if state.faction[eid] != own]


def adjacent_enemies(state: State, entity_id: EntityID) -> List[EntityID]:
    """Return live enemies standing orthogonally next to ``entity_id``."""
    own = state.faction[entity_id]
    found: List[EntityID] = []
    for pos in neighbors(state.position[entity_id]):
        other = occupant_at(state, pos)
        if other is not None and state.faction[other] != own:
            found.append(other)
    return found


def headcount(state: State) -> Dict[Faction, int]:
    """Number of live units per faction (zero entries included)."""
    counts = {faction: 0 for faction in Faction}
    for eid in live_entities(state):
        counts[state.faction[eid]] += 1
    return counts
