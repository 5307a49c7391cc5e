"""Property component aggregates.

This module re-exports the components that describe a unit: where it stands
(:class:`Position`), how much it can take (:class:`Health`), how hard it hits
(:class:`Attack`), which side it is on (:class:`Faction`) and whether it has
fallen (:class:`Dead`).

All properties are immutable; replacing an entry in the owning ``State`` map
is how a change is expressed between turns.
"""

from .attack import Attack
from .dead import Dead
from .faction import Faction, FACTION_SYMBOLS
from .health import Health
from .position import Position

__all__ = [
    "Attack",
    "Dead",
    "Faction",
    "FACTION_SYMBOLS",
    "Health",
    "Position",
]
