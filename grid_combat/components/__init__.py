"""grid_combat.components
=================================

Aggregate import surface for the component dataclasses used by the engine,
e.g.::

    from grid_combat.components import Position, Health, Attack

All component classes are simple value objects; they carry no behavior
beyond their fields and are replaced by systems during a turn.
"""

from .properties import Attack
from .properties import Dead
from .properties import Faction, FACTION_SYMBOLS
from .properties import Health
from .properties import Position

__all__ = [
    "Attack",
    "Dead",
    "Faction",
    "FACTION_SYMBOLS",
    "Health",
    "Position",
]
