"""Text map <-> State conversion.

The map format is a rectangular block of characters, one per cell:

* ``#`` wall
* ``.`` open floor
* ``E`` an elf standing on open floor
* ``G`` a goblin standing on open floor

Any other character is read as a wall. Rows shorter than the widest row are
padded with walls. Units receive entity ids in reading order, which is also
their initial initiative order.
"""

from typing import Dict, List

from pyrsistent import pmap, pvector

from grid_combat.components import Attack, Faction, FACTION_SYMBOLS, Health, Position
from grid_combat.entity import Entity, entity_id_generator
from grid_combat.state import State
from grid_combat.types import Cell, EntityID, Occupied, Terrain

DEFAULT_HEALTH = 200
DEFAULT_ATTACK = 3

WALL_SYMBOL = "#"
OPEN_SYMBOL = "."

SYMBOL_TO_FACTION: Dict[str, Faction] = {
    symbol: faction for faction, symbol in FACTION_SYMBOLS.items()
}


def from_text(
    text: str, health: int = DEFAULT_HEALTH, attack: int = DEFAULT_ATTACK
) -> State:
    """Parse a map into a fresh ``State``.

    Args:
        text: Map text; blank leading/trailing lines are ignored.
        health: Starting hit points for every unit.
        attack: Starting attack power for every unit.

    Returns:
        State: Round-zero state with every unit placed.

    Raises:
        ValueError: If ``health`` or ``attack`` is not positive.
    """
    if health < 1 or attack < 1:
        raise ValueError(f"health and attack must be positive, got {health}/{attack}")

    lines = text.strip("\n").splitlines()
    width = max((len(line) for line in lines), default=0)
    next_id = entity_id_generator()

    entity: Dict[EntityID, Entity] = {}
    faction: Dict[EntityID, Faction] = {}
    position: Dict[EntityID, Position] = {}
    health_store: Dict[EntityID, Health] = {}
    attack_store: Dict[EntityID, Attack] = {}
    rows: List[List[Cell]] = []

    for row, line in enumerate(lines):
        cells: List[Cell] = []
        for col, symbol in enumerate(line.ljust(width, WALL_SYMBOL)):
            if symbol in SYMBOL_TO_FACTION:
                eid = next(next_id)
                entity[eid] = Entity()
                faction[eid] = SYMBOL_TO_FACTION[symbol]
                position[eid] = Position(row, col)
                health_store[eid] = Health(health=health, max_health=health)
                attack_store[eid] = Attack(power=attack)
                cells.append(Occupied(eid))
            elif symbol == OPEN_SYMBOL:
                cells.append(Terrain.OPEN)
            else:
                cells.append(Terrain.WALL)
        rows.append(cells)

    return State(
        width=width,
        height=len(rows),
        cells=pvector(pvector(cells) for cells in rows),
        entity=pmap(entity),
        faction=pmap(faction),
        position=pmap(position),
        health=pmap(health_store),
        attack=pmap(attack_store),
    )
