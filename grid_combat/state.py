"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents the
whole battlefield at a round or turn boundary. Systems are pure functions
that take a previous ``State`` and return a *new* one; nothing is mutated in
place. A power trial can therefore start from the parsed state directly,
without copying, and no trial can observe another's moves.

Design notes:

* ``cells`` is a persistent vector of rows, each a persistent vector of
    :data:`grid_combat.types.Cell`. A live unit's cell holds
    ``Occupied(entity_id)``; walls and empty floor hold a ``Terrain``.
* Component stores are **persistent maps** keyed by ``EntityID``. Dead units
    keep their entries (ids are stable) and gain a ``Dead`` marker.
* ``rounds`` counts *completed* rounds; ``ended`` is set the moment a unit
    finds no enemy left (or a protected unit falls in early-stop mode).
"""

from dataclasses import dataclass
from typing import Optional
from pyrsistent import PMap, PVector, pmap, pvector

from grid_combat.components import Attack, Dead, Faction, Health, Position
from grid_combat.entity import Entity
from grid_combat.types import Cell, EntityID


@dataclass(frozen=True)
class State:
    """Immutable battlefield state.

    Attributes:
        width (int): Grid width in cells.
        height (int): Grid height in cells.
        cells (PVector[PVector[Cell]]): Row-major cell contents.
        entity (PMap[EntityID, Entity]): Registry of every unit ever placed.
        faction (PMap[EntityID, Faction]): Side of each unit.
        position (PMap[EntityID, Position]): Current (or last) cell of each unit.
        health (PMap[EntityID, Health]): Hit points.
        attack (PMap[EntityID, Attack]): Attack power.
        dead (PMap[EntityID, Dead]): Fallen units.
        rounds (int): Number of fully completed rounds.
        ended (bool): True once the battle is over.
        winner (Faction | None): Surviving side when the battle ended normally.
        message (str | None): Optional informational / terminal message.
    """

    # Level
    width: int
    height: int
    cells: PVector[PVector[Cell]] = pvector()

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    faction: PMap[EntityID, Faction] = pmap()
    position: PMap[EntityID, Position] = pmap()
    health: PMap[EntityID, Health] = pmap()
    attack: PMap[EntityID, Attack] = pmap()
    dead: PMap[EntityID, Dead] = pmap()

    # Status
    rounds: int = 0
    ended: bool = False
    winner: Optional[Faction] = None
    message: Optional[str] = None

