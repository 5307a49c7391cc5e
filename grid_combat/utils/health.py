"""Health and damage helpers."""

from typing import Tuple
from pyrsistent import PMap

from grid_combat.components import Health, Dead
from grid_combat.types import EntityID


def apply_damage_and_check_death(
    health_dict: PMap[EntityID, Health],
    dead_dict: PMap[EntityID, Dead],
    eid: EntityID,
    damage: int,
) -> Tuple[PMap[EntityID, Health], PMap[EntityID, Dead]]:
    """Apply damage to entity and mark dead once HP reaches zero."""
    if damage < 0:
        raise ValueError(f"Negative damage {damage} against entity {eid}")
    hp = health_dict[eid]
    new_hp = max(0, hp.health - damage)
    health_dict = health_dict.set(eid, Health(health=new_hp, max_health=hp.max_health))
    if new_hp == 0:
        dead_dict = dead_dict.set(eid, Dead())
    return health_dict, dead_dict


def total_health(health_dict: PMap[EntityID, Health]) -> int:
    """Sum of remaining hit points across all units, fallen ones included."""
    return sum(hp.health for hp in health_dict.values())
