"""Entity primitives.

Each unit is an ``EntityID`` (an integer) plus component dataclasses stored
in persistent maps on :class:`grid_combat.state.State`. Ids are assigned in
reading order when a map is parsed and are never reused, so the grid can
refer to occupants by id without aliasing live objects.
"""

from dataclasses import dataclass
from typing import Iterator

from grid_combat.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Registry entry for a unit; components live in the ``State`` maps."""

    pass


def entity_id_generator(start: EntityID = 0) -> Iterator[EntityID]:
    """Yield consecutive entity ids beginning at ``start``."""
    eid = start
    while True:
        yield eid
        eid += 1
