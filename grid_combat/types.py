"""Common type aliases and enumerations.

``ObserverFn`` is the extension point used by the battle loop to expose
intermediate states (e.g. for grid dumps) without printing from the core.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Callable, Union, TYPE_CHECKING


# Forward declaration for ObserverFn typing to avoid circular imports:
if TYPE_CHECKING:
    from grid_combat.state import State

EntityID = int

ObserverFn = Callable[["State"], None]


class Terrain(StrEnum):
    """Static cell contents."""

    WALL = auto()
    OPEN = auto()


@dataclass(frozen=True)
class Occupied:
    """Cell held by a live unit, referenced by its stable entity id."""

    entity_id: EntityID


Cell = Union[Terrain, Occupied]
