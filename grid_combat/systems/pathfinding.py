"""Step selection toward the nearest square in range of an enemy.

A unit that cannot attack where it stands looks at every open square next to
a live enemy (its *destinations*), commits to the reachable one with the
fewest steps, and takes the first step of a shortest route there. Ties are
resolved in reading order, first on the destination and then on the step.

The rule is expressed as a :class:`grid_combat.search.SearchProblem` whose
state ordering is ``(steps, target, first_step)``. Because the grid is
unweighted every state at ``n`` steps is pushed before any of them is popped,
so the first state popped for a position already carries the reading-order
first step among all shortest routes to it, and the first goal popped is the
reading-order first nearest destination.
"""

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, FrozenSet, Hashable, List, Optional

from grid_combat.components import Position
from grid_combat.search import best_first_search
from grid_combat.state import State
from grid_combat.types import EntityID
from grid_combat.utils.ecs import enemies_of
from grid_combat.utils.grid import distance, is_open, neighbors

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class PathSearchState:
    """One frontier entry of the step search.

    Comparison uses ``steps``, then ``target``, then ``first_step``; ``pos``
    only separates states that agree on all three.

    Attributes:
        steps: Moves taken from the origin.
        target: Destination nearest to ``pos`` (reading order on ties).
        first_step: First move taken from the origin; ``None`` at the origin.
        pos: Current cell.
        cost: Path cost so far; equals ``steps`` on this unweighted grid.
    """

    steps: int
    target: Position
    first_step: Optional[Position]
    pos: Position
    cost: int = field(default=0, compare=False)


@dataclass(frozen=True)
class PathSearch:
    """Search problem over open cells of one ``State``."""

    state: State
    destinations: FrozenSet[Position]
    _nearest: Dict[Position, Position] = field(
        default_factory=dict, compare=False, repr=False
    )

    def nearest_destination(self, pos: Position) -> Position:
        if pos not in self._nearest:
            self._nearest[pos] = min(
                self.destinations, key=lambda d: (distance(pos, d), d)
            )
        return self._nearest[pos]

    def branch(self, node: PathSearchState) -> List[PathSearchState]:
        children: List[PathSearchState] = []
        for pos in neighbors(node.pos):
            if not is_open(self.state, pos):
                continue
            children.append(
                PathSearchState(
                    steps=node.steps + 1,
                    target=self.nearest_destination(pos),
                    first_step=node.first_step if node.first_step is not None else pos,
                    pos=pos,
                    cost=node.steps + 1,
                )
            )
        return children

    def is_goal(self, node: PathSearchState) -> bool:
        return node.pos in self.destinations

    def token(self, node: PathSearchState) -> Hashable:
        return node.pos


def destination_squares(state: State, entity_id: EntityID) -> FrozenSet[Position]:
    """Open squares orthogonally adjacent to any live enemy of ``entity_id``."""
    squares = set()
    for enemy in enemies_of(state, entity_id):
        for pos in neighbors(state.position[enemy]):
            if is_open(state, pos):
                squares.add(pos)
    return frozenset(squares)


def choose_step(
    state: State, start: Position, destinations: AbstractSet[Position]
) -> Optional[Position]:
    """Return the first step from ``start`` toward the best destination.

    Args:
        state: Current battlefield.
        start: Mover's cell (occupied by the mover itself).
        destinations: Candidate squares to reach.

    Returns:
        The neighbouring cell to move into, or ``None`` when no destination
        is given or none is reachable.
    """
    if not destinations:
        return None
    problem = PathSearch(state=state, destinations=frozenset(destinations))
    result = best_first_search(
        problem, PathSearchState(steps=0, target=start, first_step=None, pos=start)
    )
    if result is None:
        logger.debug("No route from %s to any of %d squares", start, len(destinations))
        return None
    return result.first_step
