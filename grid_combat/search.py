"""Generic best-first search.

:func:`best_first_search` examines states in order of least cost. Rather than
impose a cost type, the order is the natural ordering of the state objects
themselves, so a problem owns its cost and tie-break semantics entirely by
defining ``__lt__`` (a ``dataclass(order=True)`` is the usual way).

States are deduplicated by a *token* rather than by equality. Two states can
describe the same search position reached along different routes with
different costs; comparing them must follow cost, while remembering them must
not. ``SearchProblem.token`` maps a state to the hashable part that identifies
the position.

The search is lazy-deletion Dijkstra: a state whose token was already
expanded is dropped when popped, and the first goal popped is returned. Any
heuristic folded into the ordering must be admissible; that is up to the
problem.
"""

import heapq
import itertools
from typing import Hashable, Iterable, List, Optional, Protocol, Tuple, TypeVar

S = TypeVar("S")


class SearchProblem(Protocol[S]):
    """Capabilities a search problem provides to the engine."""

    def branch(self, state: S) -> Iterable[S]:
        """Return successor states of ``state``."""
        ...

    def is_goal(self, state: S) -> bool:
        """Return True if ``state`` solves the problem."""
        ...

    def token(self, state: S) -> Hashable:
        """Return the deduplication key of ``state``."""
        ...


def best_first_search(problem: SearchProblem[S], initial: S) -> Optional[S]:
    """Return the least state satisfying ``problem.is_goal``, or ``None``.

    Args:
        problem: Branching, goal and token functions.
        initial: Start state.

    Returns:
        The first goal state popped from the priority queue, or ``None`` if
        the reachable space is exhausted without one.
    """
    # The counter only separates states that compare equal so heapq never
    # falls through to comparing payloads.
    counter = itertools.count()
    queue: List[Tuple[S, int]] = [(initial, next(counter))]
    visited = set()
    while queue:
        state, _ = heapq.heappop(queue)
        if problem.is_goal(state):
            return state
        key = problem.token(state)
        if key in visited:
            continue
        visited.add(key)
        for child in problem.branch(state):
            heapq.heappush(queue, (child, next(counter)))
    return None
