from dataclasses import dataclass, field
from typing import Hashable, List, Optional

import pytest

from grid_combat.search import best_first_search


@dataclass(frozen=True, order=True)
class NumberState:
    cost: int
    value: int
    ops: str = field(default="", compare=False)


@dataclass(frozen=True)
class ReachNumber:
    """Reach ``goal`` from a start value using +1 (cost 1) and *2 (cost 1)."""

    goal: int
    limit: int = 1000
    expanded: List[int] = field(default_factory=list, compare=False)

    def branch(self, state: NumberState) -> List[NumberState]:
        self.expanded.append(state.value)
        children = []
        for op, value in (("+", state.value + 1), ("*", state.value * 2)):
            if value <= self.limit:
                children.append(NumberState(state.cost + 1, value, state.ops + op))
        return children

    def is_goal(self, state: NumberState) -> bool:
        return state.value == self.goal

    def token(self, state: NumberState) -> Hashable:
        return state.value


def test_finds_cheapest_goal() -> None:
    result: Optional[NumberState] = best_first_search(
        ReachNumber(goal=10), NumberState(0, 1)
    )
    assert result is not None
    # 1 -> 2 -> 4 -> 5 -> 10 (or an equal-cost variant)
    assert result.cost == 4
    assert result.value == 10


def test_initial_goal_is_returned_immediately() -> None:
    problem = ReachNumber(goal=3)
    result = best_first_search(problem, NumberState(0, 3))
    assert result == NumberState(0, 3)
    assert problem.expanded == []


def test_exhausted_space_returns_none() -> None:
    assert best_first_search(ReachNumber(goal=50, limit=20), NumberState(0, 1)) is None


def test_tokens_are_expanded_once() -> None:
    problem = ReachNumber(goal=64)
    best_first_search(problem, NumberState(0, 1))
    assert len(problem.expanded) == len(set(problem.expanded))


@pytest.mark.parametrize("goal", [1, 2, 7, 33, 100])
def test_search_is_deterministic(goal: int) -> None:
    first = best_first_search(ReachNumber(goal=goal), NumberState(0, 1))
    second = best_first_search(ReachNumber(goal=goal), NumberState(0, 1))
    assert first is not None and second is not None
    assert (first.cost, first.value, first.ops) == (second.cost, second.value, second.ops)
