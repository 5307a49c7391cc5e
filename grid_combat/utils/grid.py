"""Grid math / occupancy helpers.

Pure helpers over ``State.cells`` used by the pathfinding, movement and
attack systems. The neighbour order defined here is part of the tie-break
contract: it is reading order around a cell.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from pyrsistent import PVector

from grid_combat.components import Position
from grid_combat.errors import GridInvariantError
from grid_combat.state import State
from grid_combat.types import Cell, EntityID, Occupied, Terrain

# up, left, right, down
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (0, -1),
    (0, 1),
    (1, 0),
)


def neighbors(pos: Position) -> Iterator[Position]:
    """Yield the four orthogonal neighbours of ``pos`` in reading order."""
    for d_row, d_col in NEIGHBOR_OFFSETS:
        yield Position(pos.row + d_row, pos.col + d_col)


def distance(a: Position, b: Position) -> int:
    """Manhattan distance between two cells."""
    return abs(a.row - b.row) + abs(a.col - b.col)


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies within the grid rectangle."""
    return 0 <= pos.row < state.height and 0 <= pos.col < state.width


def cell_at(state: State, pos: Position) -> Cell:
    """Return the cell at ``pos``; out-of-bounds reads as a wall."""
    if not is_in_bounds(state, pos):
        return Terrain.WALL
    return state.cells[pos.row][pos.col]


def is_open(state: State, pos: Position) -> bool:
    """Return True if ``pos`` is passable floor with no occupant."""
    return cell_at(state, pos) == Terrain.OPEN


def occupant_at(state: State, pos: Position) -> Optional[EntityID]:
    """Return the id of the live unit standing on ``pos``, if any."""
    cell = cell_at(state, pos)
    if isinstance(cell, Occupied):
        return cell.entity_id
    return None


def with_cell(
    cells: PVector[PVector[Cell]], pos: Position, cell: Cell
) -> PVector[PVector[Cell]]:
    """Return ``cells`` with ``pos`` replaced by ``cell``."""
    return cells.set(pos.row, cells[pos.row].set(pos.col, cell))


def assert_occupies(state: State, entity_id: EntityID) -> Position:
    """Return the unit's position, raising if the grid disagrees."""
    pos = state.position.get(entity_id)
    if pos is None:
        raise GridInvariantError(f"Entity {entity_id} has no position")
    if cell_at(state, pos) != Occupied(entity_id):
        raise GridInvariantError(
            f"Entity {entity_id} at {pos} but cell holds {cell_at(state, pos)!r}"
        )
    return pos


def check_invariants(state: State) -> None:
    """Verify that occupied cells and live unit positions form a bijection.

    Raises:
        GridInvariantError: On any mismatch.
    """
    occupied: Dict[EntityID, List[Position]] = {}
    for row, line in enumerate(state.cells):
        for col, cell in enumerate(line):
            if isinstance(cell, Occupied):
                occupied.setdefault(cell.entity_id, []).append(Position(row, col))

    for eid, cells in occupied.items():
        if len(cells) > 1:
            raise GridInvariantError(f"Entity {eid} occupies several cells: {cells}")

    live = {eid for eid in state.entity if eid not in state.dead}
    for eid in live:
        assert_occupies(state, eid)
    stray = set(occupied) - live
    if stray:
        raise GridInvariantError(
            f"Cells occupied by dead or unknown entities: {sorted(stray)}"
        )
