"""Plain-text rendering of a ``State``.

``to_text`` reproduces the input map layout. With ``annotate=True`` every row
is followed by a summary of its live occupants and their hit points, e.g.::

    #...EG#   E(200), G(200)

This is the diagnostic dump handed to observers; it is not part of any
result.
"""

from typing import List

from grid_combat.state import State
from grid_combat.types import Occupied, Terrain

TERRAIN_SYMBOLS = {
    Terrain.WALL: "#",
    Terrain.OPEN: ".",
}


def to_text(state: State, annotate: bool = False) -> str:
    """Render the grid, one line per row, each terminated by a newline."""
    lines: List[str] = []
    for row in state.cells:
        line = ""
        occupants: List[str] = []
        for cell in row:
            if isinstance(cell, Occupied):
                eid = cell.entity_id
                symbol = state.faction[eid].symbol
                line += symbol
                occupants.append(f"{symbol}({state.health[eid].health})")
            else:
                line += TERRAIN_SYMBOLS[cell]
        if annotate and occupants:
            line += "   " + ", ".join(occupants)
        lines.append(line + "\n")
    return "".join(lines)
