"""Position component.

Immutable integer grid coordinates stored in ``State.position`` keyed by
entity id. Field order makes the generated comparison follow reading order
(top to bottom, then left to right), which every tie-break relies on.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int
