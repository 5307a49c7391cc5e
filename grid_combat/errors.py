"""Fatal error types.

Expected outcomes of a battle (no path, no target, no enemies left) are
ordinary return values. Only conditions that make further simulation
meaningless are raised.
"""


class GridInvariantError(RuntimeError):
    """The grid and the entity position map disagree."""


class CombatStalledError(RuntimeError):
    """Both factions survive but no unit can change the battle any more."""
