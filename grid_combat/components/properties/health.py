from dataclasses import dataclass


@dataclass(frozen=True)
class Health:
    """Tracks current and maximum hit points for the attack system.

    Attributes:
        health:
            Current hit points, never negative. Zero means the unit is dead.
        max_health:
            Starting hit points; used only for diagnostics.
    """

    health: int
    max_health: int
