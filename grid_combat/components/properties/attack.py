from dataclasses import dataclass


@dataclass(frozen=True)
class Attack:
    """Damage dealt by a unit on each of its attacks.

    Attributes:
        power: Hit points removed from the chosen target per attack.
    """

    power: int
