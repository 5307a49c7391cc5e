from dataclasses import dataclass


@dataclass(frozen=True)
class Dead:
    """Marker for units that reached zero hit points.

    Dead units keep their id and components so entity ids stay stable; they
    are skipped by initiative, targeting and movement.
    """

    pass
