from enum import StrEnum, auto


class Faction(StrEnum):
    """Side a unit fights for."""

    ELF = auto()
    GOBLIN = auto()

    @property
    def symbol(self) -> str:
        """Map glyph used by the text format."""
        return FACTION_SYMBOLS[self]


FACTION_SYMBOLS = {
    Faction.ELF: "E",
    Faction.GOBLIN: "G",
}
