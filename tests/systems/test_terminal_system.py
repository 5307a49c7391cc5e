from dataclasses import replace

from pyrsistent import pmap

from grid_combat.components import Dead, Faction
from grid_combat.levels.convert import from_text
from grid_combat.step import take_turn
from grid_combat.systems.terminal import casualty_system, victory_system
from tests.test_utils import entity_at


def test_victory_when_no_enemy_remains() -> None:
    state = from_text("#E.E#\n")
    ended = victory_system(state, entity_at(state, 0, 1))
    assert ended.ended
    assert ended.winner == Faction.ELF
    assert ended.message is not None


def test_no_victory_while_enemies_live() -> None:
    state = from_text("#E.G#\n")
    assert victory_system(state, entity_at(state, 0, 1)) is state


def test_dead_enemies_do_not_count() -> None:
    state = from_text("#E.G#\n")
    goblin = entity_at(state, 0, 3)
    state = replace(state, dead=pmap({goblin: Dead()}))
    assert victory_system(state, entity_at(state, 0, 1)).winner == Faction.ELF


def test_victory_ends_turn_before_moving() -> None:
    state = from_text("#E..#\n")
    after = take_turn(state, entity_at(state, 0, 1))
    assert after.ended
    assert after.position == state.position


def test_casualty_stops_protected_faction() -> None:
    state = from_text("#EEG#\n")
    elf = entity_at(state, 0, 2)
    state = replace(state, dead=pmap({elf: Dead()}))
    stopped = casualty_system(state, Faction.ELF, before=2)
    assert stopped.ended
    assert stopped.winner is None


def test_casualty_ignores_other_faction_and_disabled_mode() -> None:
    state = from_text("#EGG#\n")
    goblin = entity_at(state, 0, 2)
    state = replace(state, dead=pmap({goblin: Dead()}))
    assert casualty_system(state, Faction.ELF, before=1) is state
    assert casualty_system(state, None, before=1) is state
