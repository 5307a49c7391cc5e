"""Command line entry point.

Usage::

    python -m grid_combat input.txt
    python -m grid_combat - --verbose < input.txt
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from grid_combat.levels.convert import from_text
from grid_combat.outcome import (
    PROTECTED_FACTION,
    find_minimal_power,
    simulate,
    with_attack_power,
)
from grid_combat.utils.render import to_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid_combat",
        description="Simulate an elves-versus-goblins grid battle.",
    )
    parser.add_argument("input", help="Map file, or '-' to read stdin")
    parser.add_argument(
        "--elf-power",
        type=int,
        default=None,
        help="Only run one battle with this elf attack power",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every round and dump the final grid",
    )
    return parser


def read_map(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    state = from_text(read_map(args.input))

    if args.elf_power is not None:
        result = simulate(with_attack_power(state, PROTECTED_FACTION, args.elf_power))
        if args.verbose:
            print(to_text(result.state, annotate=True))
        print(f"outcome with elf attack power {args.elf_power} is {result.outcome}")
        return 0

    baseline = simulate(state)
    if args.verbose:
        print(to_text(baseline.state, annotate=True))
    power, boosted = find_minimal_power(state, PROTECTED_FACTION)
    print(f"the solution to part 1 is {baseline.outcome}")
    print(f"the solution to part 2 is {boosted.outcome} (elf attack power {power})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
