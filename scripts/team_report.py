#!/usr/bin/env python3
"""Type coverage report for a team sheet.

Usage:
    python scripts/team_report.py team.txt
    python scripts/team_report.py team.txt --target Dragapult
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pokestats.chart import PureType, NEUTRAL
from pokestats.config import data_config
from pokestats.data import get_pokedex
from pokestats.team import Party, format_roster, parse_roster

logging.basicConfig(
    level=data_config.log_level,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def print_matchups(party: Party) -> None:
    """One row per attacking type: members weak / neutral / resistant / immune."""
    counts = party.type_matchups()
    print(f"{'Type':<10} {'weak':>5} {'neutral':>8} {'resist':>7} {'immune':>7}")
    for attack in PureType:
        weak = neutral = resist = immune = 0
        for (eff, attacker), count in counts.items():
            if attacker != attack:
                continue
            if eff.is_zero:
                immune += count
            elif eff > NEUTRAL:
                weak += count
            elif eff < NEUTRAL:
                resist += count
            else:
                neutral += count
        print(f"{str(attack):<10} {weak:>5} {neutral:>8} {resist:>7} {immune:>7}")


def main() -> None:
    """Entry point."""
    parser = argparse.ArgumentParser(description="Type coverage report for a team sheet")
    parser.add_argument("team_file", type=Path, help="Team sheet in Showdown paste format")
    parser.add_argument(
        "--target",
        "-t",
        action="append",
        default=[],
        help="Species to check for a super-effective attack (repeatable)",
    )
    args = parser.parse_args()

    pokedex = get_pokedex()
    party = parse_roster(args.team_file.read_text(encoding="utf-8"), pokedex)
    if party is None:
        print(f"No Pokemon could be parsed from {args.team_file}")
        sys.exit(1)

    print(format_roster(party))
    print_matchups(party)

    shared = party.shared_weaknesses()
    if shared:
        print("\nShared weaknesses: " + ", ".join(str(t) for t in shared))

    for name in args.target:
        species = pokedex.get_species(name)
        if species is None:
            logger.warning(f"Unknown species {name!r}")
            continue
        verdict = "yes" if party.has_super_effective_attack(species) else "no"
        print(f"Super-effective attack on {species.name} ({species.types}): {verdict}")


if __name__ == "__main__":
    main()
