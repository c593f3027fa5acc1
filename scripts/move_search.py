#!/usr/bin/env python3
"""List species that can learn every given move.

Usage:
    python scripts/move_search.py "Trick Room"
    python scripts/move_search.py Reflect "Light Screen" --sort-by total
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pokestats.config import data_config
from pokestats.data import Pokedex, get_pokedex
from pokestats.data.species import Species
from pokestats.population import format_population_stats, population_stats

logging.basicConfig(
    level=data_config.log_level,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

SORT_KEYS = {
    "hp": lambda s: s.base_stats.hp,
    "attack": lambda s: s.base_stats.attack,
    "defense": lambda s: s.base_stats.defense,
    "sp_attack": lambda s: s.base_stats.sp_attack,
    "sp_defense": lambda s: s.base_stats.sp_defense,
    "speed": lambda s: s.base_stats.speed,
    "total": lambda s: s.base_stats.total(),
}


def search(pokedex: Pokedex, moves: list[str], include_foreign: bool = False) -> list[Species]:
    """Species that learn all of ``moves``."""
    pool = list(pokedex) if include_foreign else pokedex.regional()
    return [s for s in pool if all(s.can_learn(mv) for mv in moves)]


def main() -> None:
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="Find species that can learn the given moves",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("moves", nargs="+", help="Exact move names, e.g. 'Trick Room'")
    parser.add_argument(
        "--sort-by",
        "-s",
        choices=sorted(SORT_KEYS),
        default="speed",
        help="Base stat to sort the results by",
    )
    parser.add_argument(
        "--all-species",
        action="store_true",
        help="Include species outside the regional dex",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print population statistics for the matches",
    )
    args = parser.parse_args()

    pokedex = get_pokedex()
    for move in args.moves:
        if pokedex.get_move(move) is None:
            logger.warning(f"{move!r} is not in the move table")

    key = SORT_KEYS[args.sort_by]
    matches = sorted(search(pokedex, args.moves, args.all_species), key=key)
    if not matches:
        print("No species found.")
        return

    for species in matches:
        print(f"{key(species)}, {species.name}")

    if args.stats:
        print()
        print(format_population_stats(population_stats(matches)))


if __name__ == "__main__":
    main()
