#!/usr/bin/env python3
"""Print base-stat means and standard deviations for the regional dex."""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pokestats.config import data_config
from pokestats.data import get_pokedex
from pokestats.population import format_population_stats, population_stats

logging.basicConfig(
    level=data_config.log_level,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)


def main() -> None:
    """Entry point."""
    parser = argparse.ArgumentParser(description="Base-stat population statistics")
    parser.add_argument(
        "--all-species",
        action="store_true",
        help="Include species outside the regional dex",
    )
    args = parser.parse_args()

    pokedex = get_pokedex()
    population = list(pokedex) if args.all_species else pokedex.regional()
    print(f"{len(population)} species")
    print(format_population_stats(population_stats(population)))


if __name__ == "__main__":
    main()
