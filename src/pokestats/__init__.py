"""Queries over the Sword/Shield Pokemon dataset.

This package provides:
- Chart: type matchups with exact power-of-two multipliers
- Data: species, moves, TM/TR tables and the Pokedex loader
- Team: built Pokemon, parties and the team-sheet parser
"""

__version__ = "0.1.0"

from pokestats.chart import Efficacy, PureType, PokemonType, all_type_combinations
from pokestats.data import Move, MoveId, Pokedex, Species, Stats, get_pokedex
from pokestats.errors import DatasetError, PartySizeError, PokestatsError, TeamSheetError
from pokestats.team import Party, Pokemon, parse_roster

__all__ = [
    "Efficacy",
    "PureType",
    "PokemonType",
    "all_type_combinations",
    "Move",
    "MoveId",
    "Pokedex",
    "Species",
    "Stats",
    "get_pokedex",
    "DatasetError",
    "PartySizeError",
    "PokestatsError",
    "TeamSheetError",
    "Party",
    "Pokemon",
    "parse_roster",
]
