"""Species and move data.

This module contains:
- Moves: move records, MoveId and the TM/TR tables
- Species: per-species records and what they can learn
- Loader: JSON decoding and the Pokedex table
"""

from pokestats.data.moves import (
    Move,
    MoveId,
    MoveCategory,
    MoveTarget,
    MoveFlag,
    Stat,
    StatChange,
    TM,
    TR,
    TM_MOVES,
    TR_MOVES,
)
from pokestats.data.species import (
    Species,
    Stats,
    can_learn,
    breeds_with,
)
from pokestats.data.loader import (
    Pokedex,
    get_pokedex,
    reset_pokedex,
    load_species,
    load_moves,
)

__all__ = [
    # Moves
    "Move",
    "MoveId",
    "MoveCategory",
    "MoveTarget",
    "MoveFlag",
    "Stat",
    "StatChange",
    "TM",
    "TR",
    "TM_MOVES",
    "TR_MOVES",
    # Species
    "Species",
    "Stats",
    "can_learn",
    "breeds_with",
    # Loader
    "Pokedex",
    "get_pokedex",
    "reset_pokedex",
    "load_species",
    "load_moves",
]
