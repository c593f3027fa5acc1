"""Built Pokemon, parties and team sheets."""

from pokestats.team.pokemon import Pokemon
from pokestats.team.party import (
    Party,
    MAX_PARTY_SIZE,
    type_matchups,
    has_super_effective_attack,
)
from pokestats.team.sheet import (
    parse_pokemon,
    parse_members,
    parse_roster,
    format_pokemon,
    format_roster,
)

__all__ = [
    "Pokemon",
    "Party",
    "MAX_PARTY_SIZE",
    "type_matchups",
    "has_super_effective_attack",
    "parse_pokemon",
    "parse_members",
    "parse_roster",
    "format_pokemon",
    "format_roster",
]
