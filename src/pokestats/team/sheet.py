"""Team sheets in Showdown paste format.

This module handles:
1. Parsing team sheets into built Pokemon and parties
2. Writing Pokemon and parties back out as team sheets

Example block:
Glug (Avalugg) @ Heavy-Duty Boots
Ability: Ice Body
EVs: 252 HP / 4 Atk / 252 Def
IVs: 0 Spe
Impish Nature
- Rapid Spin
- Avalanche
- Body Press
- Recover

(blank line between Pokemon)
"""

import logging
import re
from collections.abc import Iterable

from pokestats.data.loader import Pokedex, get_pokedex
from pokestats.data.species import Stats
from pokestats.errors import TeamSheetError
from pokestats.team.party import MAX_PARTY_SIZE, Member, Party
from pokestats.team.pokemon import DEFAULT_NATURE, MAX_IV, Pokemon

logger = logging.getLogger(__name__)

ABILITY_PREFIX = "Ability: "
EVS_PREFIX = "EVs: "
IVS_PREFIX = "IVs: "
NATURE_SUFFIX = " Nature"
MOVE_PREFIX = "- "

# Showdown abbreviation -> Stats field
STAT_ABBREVIATIONS = {
    "HP": "hp",
    "Atk": "attack",
    "Def": "defense",
    "SpA": "sp_attack",
    "SpD": "sp_defense",
    "Spe": "speed",
}

_NICKNAMED = re.compile(r"^(?P<nickname>.*?)\s*\((?P<species>[^()]+)\)$")
_GENDER = re.compile(r"\s*\([MF]\)$")
_INTEGER = re.compile(r"-?[0-9]+")


def split_blocks(text: str) -> list[str]:
    """Split a team sheet into per-Pokemon blocks on blank lines."""
    blocks = []
    current: list[str] = []

    for line in text.splitlines():
        if not line.strip():
            # End of a Pokemon
            if current:
                blocks.append("\n".join(current))
                current = []
            continue
        current.append(line)

    # Don't forget the last Pokemon
    if current:
        blocks.append("\n".join(current))

    return blocks


def _parse_header(line: str) -> tuple[str | None, str, str | None]:
    """Split "Nickname (Species) @ Item" into (nickname, species, item)."""
    name_part, _, item = line.partition("@")
    name_part = _GENDER.sub("", name_part.strip())
    item = item.strip() or None

    match = _NICKNAMED.match(name_part)
    if match:
        nickname = match.group("nickname").strip() or None
        species = match.group("species").strip()
    else:
        nickname = None
        species = name_part

    if not species:
        raise TeamSheetError(f"No species in header line {line!r}")
    return nickname, species, item


def _parse_stat_line(text: str, default: int) -> Stats | None:
    """Parse '252 HP / 4 Atk / 252 Def' into Stats.

    Stats that are not listed get ``default``. Returns None when a stat
    abbreviation is not recognized, so the caller keeps its defaults.

    Raises:
        TeamSheetError: if a value is not a plain decimal integer ("1_000"
            and "+5" are rejected)
    """
    values = dict.fromkeys(STAT_ABBREVIATIONS.values(), default)

    for part in text.split("/"):
        part = part.strip()
        if not part:
            continue

        tokens = part.split()
        if len(tokens) != 2 or tokens[1] not in STAT_ABBREVIATIONS:
            logger.debug(f"Ignoring stat line {text!r}: bad entry {part!r}")
            return None
        if not _INTEGER.fullmatch(tokens[0]):
            raise TeamSheetError(f"Stat value {tokens[0]!r} is not a number")
        values[STAT_ABBREVIATIONS[tokens[1]]] = int(tokens[0])

    return Stats(**values)


def parse_pokemon(block: str, pokedex: Pokedex | None = None) -> Pokemon:
    """Parse a single team-sheet block.

    Args:
        block: Text for one Pokemon, header line first
        pokedex: Species and move tables; the process-wide one if None

    Returns:
        The built Pokemon. Unknown moves are left out.

    Raises:
        TeamSheetError: if the species is unknown or the block is malformed
    """
    if pokedex is None:
        pokedex = get_pokedex()
    lines = [line.strip() for line in block.strip().splitlines() if line.strip()]
    if not lines:
        raise TeamSheetError("Empty block")

    nickname, species_name, item = _parse_header(lines[0])
    species = pokedex.get_species(species_name)
    if species is None:
        raise TeamSheetError(f"Unknown species {species_name!r}")

    pokemon = Pokemon(species=species, nickname=nickname, item=item)

    for line in lines[1:]:
        if line.startswith(ABILITY_PREFIX):
            pokemon.ability = line[len(ABILITY_PREFIX):].strip()
        elif line.startswith(EVS_PREFIX):
            evs = _parse_stat_line(line[len(EVS_PREFIX):], 0)
            if evs is not None:
                pokemon.evs = evs
        elif line.startswith(IVS_PREFIX):
            ivs = _parse_stat_line(line[len(IVS_PREFIX):], MAX_IV)
            if ivs is not None:
                pokemon.ivs = ivs
        elif line.endswith(NATURE_SUFFIX):
            pokemon.nature = line[:-len(NATURE_SUFFIX)].strip()
        elif line.startswith(MOVE_PREFIX):
            move_name = line[len(MOVE_PREFIX):].strip()
            move = pokedex.get_move(move_name)
            if move is None:
                logger.debug(f"{species.name}: skipping unknown move {move_name!r}")
                continue
            pokemon.moves.append(move)
        # Level:, Shiny:, Tera Type: etc. are ignored

    return pokemon


def parse_members(text: str, pokedex: Pokedex | None = None) -> list[Pokemon]:
    """Parse every block of a team sheet, dropping blocks that fail."""
    if pokedex is None:
        pokedex = get_pokedex()
    members = []

    for block in split_blocks(text):
        try:
            members.append(parse_pokemon(block, pokedex))
        except TeamSheetError as e:
            logger.debug(f"Dropping team sheet block: {e}")

    return members


def parse_roster(text: str, pokedex: Pokedex | None = None) -> Party | None:
    """Parse a team sheet into a Party.

    Blocks that fail to parse are dropped. Only the first six parsed
    Pokemon are kept.

    Returns:
        Parsed Party or None if no block parsed
    """
    members = parse_members(text, pokedex)

    if not members:
        return None

    if len(members) > MAX_PARTY_SIZE:
        logger.warning(
            f"Team sheet has {len(members)} Pokemon, keeping the first {MAX_PARTY_SIZE}"
        )
        members = members[:MAX_PARTY_SIZE]

    return Party.from_members(members)


def _format_stats(stats: Stats, default: int) -> str:
    parts = [
        f"{getattr(stats, field)} {abbrev}"
        for abbrev, field in STAT_ABBREVIATIONS.items()
        if getattr(stats, field) != default
    ]
    return " / ".join(parts)


def format_pokemon(member: Member) -> str:
    """Write one Pokemon (or a bare species) as a team-sheet block.

    EVs at 0, IVs at 31 and the default nature are left out.
    """
    if not isinstance(member, Pokemon):
        return member.name

    header = member.species.name
    if member.nickname:
        header = f"{member.nickname} ({header})"
    if member.item:
        header = f"{header} @ {member.item}"

    lines = [header]
    if member.ability:
        lines.append(f"{ABILITY_PREFIX}{member.ability}")

    evs = _format_stats(member.evs, 0)
    if evs:
        lines.append(f"{EVS_PREFIX}{evs}")

    ivs = _format_stats(member.ivs, MAX_IV)
    if ivs:
        lines.append(f"{IVS_PREFIX}{ivs}")

    if member.nature != DEFAULT_NATURE:
        lines.append(f"{member.nature}{NATURE_SUFFIX}")

    for move in member.moves:
        lines.append(f"{MOVE_PREFIX}{move.name}")

    return "\n".join(lines)


def format_roster(members: Party | Iterable[Member]) -> str:
    """Write a party as a team sheet, one blank line between Pokemon."""
    return "\n\n".join(format_pokemon(m) for m in members) + "\n"

