"""Species records and what they can learn."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import chain

from pokestats.chart.types import PokemonType
from pokestats.data.moves import Move, MoveId, TM, TR

# Egg group of species that cannot breed at all
UNDISCOVERED = "Undiscovered"

# Breeds with anything outside Undiscovered, except itself
UNIVERSAL_PARTNER = "Ditto"


@dataclass(frozen=True)
class Stats:
    """A six-stat block (base stats, EV yield, EVs or IVs)."""

    hp: int = 0
    attack: int = 0
    defense: int = 0
    sp_attack: int = 0
    sp_defense: int = 0
    speed: int = 0

    @classmethod
    def uniform(cls, value: int) -> "Stats":
        return cls(value, value, value, value, value, value)

    def total(self) -> int:
        return self.hp + self.attack + self.defense + self.sp_attack + self.sp_defense + self.speed

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        return (self.hp, self.attack, self.defense, self.sp_attack, self.sp_defense, self.speed)

    def __add__(self, other: "Stats") -> "Stats":
        if not isinstance(other, Stats):
            return NotImplemented
        return Stats(*(a + b for a, b in zip(self.as_tuple(), other.as_tuple())))


MoveRef = MoveId | Move | str


def as_move_id(mv: MoveRef) -> MoveId:
    if isinstance(mv, MoveId):
        return mv
    if isinstance(mv, Move):
        return mv.id
    return MoveId(mv)


@dataclass(frozen=True)
class Species:
    """Static data for a Pokemon species.

    ``regional_dex`` is None for species that are not in the regional
    Pokedex ("foreign" in the dataset). Moves come from four independent
    sources: level-up, egg, TM and TR.
    """

    name: str
    types: PokemonType
    base_stats: Stats
    stage: int = 1
    regional_dex: int | None = None
    ev_yield: Stats = field(default_factory=Stats)
    abilities: tuple[str, ...] = ()
    items: tuple[tuple[str, int], ...] = ()  # (item, relative weight)
    exp_group: str = ""
    egg_groups: tuple[str, ...] = ()
    hatch_cycles: int = 0
    height: float = 0.0
    weight: float = 0.0
    color: str = ""
    level_up_moves: tuple[tuple[int, MoveId], ...] = ()
    egg_moves: tuple[MoveId, ...] = ()
    tms: tuple[TM, ...] = ()
    trs: tuple[TR, ...] = ()

    @property
    def in_regional_dex(self) -> bool:
        return self.regional_dex is not None

    def moves(self) -> Iterator[MoveId]:
        """Every learnable move: level-up, then egg, then TM, then TR.

        Duplicates across sources are kept.
        """
        return chain(
            (mv for _level, mv in self.level_up_moves),
            self.egg_moves,
            (tm.as_move() for tm in self.tms),
            (tr.as_move() for tr in self.trs),
        )

    def can_learn(self, move: MoveRef) -> bool:
        """Check if any of the four move sources teaches ``move``.

        Names are compared exactly; "surf" does not match "Surf".
        """
        move_id = as_move_id(move)
        return (
            self._by_level(move_id)
            or move_id in self.egg_moves
            or any(tm.as_move() == move_id for tm in self.tms)
            or any(tr.as_move() == move_id for tr in self.trs)
        )

    def _by_level(self, move_id: MoveId) -> bool:
        return any(mv == move_id for _level, mv in self.level_up_moves)

    def breeds_with(self, other: "Species") -> bool:
        """Check if the two species can breed with each other."""
        if UNDISCOVERED in self.egg_groups or UNDISCOVERED in other.egg_groups:
            return False

        is_partner = self.name == UNIVERSAL_PARTNER
        other_is_partner = other.name == UNIVERSAL_PARTNER
        if is_partner and other_is_partner:
            return False
        if is_partner or other_is_partner:
            return True

        return not set(self.egg_groups).isdisjoint(other.egg_groups)

    def __str__(self) -> str:
        return self.name


def can_learn(species: Species, move: MoveRef) -> bool:
    return species.can_learn(move)


def breeds_with(first: Species, second: Species) -> bool:
    return first.breeds_with(second)
