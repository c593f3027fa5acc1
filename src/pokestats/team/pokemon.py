"""A built roster entry: a species plus the choices a trainer made."""

from dataclasses import dataclass, field

from pokestats.chart.types import PokemonType
from pokestats.data.moves import Move
from pokestats.data.species import Species, Stats

DEFAULT_NATURE = "Serious"  # neutral
MAX_IV = 31


@dataclass
class Pokemon:
    """A complete Pokemon set (species + moves + item + etc.)

    ``ability`` and ``nature`` are free text and are not checked against the
    species.
    """

    species: Species
    nickname: str | None = None
    item: str | None = None
    ability: str = ""
    evs: Stats = field(default_factory=Stats)
    ivs: Stats = field(default_factory=lambda: Stats.uniform(MAX_IV))
    nature: str = DEFAULT_NATURE
    moves: list[Move] = field(default_factory=list)  # not capped at 4

    @property
    def name(self) -> str:
        """Nickname if there is one, otherwise the species name."""
        return self.nickname or self.species.name

    @property
    def types(self) -> PokemonType:
        return self.species.types

    def stats(self) -> Stats:
        """Base stats with EVs and IVs added on top.

        Simplified additive model: no level scaling and no nature modifier.
        """
        return self.species.base_stats + self.evs + self.ivs

    def attacking_moves(self) -> list[Move]:
        """Moves that deal damage (category is not Status)."""
        return [mv for mv in self.moves if mv.is_attack]
