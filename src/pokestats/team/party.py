"""Parties of up to six Pokemon and their type coverage."""

import math
from collections import Counter
from collections.abc import Iterable, Iterator

from pokestats.chart.efficacy import Efficacy, NEUTRAL, SUPER_EFFECTIVE
from pokestats.chart.types import PokemonType, PureType
from pokestats.data.moves import Move
from pokestats.data.species import Species
from pokestats.errors import PartySizeError
from pokestats.team.pokemon import Pokemon

MAX_PARTY_SIZE = 6

Member = Pokemon | Species


def _typing(target: Member | PokemonType) -> PokemonType:
    if isinstance(target, PokemonType):
        return target
    return target.types


def _member_moves(member: Member) -> list[Move]:
    """Known moves; a bare species knows none."""
    if isinstance(member, Pokemon):
        return member.moves
    return []


class Party:
    """A group of 1 to 6 Pokemon that can be used together.

    Members are built Pokemon or bare species. Every way of building a party
    checks the size, so a Party is never empty and never holds more than six.
    """

    def __init__(self, members: Iterable[Member]):
        members = tuple(members)
        if not 0 < len(members) <= MAX_PARTY_SIZE:
            raise PartySizeError(
                f"A party needs 1 to {MAX_PARTY_SIZE} members, got {len(members)}"
            )
        self._members = members

    @classmethod
    def from_members(cls, members: Iterable[Member]) -> "Party":
        return cls(members)

    @classmethod
    def solo(cls, member: Member) -> "Party":
        """Single-member party."""
        return cls((member,))

    def with_member(self, member: Member) -> "Party":
        """New party with ``member`` appended.

        Raises:
            PartySizeError: if the party is already full
        """
        return Party(self._members + (member,))

    @property
    def members(self) -> tuple[Member, ...]:
        return self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Member]:
        return iter(self._members)

    def __getitem__(self, index: int) -> Member:
        return self._members[index]

    def __repr__(self) -> str:
        names = ", ".join(m.name for m in self._members)
        return f"Party([{names}])"

    def type_matchups(self) -> Counter[tuple[Efficacy, PureType]]:
        """Count members at each efficacy level for every attacking type.

        The counts add up to ``18 * len(party)``.
        """
        counts: Counter[tuple[Efficacy, PureType]] = Counter()
        for member in self._members:
            for attack, eff in _typing(member).type_matchups():
                counts[(eff, attack)] += 1
        return counts

    def has_super_effective_attack(self, target: Member | PokemonType) -> bool:
        """Check if any member knows a damaging move that is super effective on ``target``."""
        defender = _typing(target)
        return any(
            move.is_attack and defender.against(move.type) > NEUTRAL
            for member in self._members
            for move in _member_moves(member)
        )

    def shared_weaknesses(self, threshold: int | None = None) -> list[PureType]:
        """Attacking types that are super effective on at least ``threshold`` members.

        Defaults to half the party, rounded up.
        """
        if threshold is None:
            threshold = math.ceil(len(self._members) / 2)
        weak_counts: Counter[PureType] = Counter()
        for (eff, attack), count in self.type_matchups().items():
            if eff >= SUPER_EFFECTIVE:
                weak_counts[attack] += count
        return [attack for attack in PureType if weak_counts[attack] >= threshold]


def type_matchups(party: Party) -> Counter[tuple[Efficacy, PureType]]:
    return party.type_matchups()


def has_super_effective_attack(party: Party, target: Member | PokemonType) -> bool:
    return party.has_super_effective_attack(target)
