"""Elemental types and the Gen 8 type chart."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum, unique

import numpy as np

from pokestats.chart.efficacy import Efficacy, ZERO, SUPER_EFFECTIVE, NOT_VERY_EFFECTIVE


@unique
class PureType(IntEnum):
    """A single type in the type chart.

    Values double as indices into the dense efficacy table, so the order is
    fixed and also used to canonicalize dual types.
    """

    BUG = 0
    DARK = 1
    DRAGON = 2
    ELECTRIC = 3
    FAIRY = 4
    FIGHTING = 5
    FIRE = 6
    FLYING = 7
    GHOST = 8
    GRASS = 9
    GROUND = 10
    ICE = 11
    NORMAL = 12
    POISON = 13
    PSYCHIC = 14
    ROCK = 15
    STEEL = 16
    WATER = 17

    @classmethod
    def from_index(cls, index: int) -> "PureType":
        """Look up a type by its table index. Raises ValueError if out of range."""
        return cls(index)

    @classmethod
    def from_name(cls, name: str) -> "PureType":
        """Look up a type by name ("Fire", "fire"). Raises ValueError if unknown."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown type name: {name!r}") from None

    def against(self, defender: "PokemonType") -> Efficacy:
        """Efficacy of an attack of this type against ``defender``."""
        return efficacy_against(self, defender)

    def __str__(self) -> str:
        return self.name.capitalize()


NUM_TYPES = len(PureType)

# Special cases per attacking type. Anything not listed is neutral.
# None marks an immunity.
_CHART_RULES: dict[PureType, dict[PureType, int | None]] = {
    PureType.BUG: {
        PureType.FIRE: -1, PureType.GRASS: 1, PureType.FIGHTING: -1,
        PureType.POISON: -1, PureType.FLYING: -1, PureType.PSYCHIC: 1,
        PureType.GHOST: -1, PureType.DARK: 1, PureType.STEEL: -1,
        PureType.FAIRY: -1,
    },
    PureType.DARK: {
        PureType.FIGHTING: -1, PureType.PSYCHIC: 1, PureType.GHOST: 1,
        PureType.DARK: -1, PureType.FAIRY: -1,
    },
    PureType.DRAGON: {
        PureType.DRAGON: 1, PureType.STEEL: -1, PureType.FAIRY: None,
    },
    PureType.ELECTRIC: {
        PureType.WATER: 1, PureType.ELECTRIC: -1, PureType.GRASS: -1,
        PureType.GROUND: None, PureType.FLYING: 1, PureType.DRAGON: -1,
    },
    PureType.FAIRY: {
        PureType.FIRE: -1, PureType.FIGHTING: 1, PureType.POISON: -1,
        PureType.DRAGON: 1, PureType.DARK: 1, PureType.STEEL: -1,
    },
    PureType.FIGHTING: {
        PureType.NORMAL: 1, PureType.ICE: 1, PureType.POISON: -1,
        PureType.FLYING: -1, PureType.PSYCHIC: -1, PureType.BUG: -1,
        PureType.ROCK: 1, PureType.GHOST: None, PureType.DARK: 1,
        PureType.STEEL: 1, PureType.FAIRY: -1,
    },
    PureType.FIRE: {
        PureType.FIRE: -1, PureType.WATER: -1, PureType.GRASS: 1,
        PureType.ICE: 1, PureType.BUG: 1, PureType.STEEL: 1,
        PureType.ROCK: -1, PureType.DRAGON: -1,
    },
    PureType.FLYING: {
        PureType.ELECTRIC: -1, PureType.GRASS: 1, PureType.FIGHTING: 1,
        PureType.BUG: 1, PureType.ROCK: -1, PureType.STEEL: -1,
    },
    PureType.GHOST: {
        PureType.NORMAL: None, PureType.PSYCHIC: 1, PureType.GHOST: 1,
        PureType.DARK: -1,
    },
    PureType.GRASS: {
        PureType.FIRE: -1, PureType.WATER: 1, PureType.POISON: -1,
        PureType.GROUND: 1, PureType.FLYING: -1, PureType.BUG: -1,
        PureType.ROCK: 1, PureType.DRAGON: -1, PureType.STEEL: -1,
        PureType.GRASS: -1,
    },
    PureType.GROUND: {
        PureType.FIRE: 1, PureType.ELECTRIC: 1, PureType.GRASS: -1,
        PureType.POISON: 1, PureType.FLYING: None, PureType.BUG: -1,
        PureType.ROCK: 1, PureType.STEEL: 1,
    },
    PureType.ICE: {
        PureType.FIRE: -1, PureType.WATER: -1, PureType.ICE: -1,
        PureType.STEEL: -1, PureType.GRASS: 1, PureType.GROUND: 1,
        PureType.FLYING: 1, PureType.DRAGON: 1,
    },
    PureType.NORMAL: {
        PureType.ROCK: -1, PureType.STEEL: -1, PureType.GHOST: None,
    },
    PureType.POISON: {
        PureType.POISON: -1, PureType.GROUND: -1, PureType.ROCK: -1,
        PureType.GHOST: -1, PureType.GRASS: 1, PureType.FAIRY: 1,
        PureType.STEEL: None,
    },
    PureType.PSYCHIC: {
        PureType.PSYCHIC: -1, PureType.STEEL: -1, PureType.FIGHTING: 1,
        PureType.POISON: 1, PureType.DARK: None,
    },
    PureType.ROCK: {
        PureType.FIGHTING: -1, PureType.GROUND: -1, PureType.STEEL: -1,
        PureType.FIRE: 1, PureType.ICE: 1, PureType.FLYING: 1,
        PureType.BUG: 1,
    },
    PureType.STEEL: {
        PureType.FIRE: -1, PureType.WATER: -1, PureType.ELECTRIC: -1,
        PureType.STEEL: -1, PureType.ICE: 1, PureType.ROCK: 1,
        PureType.FAIRY: 1,
    },
    PureType.WATER: {
        PureType.WATER: -1, PureType.GRASS: -1, PureType.DRAGON: -1,
        PureType.FIRE: 1, PureType.GROUND: 1, PureType.ROCK: 1,
    },
}


def _build_chart() -> tuple[np.ndarray, np.ndarray]:
    """Expand the rule data into dense (exponent, immune) tables."""
    missing = [t for t in PureType if t not in _CHART_RULES]
    if missing:
        raise RuntimeError(f"Type chart has no rules for {missing}")

    exponents = np.zeros((NUM_TYPES, NUM_TYPES), dtype=np.int8)
    immune = np.zeros((NUM_TYPES, NUM_TYPES), dtype=bool)
    for attack, rules in _CHART_RULES.items():
        for defense, exponent in rules.items():
            if exponent is None:
                immune[attack, defense] = True
            else:
                exponents[attack, defense] = exponent

    exponents.setflags(write=False)
    immune.setflags(write=False)
    return exponents, immune


_EXPONENTS, _IMMUNE = _build_chart()


def efficacy(attack: PureType, defense: PureType) -> Efficacy:
    """Single-type efficacy of ``attack`` hitting ``defense``."""
    if _IMMUNE[attack, defense]:
        return ZERO
    return Efficacy.pow2(int(_EXPONENTS[attack, defense]))


def efficacy_matrix() -> np.ndarray:
    """Float copy of the chart, indexed ``[attack, defense]``.

    Only for analysis and display; the algebra itself never uses floats.
    """
    multipliers = np.power(2.0, _EXPONENTS.astype(np.float64))
    multipliers[_IMMUNE] = 0.0
    return multipliers


@dataclass(frozen=True)
class PokemonType:
    """A Pokemon's typing, either one type or two.

    Always stored in canonical form: a repeated type collapses to a single
    type and two distinct types are ordered by ``PureType`` value. Equality
    and hashing therefore ignore the order the types were given in.
    """

    primary: PureType
    secondary: PureType | None = None

    def __post_init__(self) -> None:
        first = PureType(self.primary)
        second = PureType(self.secondary) if self.secondary is not None else None
        if second == first:
            second = None
        elif second is not None and second < first:
            first, second = second, first
        object.__setattr__(self, "primary", first)
        object.__setattr__(self, "secondary", second)

    @classmethod
    def single(cls, pure: PureType) -> "PokemonType":
        return cls(pure)

    @classmethod
    def double(cls, first: PureType, second: PureType) -> "PokemonType":
        return cls(first, second)

    @property
    def is_single(self) -> bool:
        return self.secondary is None

    @property
    def types(self) -> tuple[PureType, ...]:
        if self.secondary is None:
            return (self.primary,)
        return (self.primary, self.secondary)

    def against(self, attack: PureType) -> Efficacy:
        """Efficacy of ``attack`` hitting this typing."""
        return efficacy_against(attack, self)

    def type_matchups(self) -> Iterator[tuple[PureType, Efficacy]]:
        """Yield ``(attacking type, efficacy)`` for all 18 attacking types."""
        for attack in PureType:
            yield attack, self.against(attack)

    def weaknesses(self) -> Iterator[PureType]:
        """Attacking types that deal at least double damage."""
        return (attack for attack, eff in self.type_matchups() if eff >= SUPER_EFFECTIVE)

    def resistances(self) -> Iterator[PureType]:
        """Attacking types that deal at most half damage, immunities included."""
        return (attack for attack, eff in self.type_matchups() if eff <= NOT_VERY_EFFECTIVE)

    def immunities(self) -> Iterator[PureType]:
        """Attacking types that deal no damage."""
        return (attack for attack, eff in self.type_matchups() if eff.is_zero)

    def __str__(self) -> str:
        return "/".join(str(t) for t in self.types)


def efficacy_against(attack: PureType, defender: PokemonType | PureType) -> Efficacy:
    """Efficacy of ``attack`` against a single or dual typing.

    Dual types multiply their two single-type results.
    """
    if isinstance(defender, PureType):
        return efficacy(attack, defender)
    result = efficacy(attack, defender.primary)
    if defender.secondary is not None:
        result = result * efficacy(attack, defender.secondary)
    return result


def weaknesses(defender: PokemonType) -> Iterator[PureType]:
    return defender.weaknesses()


def resistances(defender: PokemonType) -> Iterator[PureType]:
    return defender.resistances()


def all_type_combinations() -> list[PokemonType]:
    """Every distinct typing: 18 single types, then the 153 unordered pairs."""
    combos = [PokemonType(t) for t in PureType]
    types = list(PureType)
    for i, first in enumerate(types):
        for second in types[i + 1:]:
            combos.append(PokemonType(first, second))
    return combos
