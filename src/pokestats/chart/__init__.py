"""Type chart and efficacy algebra.

This module provides:
- PureType: the 18 elemental types
- Efficacy: exact power-of-two damage multipliers
- PokemonType: canonical single or dual typing
- Chart queries: single-type and dual-type efficacy, weaknesses, resistances
"""

from pokestats.chart.efficacy import (
    Efficacy,
    ZERO,
    NEUTRAL,
    SUPER_EFFECTIVE,
    NOT_VERY_EFFECTIVE,
)
from pokestats.chart.types import (
    PureType,
    PokemonType,
    NUM_TYPES,
    efficacy,
    efficacy_against,
    efficacy_matrix,
    weaknesses,
    resistances,
    all_type_combinations,
)

__all__ = [
    # Efficacy
    "Efficacy",
    "ZERO",
    "NEUTRAL",
    "SUPER_EFFECTIVE",
    "NOT_VERY_EFFECTIVE",
    # Types
    "PureType",
    "PokemonType",
    "NUM_TYPES",
    "efficacy",
    "efficacy_against",
    "efficacy_matrix",
    "weaknesses",
    "resistances",
    "all_type_combinations",
]
