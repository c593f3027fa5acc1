"""Damage multipliers as exact powers of two.

Every multiplier in the type chart is either 0 (immune) or 2^e for a small
signed exponent e. Keeping the exponent instead of a float means dual-type
results combine by integer addition and compare exactly.
"""

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Efficacy:
    """A damage multiplier: ``Zero`` or ``Pow2(exponent)``.

    ``exponent`` is None for an immunity. Zero orders below every power of
    two; powers of two order by exponent.
    """

    exponent: int | None

    @classmethod
    def pow2(cls, exponent: int) -> "Efficacy":
        return cls(int(exponent))

    @property
    def is_zero(self) -> bool:
        return self.exponent is None

    @property
    def multiplier(self) -> float:
        """Float value of the multiplier, for display only."""
        if self.exponent is None:
            return 0.0
        return 2.0 ** self.exponent

    def __mul__(self, other: "Efficacy") -> "Efficacy":
        if not isinstance(other, Efficacy):
            return NotImplemented
        if self.exponent is None or other.exponent is None:
            return ZERO
        return Efficacy(self.exponent + other.exponent)

    def __lt__(self, other: "Efficacy") -> bool:
        if not isinstance(other, Efficacy):
            return NotImplemented
        if self.exponent is None:
            return other.exponent is not None
        if other.exponent is None:
            return False
        return self.exponent < other.exponent

    def __repr__(self) -> str:
        if self.exponent is None:
            return "Efficacy.ZERO"
        return f"Efficacy.pow2({self.exponent})"

    def __str__(self) -> str:
        if self.exponent is None:
            return "0x"
        if self.exponent >= 0:
            return f"{2 ** self.exponent}x"
        return f"1/{2 ** -self.exponent}x"


ZERO = Efficacy(None)
NEUTRAL = Efficacy(0)
SUPER_EFFECTIVE = Efficacy(1)
NOT_VERY_EFFECTIVE = Efficacy(-1)
