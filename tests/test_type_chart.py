"""Tests for the type chart and efficacy algebra."""

import itertools

import numpy as np
import pytest

from pokestats.chart import (
    Efficacy,
    NEUTRAL,
    NOT_VERY_EFFECTIVE,
    NUM_TYPES,
    PokemonType,
    PureType,
    SUPER_EFFECTIVE,
    ZERO,
    all_type_combinations,
    efficacy,
    efficacy_against,
    efficacy_matrix,
    resistances,
    weaknesses,
)


class TestPureType:
    """Tests for PureType indexing and naming."""

    def test_eighteen_types(self):
        assert NUM_TYPES == 18
        assert len(list(PureType)) == 18

    def test_index_round_trip(self):
        """Every index maps back to the same type."""
        for t in PureType:
            assert PureType.from_index(int(t)) is t

    def test_out_of_range_index(self):
        with pytest.raises(ValueError):
            PureType.from_index(18)
        with pytest.raises(ValueError):
            PureType.from_index(-1)

    def test_from_name_ignores_case(self):
        assert PureType.from_name("Fire") is PureType.FIRE
        assert PureType.from_name("psychic") is PureType.PSYCHIC

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown type name"):
            PureType.from_name("Sound")

    def test_str(self):
        assert str(PureType.WATER) == "Water"


class TestEfficacy:
    """Tests for the power-of-two multiplier algebra."""

    def test_multiply_adds_exponents(self):
        assert SUPER_EFFECTIVE * SUPER_EFFECTIVE == Efficacy.pow2(2)
        assert SUPER_EFFECTIVE * NOT_VERY_EFFECTIVE == NEUTRAL
        assert NOT_VERY_EFFECTIVE * NOT_VERY_EFFECTIVE == Efficacy.pow2(-2)

    def test_zero_absorbs(self):
        for e in (ZERO, Efficacy.pow2(-2), NEUTRAL, Efficacy.pow2(2)):
            assert ZERO * e == ZERO
            assert e * ZERO == ZERO

    def test_ordering(self):
        ordered = [ZERO, Efficacy.pow2(-2), NOT_VERY_EFFECTIVE, NEUTRAL, SUPER_EFFECTIVE, Efficacy.pow2(2)]
        assert sorted(reversed(ordered)) == ordered
        assert ZERO < Efficacy.pow2(-10)

    def test_multiplier(self):
        assert ZERO.multiplier == 0.0
        assert Efficacy.pow2(-2).multiplier == pytest.approx(0.25)
        assert Efficacy.pow2(2).multiplier == pytest.approx(4.0)

    def test_str(self):
        assert str(ZERO) == "0x"
        assert str(SUPER_EFFECTIVE) == "2x"
        assert str(NOT_VERY_EFFECTIVE) == "1/2x"
        assert str(Efficacy.pow2(-2)) == "1/4x"

    def test_hashable(self):
        assert len({Efficacy.pow2(1), SUPER_EFFECTIVE, ZERO}) == 2


class TestChart:
    """Tests for single-type lookups."""

    @pytest.mark.parametrize(
        "attack,defense,expected",
        [
            (PureType.FIRE, PureType.GRASS, SUPER_EFFECTIVE),
            (PureType.WATER, PureType.FIRE, SUPER_EFFECTIVE),
            (PureType.FIRE, PureType.WATER, NOT_VERY_EFFECTIVE),
            (PureType.ELECTRIC, PureType.GROUND, ZERO),
            (PureType.NORMAL, PureType.GHOST, ZERO),
            (PureType.DRAGON, PureType.FAIRY, ZERO),
            (PureType.POISON, PureType.STEEL, ZERO),
            (PureType.GRASS, PureType.GRASS, NOT_VERY_EFFECTIVE),
            (PureType.DARK, PureType.FIGHTING, NOT_VERY_EFFECTIVE),
            (PureType.DARK, PureType.POISON, NEUTRAL),
            (PureType.NORMAL, PureType.NORMAL, NEUTRAL),
        ],
    )
    def test_lookups(self, attack, defense, expected):
        assert efficacy(attack, defense) == expected

    def test_every_entry_is_a_chart_value(self):
        """Single-type entries are 0, 1/2, 1 or 2."""
        allowed = {ZERO, NOT_VERY_EFFECTIVE, NEUTRAL, SUPER_EFFECTIVE}
        for attack, defense in itertools.product(PureType, PureType):
            assert efficacy(attack, defense) in allowed

    def test_matrix(self):
        matrix = efficacy_matrix()
        assert matrix.shape == (18, 18)
        assert matrix[PureType.ELECTRIC, PureType.GROUND] == 0.0
        assert matrix[PureType.FIRE, PureType.GRASS] == 2.0
        assert np.all(np.isin(matrix, [0.0, 0.5, 1.0, 2.0]))

    def test_matrix_is_a_copy(self):
        matrix = efficacy_matrix()
        matrix[PureType.FIRE, PureType.GRASS] = 8.0
        assert efficacy(PureType.FIRE, PureType.GRASS) == SUPER_EFFECTIVE


class TestPokemonType:
    """Tests for canonical typing and dual-type efficacy."""

    def test_order_does_not_matter(self):
        assert PokemonType(PureType.WATER, PureType.FIRE) == PokemonType(PureType.FIRE, PureType.WATER)
        assert hash(PokemonType(PureType.WATER, PureType.FIRE)) == hash(
            PokemonType(PureType.FIRE, PureType.WATER)
        )

    def test_repeated_type_collapses(self):
        t = PokemonType.double(PureType.FIRE, PureType.FIRE)
        assert t == PokemonType.single(PureType.FIRE)
        assert t.is_single
        assert t.types == (PureType.FIRE,)

    def test_str(self):
        assert str(PokemonType(PureType.WATER, PureType.FIRE)) == "Fire/Water"
        assert str(PokemonType(PureType.ICE)) == "Ice"

    def test_all_combinations(self):
        combos = all_type_combinations()
        assert len(combos) == 171
        assert len(set(combos)) == 171
        assert sum(1 for c in combos if c.is_single) == 18

    def test_dual_type_is_product(self):
        """Dual efficacy equals the product of both single-type results."""
        for combo in all_type_combinations():
            for attack in PureType:
                expected = efficacy(attack, combo.primary)
                if combo.secondary is not None:
                    expected = expected * efficacy(attack, combo.secondary)
                assert combo.against(attack) == expected

    def test_quad_weakness(self):
        gyarados = PokemonType(PureType.WATER, PureType.FLYING)
        assert efficacy_against(PureType.ELECTRIC, gyarados) == Efficacy.pow2(2)
        assert efficacy_against(PureType.GROUND, gyarados) == ZERO

    def test_cancelling_types(self):
        assert efficacy_against(PureType.FIRE, PokemonType(PureType.WATER, PureType.GRASS)) == NEUTRAL

    def test_pure_type_defender(self):
        assert efficacy_against(PureType.FIRE, PureType.GRASS) == SUPER_EFFECTIVE
        assert PureType.FIRE.against(PokemonType(PureType.GRASS)) == SUPER_EFFECTIVE

    def test_ice_weaknesses(self):
        ice = PokemonType(PureType.ICE)
        assert list(weaknesses(ice)) == [
            PureType.FIGHTING,
            PureType.FIRE,
            PureType.ROCK,
            PureType.STEEL,
        ]
        assert list(resistances(ice)) == [PureType.ICE]

    def test_dragon_ghost(self):
        dragapult = PokemonType(PureType.DRAGON, PureType.GHOST)
        assert list(dragapult.weaknesses()) == [
            PureType.DARK,
            PureType.DRAGON,
            PureType.FAIRY,
            PureType.GHOST,
            PureType.ICE,
        ]
        # immunities count as resistances
        assert list(dragapult.resistances()) == [
            PureType.BUG,
            PureType.ELECTRIC,
            PureType.FIGHTING,
            PureType.FIRE,
            PureType.GRASS,
            PureType.NORMAL,
            PureType.POISON,
            PureType.WATER,
        ]
        assert list(dragapult.immunities()) == [PureType.FIGHTING, PureType.NORMAL]

    def test_queries_can_be_repeated(self):
        t = PokemonType(PureType.STEEL, PureType.FAIRY)
        assert list(t.weaknesses()) == list(t.weaknesses())

    def test_type_matchups_covers_all_attackers(self):
        matchups = list(PokemonType(PureType.NORMAL).type_matchups())
        assert [attack for attack, _ in matchups] == list(PureType)
