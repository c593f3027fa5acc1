"""Tests for move records and the TM/TR tables."""

import pytest

from pokestats.data import (
    Move,
    MoveCategory,
    MoveId,
    Stat,
    StatChange,
    TM,
    TM_MOVES,
    TR,
    TR_MOVES,
)
from pokestats.chart import PureType


class TestMachines:
    """Tests for TM/TR numbering."""

    def test_tables_have_100_entries(self):
        assert len(TM_MOVES) == 100
        assert len(TR_MOVES) == 100

    def test_tm_lookup(self):
        assert TM(0).as_move() == MoveId("Mega Punch")
        assert TM(64).as_move() == MoveId("Avalanche")
        assert TM(99).as_move() == MoveId("Breaking Swipe")

    def test_tr_lookup(self):
        assert TR(0).as_move() == MoveId("Swords Dance")
        assert TR(4).as_move() == MoveId("Surf")
        assert TR(99).as_move() == MoveId("Body Press")

    @pytest.mark.parametrize("index", [-1, 100, 250])
    def test_out_of_range(self, index):
        with pytest.raises(ValueError):
            TM(index)
        with pytest.raises(ValueError):
            TR(index)

    def test_rejects_non_integer(self):
        with pytest.raises(ValueError):
            TM(True)

    def test_str(self):
        assert str(TM(5)) == "TM05"
        assert str(TR(42)) == "TR42"

    def test_tm_and_tr_are_distinct(self):
        assert TM(1) != TR(1)


class TestMoveId:
    def test_exact_match(self):
        assert MoveId("Surf") == MoveId.from_name("Surf")
        assert MoveId("Surf") != MoveId("surf")

    def test_str(self):
        assert str(MoveId("Rapid Spin")) == "Rapid Spin"


class TestMove:
    """Tests for Move validation and helpers."""

    def _move(self, **kwargs):
        defaults = dict(
            id=MoveId("Test Move"),
            type=PureType.NORMAL,
            category=MoveCategory.PHYSICAL,
            power=40,
            accuracy=100,
            pp=35,
        )
        defaults.update(kwargs)
        return Move(**defaults)

    def test_too_many_stat_changes(self):
        change = StatChange(frozenset({Stat.ATTACK}), 100, 1)
        self._move(stat_changes=(change,) * 3)
        with pytest.raises(ValueError):
            self._move(stat_changes=(change,) * 4)

    def test_hit_range(self):
        assert self._move(hit_min=2, hit_max=5).hit_max == 5
        with pytest.raises(ValueError):
            self._move(hit_min=3, hit_max=2)

    def test_is_attack(self, moves):
        assert moves["Surf"].is_attack
        assert not moves["Recover"].is_attack

    def test_flags(self, moves):
        assert moves["Rapid Spin"].makes_contact
        assert moves["Recover"].heals
        assert not moves["Surf"].is_sound

    def test_name(self, moves):
        assert moves["Body Press"].name == "Body Press"
