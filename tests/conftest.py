"""Shared fixtures: a small hand-built Pokedex."""

import pytest

from pokestats.chart import PokemonType, PureType
from pokestats.data import (
    Move,
    MoveCategory,
    MoveFlag,
    MoveId,
    MoveTarget,
    Pokedex,
    Species,
    Stats,
    TM,
    TR,
)


def _move(name, pure_type, category, power=0, **kwargs):
    return Move(
        id=MoveId(name),
        type=pure_type,
        category=category,
        power=power,
        accuracy=100,
        pp=10,
        **kwargs,
    )


@pytest.fixture
def moves():
    """Move catalog keyed by name."""
    catalog = [
        _move("Rapid Spin", PureType.NORMAL, MoveCategory.PHYSICAL, 50,
              flags=frozenset({MoveFlag.MAKES_CONTACT, MoveFlag.PROTECT})),
        _move("Avalanche", PureType.ICE, MoveCategory.PHYSICAL, 60,
              priority=-4, flags=frozenset({MoveFlag.MAKES_CONTACT})),
        _move("Body Press", PureType.FIGHTING, MoveCategory.PHYSICAL, 80),
        _move("Recover", PureType.NORMAL, MoveCategory.STATUS,
              flags=frozenset({MoveFlag.HEAL, MoveFlag.SNATCH}), target=MoveTarget.SELF),
        _move("Thunderbolt", PureType.ELECTRIC, MoveCategory.SPECIAL, 90,
              inflict="Paralysis", inflict_percent=10),
        _move("Volt Switch", PureType.ELECTRIC, MoveCategory.SPECIAL, 70),
        _move("Thunder Wave", PureType.ELECTRIC, MoveCategory.STATUS, target=MoveTarget.ADJACENT_FOE),
        _move("Shadow Ball", PureType.GHOST, MoveCategory.SPECIAL, 80,
              flags=frozenset({MoveFlag.BALLISTIC})),
        _move("Dragon Darts", PureType.DRAGON, MoveCategory.PHYSICAL, 50, hit_min=2, hit_max=2),
        _move("Flamethrower", PureType.FIRE, MoveCategory.SPECIAL, 90),
        _move("Earthquake", PureType.GROUND, MoveCategory.PHYSICAL, 100,
              target=MoveTarget.ALL_ADJACENT),
        _move("Surf", PureType.WATER, MoveCategory.SPECIAL, 90, target=MoveTarget.ALL_ADJACENT),
    ]
    return {mv.name: mv for mv in catalog}


@pytest.fixture
def avalugg():
    return Species(
        name="Avalugg",
        types=PokemonType(PureType.ICE),
        base_stats=Stats(95, 117, 184, 44, 46, 28),
        regional_dex=383,
        stage=2,
        abilities=("Own Tempo", "Ice Body", "Sturdy"),
        egg_groups=("Monster",),
        level_up_moves=((1, MoveId("Rapid Spin")), (24, MoveId("Avalanche"))),
        egg_moves=(MoveId("Recover"),),
        tms=(TM(64),),  # Avalanche
        trs=(TR(99),),  # Body Press
    )


@pytest.fixture
def pikachu():
    return Species(
        name="Pikachu",
        types=PokemonType(PureType.ELECTRIC),
        base_stats=Stats(35, 55, 40, 50, 50, 90),
        regional_dex=194,
        egg_groups=("Field", "Fairy"),
        level_up_moves=((1, MoveId("Thunder Wave")),),
        tms=(TM(80),),  # Volt Switch
        trs=(TR(8),),  # Thunderbolt
    )


@pytest.fixture
def dragapult():
    return Species(
        name="Dragapult",
        types=PokemonType(PureType.GHOST, PureType.DRAGON),
        base_stats=Stats(88, 120, 75, 100, 75, 142),
        regional_dex=397,
        stage=3,
        egg_groups=("Amorphous", "Dragon"),
        level_up_moves=((1, MoveId("Dragon Darts")),),
        trs=(TR(33),),  # Shadow Ball
    )


@pytest.fixture
def gyarados():
    return Species(
        name="Gyarados",
        types=PokemonType(PureType.WATER, PureType.FLYING),
        base_stats=Stats(95, 125, 79, 60, 100, 81),
        regional_dex=145,
        stage=2,
        egg_groups=("Water 2", "Dragon"),
        trs=(TR(4), TR(10)),  # Surf, Earthquake
    )


@pytest.fixture
def ditto():
    return Species(
        name="Ditto",
        types=PokemonType(PureType.NORMAL),
        base_stats=Stats(48, 48, 48, 48, 48, 48),
        regional_dex=373,
        egg_groups=("Ditto",),
    )


@pytest.fixture
def zacian():
    return Species(
        name="Zacian",
        types=PokemonType(PureType.FAIRY),
        base_stats=Stats(92, 130, 115, 80, 115, 138),
        regional_dex=398,
        egg_groups=("Undiscovered",),
    )


@pytest.fixture
def mew():
    """Not in the regional dex."""
    return Species(
        name="Mew",
        types=PokemonType(PureType.PSYCHIC),
        base_stats=Stats(100, 100, 100, 100, 100, 100),
        regional_dex=None,
        egg_groups=("Undiscovered",),
    )


@pytest.fixture
def pokedex(moves, avalugg, pikachu, dragapult, gyarados, ditto, zacian, mew):
    return Pokedex(
        [avalugg, pikachu, dragapult, gyarados, ditto, zacian, mew],
        moves.values(),
    )
