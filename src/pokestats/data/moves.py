"""Move records, move identity and the TM/TR tables."""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from pokestats.chart.types import PureType


@dataclass(frozen=True)
class MoveId:
    """Name-keyed identity of a move.

    Level-up and egg move names, TM/TR lookups and catalog entries all join on
    this. Matching is exact and case-sensitive.
    """

    name: str

    @classmethod
    def from_name(cls, name: str) -> "MoveId":
        return cls(name)

    def __str__(self) -> str:
        return self.name


class MoveCategory(Enum):
    STATUS = "Status"
    PHYSICAL = "Physical"
    SPECIAL = "Special"


class MoveTarget(Enum):
    """Which battle positions a move can hit."""

    ANY_EXCEPT_SELF = "AnyExceptSelf"
    ALLY_OR_SELF = "AllyOrSelf"
    ALLY = "Ally"
    ADJACENT_FOE = "AdjacentFoe"
    ALL_ADJACENT = "AllAdjacent"
    ALL_ADJACENT_FOES = "AllAdjacentFoes"
    ALL_ALLIES = "AllAllies"
    SELF = "Self"
    ALL = "All"
    RANDOM_FOE = "RandomFoe"
    FIELD = "Field"
    FOE_SIDE = "FoeSide"
    ALLY_SIDE = "AllySide"
    COUNTER = "Counter"


class Stat(Enum):
    """Stats a move can raise or lower."""

    HP = "HP"
    ATTACK = "Attack"
    DEFENSE = "Defense"
    SP_DEFENSE = "SpecialDefense"
    SPEED = "Speed"
    SP_ATTACK = "SpecialAttack"
    EVASION = "Evasion"
    ACCURACY = "Accuracy"


class MoveFlag(Enum):
    MAKES_CONTACT = "MakesContact"
    CHARGE = "Charge"
    RECHARGE = "Recharge"
    PROTECT = "Protect"
    REFLECTABLE = "Reflectable"
    SNATCH = "Snatch"
    MIRROR = "Mirror"
    PUNCH = "Punch"
    SOUND = "Sound"
    GRAVITY = "Gravity"
    DEFROST = "Defrost"
    HEAL = "Heal"
    AUTHENTIC = "Authentic"
    POWDER = "Powder"
    BITE = "Bite"
    PULSE = "Pulse"
    BALLISTIC = "Ballistic"
    DANCE = "Dance"


@dataclass(frozen=True)
class StatChange:
    """A stat boost or drop a move can cause."""

    stats: frozenset[Stat]
    percent: int  # chance to trigger
    stages: int  # signed stage delta


@dataclass(frozen=True)
class Move:
    """Static data for a move."""

    id: MoveId
    type: PureType
    category: MoveCategory
    power: int
    accuracy: int
    pp: int
    priority: int = 0
    hit_min: int = 1
    hit_max: int = 1
    inflict: str | None = None  # status condition, e.g. "Paralysis"
    inflict_percent: int = 0
    stat_changes: tuple[StatChange, ...] = ()
    flags: frozenset[MoveFlag] = field(default_factory=frozenset)
    target: MoveTarget = MoveTarget.ANY_EXCEPT_SELF

    MAX_STAT_CHANGES: ClassVar[int] = 3

    def __post_init__(self) -> None:
        if len(self.stat_changes) > self.MAX_STAT_CHANGES:
            raise ValueError(
                f"{self.id}: at most {self.MAX_STAT_CHANGES} stat changes, got {len(self.stat_changes)}"
            )
        if self.hit_min > self.hit_max:
            raise ValueError(f"{self.id}: hit_min {self.hit_min} > hit_max {self.hit_max}")

    @property
    def name(self) -> str:
        return self.id.name

    @property
    def is_attack(self) -> bool:
        return self.category != MoveCategory.STATUS

    @property
    def makes_contact(self) -> bool:
        return MoveFlag.MAKES_CONTACT in self.flags

    @property
    def is_sound(self) -> bool:
        return MoveFlag.SOUND in self.flags

    @property
    def heals(self) -> bool:
        return MoveFlag.HEAL in self.flags

    def has_flag(self, flag: MoveFlag) -> bool:
        return flag in self.flags


# Move taught by each TM, indexed by TM number.
TM_MOVES: tuple[str, ...] = (
    "Mega Punch", "Mega Kick", "Pay Day", "Fire Punch", "Ice Punch",
    "Thunder Punch", "Fly", "Pin Missile", "Hyper Beam", "Giga Impact",
    "Magical Leaf", "Solar Beam", "Solar Blade", "Fire Spin", "Thunder Wave",
    "Dig", "Screech", "Light Screen", "Reflect", "Safeguard",
    "Self-Destruct", "Rest", "Rock Slide", "Thief", "Snore",
    "Protect", "Scary Face", "Icy Wind", "Giga Drain", "Charm",
    "Steel Wing", "Attract", "Sandstorm", "Rain Dance", "Sunny Day",
    "Hail", "Whirlpool", "Beat Up", "Will-O-Wisp", "Facade",
    "Swift", "Helping Hand", "Revenge", "Brick Break", "Imprison",
    "Dive", "Weather Ball", "Fake Tears", "Rock Tomb", "Sand Tomb",
    "Bullet Seed", "Icicle Spear", "Bounce", "Mud Shot", "Rock Blast",
    "Brine", "U-turn", "Payback", "Assurance", "Fling",
    "Power Swap", "Guard Swap", "Speed Swap", "Drain Punch", "Avalanche",
    "Shadow Claw", "Thunder Fang", "Ice Fang", "Fire Fang", "Psycho Cut",
    "Trick Room", "Wonder Room", "Magic Room", "Cross Poison", "Venoshock",
    "Low Sweep", "Round", "Hex", "Acrobatics", "Retaliate",
    "Volt Switch", "Bulldoze", "Electroweb", "Razor Shell", "Tail Slap",
    "Snarl", "Phantom Force", "Draining Kiss", "Grassy Terrain", "Misty Terrain",
    "Electric Terrain", "Psychic Terrain", "Mystical Fire", "Eerie Impulse", "False Swipe",
    "Air Slash", "Smart Strike", "Brutal Swing", "Stomping Tantrum", "Breaking Swipe",
)

# Move taught by each TR, indexed by TR number.
TR_MOVES: tuple[str, ...] = (
    "Swords Dance", "Body Slam", "Flamethrower", "Hydro Pump", "Surf",
    "Ice Beam", "Blizzard", "Low Kick", "Thunderbolt", "Thunder",
    "Earthquake", "Psychic", "Agility", "Focus Energy", "Metronome",
    "Fire Blast", "Waterfall", "Amnesia", "Leech Life", "Tri Attack",
    "Substitute", "Reversal", "Sludge Bomb", "Spikes", "Outrage",
    "Psyshock", "Endure", "Sleep Talk", "Megahorn", "Baton Pass",
    "Encore", "Iron Tail", "Crunch", "Shadow Ball", "Future Sight",
    "Uproar", "Heat Wave", "Taunt", "Trick", "Superpower",
    "Skill Swap", "Blaze Kick", "Hyper Voice", "Overheat", "Cosmic Power",
    "Muddy Water", "Iron Defense", "Dragon Claw", "Bulk Up", "Calm Mind",
    "Leaf Blade", "Dragon Dance", "Gyro Ball", "Close Combat", "Toxic Spikes",
    "Flare Blitz", "Aura Sphere", "Poison Jab", "Dark Pulse", "Seed Bomb",
    "X-Scissor", "Bug Buzz", "Dragon Pulse", "Power Gem", "Focus Blast",
    "Energy Ball", "Brave Bird", "Earth Power", "Nasty Plot", "Zen Headbutt",
    "Flash Cannon", "Leaf Storm", "Power Whip", "Gunk Shot", "Iron Head",
    "Stone Edge", "Stealth Rock", "Grass Knot", "Sludge Wave", "Heavy Slam",
    "Electro Ball", "Foul Play", "Stored Power", "Ally Switch", "Scald",
    "Work Up", "Wild Charge", "Drill Run", "Heat Crash", "Hurricane",
    "Play Rough", "Venom Drench", "Dazzling Gleam", "Darkest Lariat", "High Horsepower",
    "Throat Chop", "Pollen Puff", "Psychic Fangs", "Liquidation", "Body Press",
)


@dataclass(frozen=True)
class _Machine:
    """Index into one of the fixed 100-entry move tables."""

    id: int

    TABLE: ClassVar[tuple[str, ...]] = ()
    LABEL: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError(f"{self.LABEL} id must be an integer, got {self.id!r}")
        if not 0 <= self.id < len(self.TABLE):
            raise ValueError(f"{self.LABEL} id must be in [0, {len(self.TABLE)}), got {self.id}")

    def as_move(self) -> MoveId:
        return MoveId(self.TABLE[self.id])

    def __str__(self) -> str:
        return f"{self.LABEL}{self.id:02d}"


@dataclass(frozen=True)
class TM(_Machine):
    TABLE: ClassVar[tuple[str, ...]] = TM_MOVES
    LABEL: ClassVar[str] = "TM"


@dataclass(frozen=True)
class TR(_Machine):
    TABLE: ClassVar[tuple[str, ...]] = TR_MOVES
    LABEL: ClassVar[str] = "TR"
