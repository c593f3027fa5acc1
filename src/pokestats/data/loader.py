"""Dataset loading for species and moves.

This module handles:
1. Validating raw JSON records (pydantic models)
2. Converting them into Species / Move records
3. The Pokedex table that owns the loaded data
4. A process-wide Pokedex that is loaded at most once
"""

import json
import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, Field, ValidationError

from pokestats.chart.types import PokemonType, PureType
from pokestats.config import DataConfig, data_config
from pokestats.data.moves import (
    Move,
    MoveCategory,
    MoveFlag,
    MoveId,
    MoveTarget,
    Stat,
    StatChange,
    TM,
    TR,
)
from pokestats.data.species import MoveRef, Species, Stats, as_move_id
from pokestats.errors import DatasetError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# galar_dex value for species outside the regional dex
FOREIGN_DEX = "foreign"


class SpeciesRecord(BaseModel):
    """Raw species record as stored in species.json."""

    name: str
    stage: int
    galar_dex: str | int
    base_stats: list[int] = Field(min_length=6, max_length=6)
    ev_yield: list[int] = Field(min_length=6, max_length=6)
    abilities: list[str]
    types: list[str] = Field(min_length=1, max_length=2)
    items: list[tuple[str, int]] = Field(default_factory=list)
    exp_group: str
    egg_groups: list[str]
    hatch_cycles: int
    height: float
    weight: float
    color: str
    level_up_moves: list[tuple[int, str]] = Field(default_factory=list)
    egg_moves: list[str] = Field(default_factory=list)
    tms: list[int] = Field(default_factory=list)
    trs: list[int] = Field(default_factory=list)


class StatChangeRecord(BaseModel):
    stats: list[str]
    percent: int
    stages: int


class MoveRecord(BaseModel):
    """Raw move record as stored in moves.json."""

    name: str
    type: str
    category: str
    power: int = 0
    accuracy: int = 0
    pp: int
    priority: int = 0
    hit_min: int = 1
    hit_max: int = 1
    inflict: str | None = None
    inflict_percent: int = 0
    stat_changes: list[StatChangeRecord] = Field(default_factory=list, max_length=3)
    flags: list[str] = Field(default_factory=list)
    target: str


def _describe(error: ValidationError) -> str:
    """First validation error as "field 'x.y': message"."""
    first = error.errors()[0]
    loc = ".".join(str(part) for part in first["loc"]) or "<record>"
    return f"field {loc!r}: {first['msg']}"


def _record_name(data: Any) -> str | None:
    if isinstance(data, dict):
        name = data.get("name")
        return str(name) if name is not None else None
    return None


def _convert(
    fn: Callable[[Any], T],
    value: Any,
    field_name: str,
    source: str | None,
    record: str | None,
) -> T:
    """Apply ``fn`` and report failures as a DatasetError on ``field_name``."""
    try:
        return fn(value)
    except ValueError as e:
        raise DatasetError(f"field {field_name!r}: {e}", source, record) from e


def _parse_dex(value: str | int) -> int | None:
    if isinstance(value, str):
        if value == FOREIGN_DEX:
            return None
        if not value.isdigit():
            raise ValueError(f"expected a dex number or {FOREIGN_DEX!r}, got {value!r}")
        return int(value)
    return int(value)


def species_from_record(data: Any, source: str | None = None) -> Species:
    """Build a Species from one raw JSON record.

    Raises:
        DatasetError: if any field is missing or malformed
    """
    name = _record_name(data)
    try:
        record = SpeciesRecord.model_validate(data)
    except ValidationError as e:
        raise DatasetError(_describe(e), source, name) from e

    pure_types = [_convert(PureType.from_name, t, "types", source, name) for t in record.types]

    return Species(
        name=record.name,
        stage=record.stage,
        regional_dex=_convert(_parse_dex, record.galar_dex, "galar_dex", source, name),
        base_stats=Stats(*record.base_stats),
        ev_yield=Stats(*record.ev_yield),
        abilities=tuple(record.abilities),
        types=PokemonType(*pure_types),
        items=tuple((item, weight) for item, weight in record.items),
        exp_group=record.exp_group,
        egg_groups=tuple(record.egg_groups),
        hatch_cycles=record.hatch_cycles,
        height=record.height,
        weight=record.weight,
        color=record.color,
        level_up_moves=tuple((level, MoveId(mv)) for level, mv in record.level_up_moves),
        egg_moves=tuple(MoveId(mv) for mv in record.egg_moves),
        tms=tuple(_convert(TM, i, "tms", source, name) for i in record.tms),
        trs=tuple(_convert(TR, i, "trs", source, name) for i in record.trs),
    )


def _stat_change(record: StatChangeRecord) -> StatChange:
    return StatChange(
        stats=frozenset(Stat(s) for s in record.stats),
        percent=record.percent,
        stages=record.stages,
    )


def move_from_record(data: Any, source: str | None = None) -> Move:
    """Build a Move from one raw JSON record.

    Raises:
        DatasetError: if any field is missing or malformed
    """
    name = _record_name(data)
    try:
        record = MoveRecord.model_validate(data)
    except ValidationError as e:
        raise DatasetError(_describe(e), source, name) from e

    inflict = record.inflict if record.inflict not in (None, "", "None") else None

    fields = dict(
        id=MoveId(record.name),
        type=_convert(PureType.from_name, record.type, "type", source, name),
        category=_convert(MoveCategory, record.category, "category", source, name),
        power=record.power,
        accuracy=record.accuracy,
        pp=record.pp,
        priority=record.priority,
        hit_min=record.hit_min,
        hit_max=record.hit_max,
        inflict=inflict,
        inflict_percent=record.inflict_percent,
        stat_changes=tuple(
            _convert(_stat_change, sc, "stat_changes", source, name) for sc in record.stat_changes
        ),
        flags=frozenset(_convert(MoveFlag, f, "flags", source, name) for f in record.flags),
        target=_convert(MoveTarget, record.target, "target", source, name),
    )
    try:
        return Move(**fields)
    except ValueError as e:
        raise DatasetError(f"field 'hit_max': {e}", source, name) from e


def _read_json_list(path: Path) -> list[Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise DatasetError(f"cannot read file: {e}", str(path)) from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"invalid JSON: {e}", str(path)) from e

    if not isinstance(data, list):
        raise DatasetError(f"expected a list of records, got {type(data).__name__}", str(path))
    return data


def load_species(path: Path | str) -> list[Species]:
    """Load every species record from a JSON file."""
    path = Path(path)
    species = [species_from_record(d, str(path)) for d in _read_json_list(path)]
    logger.info(f"Loaded {len(species)} species from {path}")
    return species


def load_moves(path: Path | str) -> list[Move]:
    """Load every move record from a JSON file."""
    path = Path(path)
    moves = [move_from_record(d, str(path)) for d in _read_json_list(path)]
    logger.info(f"Loaded {len(moves)} moves from {path}")
    return moves


class Pokedex:
    """Read-only species and move tables.

    Provides:
    - Species lookup by exact name
    - Move lookup by exact name
    - Queries over the whole species table

    Nothing mutates a Pokedex after construction, so one instance can be
    shared freely.
    """

    def __init__(self, species: Iterable[Species], moves: Iterable[Move] = ()):
        self.species: dict[str, Species] = {}
        self.moves: dict[MoveId, Move] = {}

        for s in species:
            if s.name in self.species:
                logger.warning(f"Duplicate species {s.name!r}, keeping the first record")
                continue
            self.species[s.name] = s

        for mv in moves:
            if mv.id in self.moves:
                raise DatasetError(f"duplicate move name {mv.name!r}")
            self.moves[mv.id] = mv

    @classmethod
    def from_files(cls, species_path: Path | str, moves_path: Path | str) -> "Pokedex":
        return cls(load_species(species_path), load_moves(moves_path))

    @classmethod
    def from_config(cls, config: DataConfig | None = None) -> "Pokedex":
        config = config or data_config
        return cls.from_files(config.species_path, config.moves_path)

    def get_species(self, name: str) -> Species | None:
        """Get a species by exact name."""
        return self.species.get(name)

    def get_move(self, move: MoveRef) -> Move | None:
        """Get a move by exact name."""
        return self.moves.get(as_move_id(move))

    def regional(self) -> list[Species]:
        """Species that appear in the regional dex."""
        return [s for s in self.species.values() if s.in_regional_dex]

    def learners(self, move: MoveRef) -> list[Species]:
        """Species that can learn ``move`` through any source."""
        return [s for s in self.species.values() if s.can_learn(move)]

    def __len__(self) -> int:
        return len(self.species)

    def __contains__(self, name: object) -> bool:
        return name in self.species

    def __iter__(self) -> Iterator[Species]:
        return iter(self.species.values())


_pokedex: Pokedex | None = None
_pokedex_lock = threading.Lock()


def get_pokedex(config: DataConfig | None = None) -> Pokedex:
    """Process-wide Pokedex, loaded from disk on first use.

    Concurrent first callers wait on the lock; the files are parsed once and
    every caller gets the same instance. ``config`` only matters for the
    call that performs the load.
    """
    global _pokedex
    if _pokedex is None:
        with _pokedex_lock:
            if _pokedex is None:
                _pokedex = Pokedex.from_config(config)
    return _pokedex


def reset_pokedex() -> None:
    """Forget the process-wide Pokedex (used by tests)."""
    global _pokedex
    with _pokedex_lock:
        _pokedex = None
