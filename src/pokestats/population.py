"""Base-stat statistics over a population of species."""

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from pokestats.data.species import Species

MEASURES = ("hp", "attack", "defense", "sp_atk", "sp_def", "speed", "total")


@dataclass(frozen=True)
class StatSummary:
    """Mean and sample standard deviation of one measure."""

    measure: str
    mean: float
    std: float

    def __str__(self) -> str:
        return f"{self.measure:<8} = {self.mean:>9.5f} (σ = {self.std:.5f})"


def population_stats(species: Iterable[Species]) -> list[StatSummary]:
    """Summarize each base stat and the base-stat total.

    Raises:
        ValueError: if ``species`` is empty
    """
    rows = np.array([s.base_stats.as_tuple() for s in species], dtype=np.float64)
    if rows.size == 0:
        raise ValueError("Cannot summarize an empty population")

    columns = np.column_stack([rows, rows.sum(axis=1)])
    means = columns.mean(axis=0)
    if len(rows) > 1:
        stds = columns.std(axis=0, ddof=1)
    else:
        stds = np.zeros(len(MEASURES))

    return [
        StatSummary(measure, float(mean), float(std))
        for measure, mean, std in zip(MEASURES, means, stds)
    ]


def format_population_stats(summaries: Iterable[StatSummary]) -> str:
    return "\n".join(str(s) for s in summaries)
