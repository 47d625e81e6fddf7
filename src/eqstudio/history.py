"""Append-only time series recorded by the equilibrium engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Mapping, Tuple

import numpy as np


@dataclass(frozen=True)
class HistoryRecord:
    """State after one completed integration step.

    ``forward_rate``/``reverse_rate`` are the rates that drove the step;
    ``quotient`` and ``delta_g`` are evaluated on the updated concentrations.
    """

    time: float
    concentrations: Mapping[str, float]
    forward_rate: float
    reverse_rate: float
    quotient: float
    delta_g: float


class History:
    """Ordered record of completed steps.

    Readers only ever receive copies (tuples or fresh arrays), so a caller
    may keep a snapshot while the engine continues to append.
    """

    def __init__(self) -> None:
        self._records: List[HistoryRecord] = []

    def append(self, record: HistoryRecord) -> None:
        if self._records and record.time < self._records[-1].time:
            raise ValueError(f"History time must not decrease ({record.time} < {self._records[-1].time})")
        self._records.append(record)

    def clear(self) -> None:
        self._records.clear()

    @property
    def records(self) -> Tuple[HistoryRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[HistoryRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> HistoryRecord:
        return self._records[index]

    def times(self) -> np.ndarray:
        return np.array([r.time for r in self._records], dtype=float)

    def concentration_series(self, formula: str) -> np.ndarray:
        return np.array([r.concentrations.get(formula, 0.0) for r in self._records], dtype=float)

    def forward_rates(self) -> np.ndarray:
        return np.array([r.forward_rate for r in self._records], dtype=float)

    def reverse_rates(self) -> np.ndarray:
        return np.array([r.reverse_rate for r in self._records], dtype=float)

    def quotients(self) -> np.ndarray:
        return np.array([r.quotient for r in self._records], dtype=float)

    def gibbs_energies(self) -> np.ndarray:
        return np.array([r.delta_g for r in self._records], dtype=float)
