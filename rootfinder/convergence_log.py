"""Per-iteration trace of a root search.

The log records, for each iteration, the points that were evaluated and the
function values found there. It is purely diagnostic: nothing in the search
reads it back.

Example::

    log = ConvergenceLog()
    log.add_entry(1, [1.0, 2.0], [-1.0, 2.0])
    log.add_entry(2, [1.5], [0.25])

    df = log.to_dataframe()   # one row per evaluated point
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

import pandas as pd


@dataclass(frozen=True)
class IterationEntry:
    """A single iteration of a root search.

    Attributes:
        iteration: 1-based iteration number.
        x: Points evaluated in this iteration.
        fx: Function values at the points in ``x``, in the same order.
    """

    iteration: int
    x: tuple[float, ...]
    fx: tuple[float, ...]


class ConvergenceLog:
    """Append-only, resettable record of IterationEntry objects."""

    ITERATION = "iteration"
    POINT = "point"
    X = "x"
    FX = "fx"

    def __init__(self) -> None:
        self._entries: list[IterationEntry] = []

    def add_entry(self, iteration: int, x: Sequence[float], fx: Sequence[float]) -> None:
        """Append one iteration's points and values.

        Raises:
            ValueError: If ``x`` and ``fx`` differ in length.
        """
        if len(x) != len(fx):
            raise ValueError(
                f"x and fx must have the same length, got {len(x)} and {len(fx)}"
            )
        self._entries.append(IterationEntry(iteration, tuple(x), tuple(fx)))

    @property
    def entries(self) -> list[IterationEntry]:
        """Logged iterations, oldest first (a copy)."""
        return list(self._entries)

    def reset(self) -> None:
        """Clear the log for reuse."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[IterationEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> IterationEntry:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"ConvergenceLog(entries={len(self._entries)})"

    def to_records(self) -> list[dict[str, Any]]:
        """One dict per iteration, with the points and values as lists."""
        return [
            {self.ITERATION: e.iteration, self.X: list(e.x), self.FX: list(e.fx)}
            for e in self._entries
        ]

    def to_dataframe(self) -> pd.DataFrame:
        """Long-format frame with one row per evaluated point.

        Columns are ``iteration``, ``point`` (position within the
        iteration), ``x`` and ``fx``.
        """
        rows = [
            (entry.iteration, i, x, fx)
            for entry in self._entries
            for i, (x, fx) in enumerate(zip(entry.x, entry.fx))
        ]
        return pd.DataFrame(rows, columns=[self.ITERATION, self.POINT, self.X, self.FX])
