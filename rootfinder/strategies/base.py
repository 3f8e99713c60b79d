"""Iteration contract shared by the driven root-finding strategies."""

from __future__ import annotations

import sys
from abc import abstractmethod
from collections.abc import Sequence
from typing import Protocol

from rootfinder.results import StopSignal

MACHINE_EPSILON = sys.float_info.epsilon


class Strategy(Protocol):
    """Protocol for root-finding strategies run by the IterationDriver.

    A strategy owns its iteration state (bracket or current guess). The
    driver evaluates the target function at the points the strategy asks
    for and hands the values back.
    """

    name: str
    arity: int
    requires_derivative: bool

    @abstractmethod
    def initial_points(self) -> tuple[float, ...]:
        """Reset the working state and return the first points to evaluate."""
        ...

    @abstractmethod
    def next_points(
        self, values: Sequence[float], derivative_values: Sequence[float]
    ) -> tuple[float, ...]:
        """Advance the state from the values at the previous points.

        Args:
            values: f evaluated at the previous points.
            derivative_values: f' at the previous points, empty when no
                derivative was supplied.

        Returns:
            The next points to evaluate.
        """
        ...

    @abstractmethod
    def should_stop(
        self, values: Sequence[float], derivative_values: Sequence[float]
    ) -> StopSignal | None:
        """Return None to continue, or a StopSignal to end the search."""
        ...
