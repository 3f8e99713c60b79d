"""Bisection strategy.

The bracket is walked with an expand-then-halve rule: a step that finds no
sign change between ``x0`` and ``x1`` slides the bracket one width to the
right and halves it from the left, rather than halving a known sign-changing
interval. For a single simple root inside the starting bracket this still
converges, at worst one extra step per halving.
"""

from __future__ import annotations

from collections.abc import Sequence

from rootfinder.results import StopSignal


class BisectionStrategy:
    name = "bisection"
    arity = 2
    requires_derivative = False

    def __init__(self, x0: float, x1: float, tolerance: float):
        self._start = (x0, x1)
        self.tolerance = tolerance
        self.x0 = x0
        self.x1 = x1
        self.search_left = False

    def initial_points(self) -> tuple[float, ...]:
        self.x0, self.x1 = self._start
        self.search_left = False
        self.x1 = (self.x0 + self.x1) / 2.0
        return (self.x0, self.x1)

    def next_points(
        self, values: Sequence[float], derivative_values: Sequence[float]
    ) -> tuple[float, ...]:
        fx0, fx1 = values
        if fx0 * fx1 < 0:
            self.x1 = (self.x0 + self.x1) / 2.0
            self.search_left = True
        else:
            self.x1 = 2.0 * self.x1 - self.x0
            self.x0 = (self.x0 + self.x1) / 2.0
            self.search_left = False
        return (self.x0, self.x1)

    def should_stop(
        self, values: Sequence[float], derivative_values: Sequence[float]
    ) -> StopSignal | None:
        fx0, fx1 = values
        # The explored side is the point placed by the last step.
        if self.search_left:
            explored, f_explored = self.x1, fx1
        else:
            explored, f_explored = self.x0, fx0

        if abs(f_explored) < self.tolerance:
            return StopSignal.converged(explored)
        if abs(self.x1 - self.x0) < self.tolerance:
            return StopSignal.converged((self.x0 + self.x1) / 2.0)
        return None
