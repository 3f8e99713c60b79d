"""Secant strategy."""

from __future__ import annotations

from collections.abc import Sequence

from rootfinder.results import RootStatus, StopSignal
from rootfinder.strategies.base import MACHINE_EPSILON


class SecantStrategy:
    """Secant iteration on the two most recent abscissas.

    Each step replaces the older point with the zero of the line through
    ``(x0, f(x0))`` and ``(x1, f(x1))``.
    """

    name = "secant"
    arity = 2
    requires_derivative = False

    def __init__(self, x0: float, x1: float, tolerance: float):
        self._start = (x0, x1)
        self.tolerance = tolerance
        self.x0 = x0
        self.x1 = x1
        self.candidate = x1

    def initial_points(self) -> tuple[float, ...]:
        self.x0, self.x1 = self._start
        self.candidate = self.x1
        return (self.x0, self.x1)

    def next_points(
        self, values: Sequence[float], derivative_values: Sequence[float]
    ) -> tuple[float, ...]:
        fx0, fx1 = values
        self.candidate = self.x1 - fx1 * (self.x1 - self.x0) / (fx1 - fx0)
        self.x0 = self.x1
        self.x1 = self.candidate
        return (self.x0, self.x1)

    def should_stop(
        self, values: Sequence[float], derivative_values: Sequence[float]
    ) -> StopSignal | None:
        fx0, fx1 = values
        if abs(self.x0 - self.x1) < self.tolerance:
            return StopSignal.converged(self.candidate)
        if abs(fx0 - fx1) < MACHINE_EPSILON:
            return StopSignal.failed(
                RootStatus.NUMERICAL_STALL,
                f"near-zero denominator: |f(x0) - f(x1)| = {abs(fx0 - fx1):.3e}",
            )
        return None
