"""Newton-Raphson strategy."""

from __future__ import annotations

from collections.abc import Sequence

from rootfinder.results import RootStatus, StopSignal
from rootfinder.strategies.base import MACHINE_EPSILON


class NewtonRaphsonStrategy:
    """Newton-Raphson iteration from a single initial guess.

    Needs the derivative values from the driver; the builder refuses to
    construct this strategy without a derivative.
    """

    name = "newton_raphson"
    arity = 1
    requires_derivative = True

    def __init__(self, initial_guess: float, tolerance: float):
        self._start = initial_guess
        self.tolerance = tolerance
        self.x0 = initial_guess

    def initial_points(self) -> tuple[float, ...]:
        self.x0 = self._start
        return (self.x0,)

    def next_points(
        self, values: Sequence[float], derivative_values: Sequence[float]
    ) -> tuple[float, ...]:
        self.x0 -= values[0] / derivative_values[0]
        return (self.x0,)

    def should_stop(
        self, values: Sequence[float], derivative_values: Sequence[float]
    ) -> StopSignal | None:
        fx = values[0]
        dfx = derivative_values[0]
        if abs(dfx) < MACHINE_EPSILON:
            return StopSignal.failed(
                RootStatus.NUMERICAL_STALL,
                f"derivative too close to zero: f'({self.x0}) = {dfx:.3e}",
            )
        candidate = self.x0 - fx / dfx
        if abs(self.x0 - candidate) < self.tolerance:
            return StopSignal.converged(candidate)
        return None
