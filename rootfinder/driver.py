"""Strategy-agnostic iteration loop.

The IterationDriver asks a Strategy for points, evaluates the target
function (and derivative, when given) there, records the iteration in its
ConvergenceLog and lets the strategy decide whether to stop. The iteration
ceiling is enforced here; tolerances live in the strategies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from rootfinder.convergence_log import ConvergenceLog
from rootfinder.exceptions import ConfigurationError
from rootfinder.results import RootResult, RootStatus, StopSignal
from rootfinder.strategies.base import Strategy

logger = logging.getLogger(__name__)

Function = Callable[[float], float]


class RootFinder(Protocol):
    """What callers get back from the builder."""

    @property
    def convergence_log(self) -> ConvergenceLog: ...

    def find_root(self) -> RootResult: ...


class IterationDriver:
    """Runs a Strategy against a function up to ``max_iterations`` times.

    Args:
        strategy: The strategy to drive. The driver takes ownership of it.
        function: Target function f.
        derivative: Optional f'. Evaluated at every point when present.
        max_iterations: Iteration ceiling (>= 1).
        log_convergence: Record each iteration in ``convergence_log``.

    Raises:
        ConfigurationError: If the strategy needs a derivative and none is
            given, or ``max_iterations`` is below 1.
    """

    def __init__(
        self,
        strategy: Strategy,
        function: Function,
        derivative: Function | None = None,
        max_iterations: int = 100,
        log_convergence: bool = False,
    ):
        if strategy.requires_derivative and derivative is None:
            raise ConfigurationError(f"{strategy.name} requires a derivative")
        if max_iterations < 1:
            raise ConfigurationError(f"max_iterations must be >= 1, got {max_iterations}")

        self.strategy = strategy
        self.function = function
        self.derivative = derivative
        self.max_iterations = max_iterations
        self.log_convergence = log_convergence
        self._convergence_log = ConvergenceLog()

    @property
    def method(self) -> str:
        return self.strategy.name

    @property
    def convergence_log(self) -> ConvergenceLog:
        return self._convergence_log

    def find_root(self) -> RootResult:
        """Run the search from the strategy's starting point.

        Returns:
            RootResult with status CONVERGED and the root, or the failure
            reported by the strategy, or MAX_ITERATIONS.
        """
        self._convergence_log.reset()
        function_calls = 0
        iteration = 1
        points = self.strategy.initial_points()

        while True:
            values = [self.function(x) for x in points]
            function_calls += len(points)
            derivative_values = []
            if self.derivative is not None:
                derivative_values = [self.derivative(x) for x in points]

            logger.debug(
                "%s iteration %d: x=%s f(x)=%s", self.method, iteration, points, values
            )
            if self.log_convergence:
                self._convergence_log.add_entry(iteration, points, values)

            stop = self.strategy.should_stop(values, derivative_values)
            if stop is not None:
                return self._finish(stop, iteration, function_calls)

            if iteration == self.max_iterations:
                return self._finish(
                    StopSignal.failed(
                        RootStatus.MAX_ITERATIONS,
                        f"maximum iterations ({self.max_iterations}) reached without convergence",
                    ),
                    iteration,
                    function_calls,
                )

            iteration += 1
            points = self.strategy.next_points(values, derivative_values)

    def _finish(self, stop: StopSignal, iteration: int, function_calls: int) -> RootResult:
        result = RootResult(
            root=stop.root,
            status=stop.status,
            iterations=iteration,
            function_calls=function_calls,
            method=self.method,
            message=stop.message,
        )
        if result.converged:
            logger.info(
                "%s converged to %r after %d iterations", self.method, result.root, iteration
            )
        else:
            logger.warning(
                "%s stopped after %d iterations: %s", self.method, iteration, stop.message
            )
        return result
