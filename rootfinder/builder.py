"""Validated construction of root finders.

Construction happens in two phases. A RootFinderConfig collects optional
fields; ``build()`` validates them against the selected method and returns a
ready root finder. Nothing here calls the target function.

Example::

    from rootfinder import RootFinderBuilder, RootFindingMethod

    finder = (
        RootFinderBuilder(RootFindingMethod.NEWTON_RAPHSON)
        .function(lambda x: x**3 - x - 2)
        .derivative(lambda x: 3 * x**2 - 1)
        .initial_guess(400.0)
        .tolerance(1e-6)
        .max_iterations(100)
        .log_convergence(True)
        .build()
    )
    result = finder.find_root()
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum

from rootfinder.brent import BrentRootFinder
from rootfinder.driver import Function, IterationDriver, RootFinder
from rootfinder.exceptions import ConfigurationError
from rootfinder.results import RootResult
from rootfinder.strategies import BisectionStrategy, NewtonRaphsonStrategy, SecantStrategy

logger = logging.getLogger(__name__)


class RootFindingMethod(Enum):
    """Selectable root-finding methods.

    INVERSE_QUADRATIC_INTERPOLATION is reserved: it is accepted as a value
    but always rejected when a finder is built.
    """

    BISECTION = "bisection"
    SECANT = "secant"
    NEWTON_RAPHSON = "newton_raphson"
    BRENT = "brent"
    INVERSE_QUADRATIC_INTERPOLATION = "inverse_quadratic_interpolation"


_BRACKETED = (RootFindingMethod.BISECTION, RootFindingMethod.SECANT, RootFindingMethod.BRENT)


def _resolve_method(method: RootFindingMethod | str) -> RootFindingMethod:
    if isinstance(method, RootFindingMethod):
        return method
    try:
        return RootFindingMethod(str(method).lower())
    except ValueError:
        raise ConfigurationError(f"Unsupported method: {method!r}") from None


@dataclass
class RootFinderConfig:
    """Parameters for a root finder, all optional until ``build()``.

    Attributes:
        method: Which method to build (enum member or its string value).
        function: Target function f.
        derivative: f', required by Newton-Raphson.
        initial_guess: Starting point, required by Newton-Raphson.
        boundaries: ``(x0, x1)``, required by Bisection, Secant and Brent.
        tolerance: Convergence threshold, > 0.
        max_iterations: Iteration ceiling, >= 1.
        log_convergence: Record a convergence trace. Defaults to False.
    """

    method: RootFindingMethod | str
    function: Function | None = None
    derivative: Function | None = None
    initial_guess: float | None = None
    boundaries: tuple[float, float] | None = None
    tolerance: float | None = None
    max_iterations: int | None = None
    log_convergence: bool | None = None

    def build(self) -> RootFinder:
        """Validate the configuration and construct the root finder.

        Returns:
            An IterationDriver for Bisection, Secant and Newton-Raphson, or a
            BrentRootFinder for Brent.

        Raises:
            ConfigurationError: If a parameter required by the method is
                missing or invalid, or the method is not supported.
        """
        method = _resolve_method(self.method)

        if self.function is None:
            raise ConfigurationError("Function must be specified")
        if not callable(self.function):
            raise ConfigurationError("Function must be callable")
        if self.tolerance is None:
            raise ConfigurationError("Tolerance must be specified")
        if not math.isfinite(self.tolerance) or self.tolerance <= 0:
            raise ConfigurationError(f"Tolerance must be a positive number, got {self.tolerance}")
        if self.max_iterations is None:
            raise ConfigurationError("Max iterations must be specified")
        if isinstance(self.max_iterations, bool) or not isinstance(self.max_iterations, int):
            raise ConfigurationError(
                f"Max iterations must be an integer, got {self.max_iterations!r}"
            )
        if self.max_iterations < 1:
            raise ConfigurationError(f"Max iterations must be >= 1, got {self.max_iterations}")

        log_convergence = bool(self.log_convergence) if self.log_convergence is not None else False

        if method is RootFindingMethod.NEWTON_RAPHSON:
            if self.derivative is None:
                raise ConfigurationError("Derivative must be specified for Newton-Raphson method")
            if self.initial_guess is None:
                raise ConfigurationError("Initial guess must be specified for Newton-Raphson method")
        elif method in _BRACKETED:
            if self.boundaries is None:
                raise ConfigurationError(
                    f"Boundaries must be specified for {method.value} method"
                )
            if len(self.boundaries) != 2:
                raise ConfigurationError(
                    f"Boundaries must be a pair (x0, x1), got {self.boundaries!r}"
                )
        else:
            raise ConfigurationError(f"Unsupported method: {method.value}")

        logger.debug(
            "Building %s root finder: tolerance=%g max_iterations=%d log_convergence=%s",
            method.value,
            self.tolerance,
            self.max_iterations,
            log_convergence,
        )

        if method is RootFindingMethod.BRENT:
            x0, x1 = self.boundaries
            return BrentRootFinder(
                self.function,
                x0,
                x1,
                tolerance=self.tolerance,
                max_iterations=self.max_iterations,
                log_convergence=log_convergence,
            )

        if method is RootFindingMethod.NEWTON_RAPHSON:
            strategy = NewtonRaphsonStrategy(self.initial_guess, self.tolerance)
        elif method is RootFindingMethod.SECANT:
            strategy = SecantStrategy(*self.boundaries, self.tolerance)
        else:
            strategy = BisectionStrategy(*self.boundaries, self.tolerance)

        return IterationDriver(
            strategy,
            self.function,
            derivative=self.derivative,
            max_iterations=self.max_iterations,
            log_convergence=log_convergence,
        )


class RootFinderBuilder:
    """Fluent front end over RootFinderConfig."""

    def __init__(self, method: RootFindingMethod | str):
        self._config = RootFinderConfig(method=method)

    @property
    def config(self) -> RootFinderConfig:
        return replace(self._config)

    def initial_guess(self, guess: float) -> RootFinderBuilder:
        """Set the initial guess (Newton-Raphson)."""
        self._config.initial_guess = guess
        return self

    def boundaries(self, x0: float, x1: float) -> RootFinderBuilder:
        """Set the bracket (Bisection, Secant, Brent)."""
        self._config.boundaries = (x0, x1)
        return self

    def tolerance(self, tol: float) -> RootFinderBuilder:
        self._config.tolerance = tol
        return self

    def max_iterations(self, max_iterations: int) -> RootFinderBuilder:
        self._config.max_iterations = max_iterations
        return self

    def log_convergence(self, log: bool = True) -> RootFinderBuilder:
        self._config.log_convergence = log
        return self

    def function(self, function: Function) -> RootFinderBuilder:
        self._config.function = function
        return self

    def derivative(self, derivative: Function) -> RootFinderBuilder:
        """Set f' (required for Newton-Raphson)."""
        self._config.derivative = derivative
        return self

    def build(self) -> RootFinder:
        return self._config.build()


def find_root(
    function: Function,
    method: RootFindingMethod | str = RootFindingMethod.BRENT,
    *,
    derivative: Function | None = None,
    initial_guess: float | None = None,
    boundaries: tuple[float, float] | None = None,
    tolerance: float = 1e-10,
    max_iterations: int = 100,
) -> RootResult:
    """Build a root finder and run one search.

    Args:
        function: Target function f.
        method: Method to use. Defaults to Brent.
        derivative: f', for Newton-Raphson.
        initial_guess: Starting point, for Newton-Raphson.
        boundaries: ``(x0, x1)``, for Bisection, Secant and Brent.
        tolerance: Convergence threshold.
        max_iterations: Iteration ceiling.

    Returns:
        RootResult of the search.

    Raises:
        ConfigurationError: If the parameters don't fit the method.
    """
    config = RootFinderConfig(
        method=method,
        function=function,
        derivative=derivative,
        initial_guess=initial_guess,
        boundaries=boundaries,
        tolerance=tolerance,
        max_iterations=max_iterations,
    )
    return config.build().find_root()
