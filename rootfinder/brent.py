"""Brent's method.

Combines bisection, secant, and inverse quadratic interpolation. Guaranteed
to converge if f(x0) and f(x1) have opposite signs.

Unlike the other methods this one runs its own loop instead of going through
the IterationDriver: choosing between an interpolation step and a bisection
step depends on the last two step sizes and on a contrapoint that outlives
any single iteration.

Naming follows Brent's original description:

- ``b`` is the current best estimate (smallest ``|f|``),
- ``c`` is the contrapoint, ``f(b)`` and ``f(c)`` have opposite signs,
- ``a`` is the previous value of ``b``,
- ``d`` is the last step and ``e`` the step before it.
"""

from __future__ import annotations

import logging

from rootfinder.convergence_log import ConvergenceLog
from rootfinder.driver import Function
from rootfinder.exceptions import ConfigurationError
from rootfinder.results import RootResult, RootStatus
from rootfinder.strategies.base import MACHINE_EPSILON

logger = logging.getLogger(__name__)


class BrentRootFinder:
    """Find a root of ``function`` in the bracket ``[x0, x1]``.

    Args:
        function: Continuous function to find root of.
        x0: One bracket endpoint.
        x1: The other bracket endpoint.
        tolerance: Absolute tolerance on the root and on ``|f(root)|``.
        max_iterations: Maximum number of iterations.
        log_convergence: Record every evaluation in ``convergence_log``.
    """

    method = "brent"

    def __init__(
        self,
        function: Function,
        x0: float,
        x1: float,
        tolerance: float,
        max_iterations: int = 100,
        log_convergence: bool = False,
    ):
        if max_iterations < 1:
            raise ConfigurationError(f"max_iterations must be >= 1, got {max_iterations}")
        self.function = function
        self.x0 = x0
        self.x1 = x1
        self.tolerance = tolerance
        self.max_iterations = max_iterations
        self.log_convergence = log_convergence
        self._convergence_log = ConvergenceLog()

    @property
    def convergence_log(self) -> ConvergenceLog:
        return self._convergence_log

    def find_root(self) -> RootResult:
        """Run Brent's method on the configured bracket.

        Returns:
            RootResult with status CONVERGED, INVALID_BRACKET when f(x0) and
            f(x1) share a sign, or MAX_ITERATIONS.
        """
        self._convergence_log.reset()
        func_calls = 0

        def eval_f(x: float) -> float:
            nonlocal func_calls
            func_calls += 1
            return self.function(x)

        a, b = self.x0, self.x1
        fa = eval_f(a)
        fb = eval_f(b)
        entry = 1
        self._record(entry, (a, b), (fa, fb))

        if fa * fb > 0:
            message = f"f(x0) and f(x1) must have opposite signs, got f({a})={fa}, f({b})={fb}"
            logger.warning("brent: %s", message)
            return self._result(None, RootStatus.INVALID_BRACKET, 0, func_calls, message)

        c, fc = a, fa
        d = e = b - a

        for iteration in range(1, self.max_iterations + 1):
            # Ensure |f(b)| <= |f(c)| so b is the best estimate
            if abs(fc) < abs(fb):
                a, b, c = b, c, b
                fa, fb, fc = fb, fc, fb

            tol = 2.0 * MACHINE_EPSILON * abs(b) + 0.5 * self.tolerance
            m = (c - b) / 2.0

            if abs(m) <= tol or abs(fb) < self.tolerance:
                return self._result(b, RootStatus.CONVERGED, iteration, func_calls)

            if abs(e) >= tol and abs(fa) > abs(fb):
                s = fb / fa
                if fa == fc or fb == fc:
                    # Secant through a and b
                    p = 2.0 * m * s
                    q = 1.0 - s
                else:
                    # Inverse quadratic interpolation through a, b and c
                    q = fa / fc
                    r = fb / fc
                    p = s * (2.0 * m * q * (q - r) - (b - a) * (r - 1.0))
                    q = (q - 1.0) * (r - 1.0) * (s - 1.0)

                if p > 0:
                    q = -q
                else:
                    p = -p

                # Accept only steps landing between b and (3c + b) / 4 that
                # shrink faster than half the step before last.
                if 2.0 * p < min(3.0 * m * q - abs(tol * q), abs(e * q)):
                    e = d
                    d = p / q
                else:
                    d = e = m
            else:
                d = e = m

            a, fa = b, fb
            if abs(d) > tol:
                b = b + d
            elif m > 0:
                b = b + tol
            else:
                b = b - tol

            fb = eval_f(b)
            entry += 1
            self._record(entry, (b,), (fb,))
            logger.debug("brent iteration %d: b=%r f(b)=%r c=%r", iteration, b, fb, c)

            # Keep the sign change between b and c
            if (fb > 0) == (fc > 0):
                c, fc = a, fa
                d = e = b - a

        message = f"failed to converge within {self.max_iterations} iterations"
        logger.warning("brent: %s", message)
        return self._result(
            None, RootStatus.MAX_ITERATIONS, self.max_iterations, func_calls, message
        )

    def _record(self, iteration: int, x: tuple[float, ...], fx: tuple[float, ...]) -> None:
        if self.log_convergence:
            self._convergence_log.add_entry(iteration, x, fx)

    def _result(
        self,
        root: float | None,
        status: RootStatus,
        iterations: int,
        function_calls: int,
        message: str = "",
    ) -> RootResult:
        if status is RootStatus.CONVERGED:
            logger.info("brent converged to %r after %d iterations", root, iterations)
        return RootResult(
            root=root,
            status=status,
            iterations=iterations,
            function_calls=function_calls,
            method=self.method,
            message=message,
        )
