"""Root-finding strategies driven by the IterationDriver.

Brent's method is not here: it switches between interpolation, secant and
bisection steps with cross-iteration state and runs its own loop (see
``rootfinder.brent``).
"""

from rootfinder.strategies.base import MACHINE_EPSILON, Strategy
from rootfinder.strategies.bisection import BisectionStrategy
from rootfinder.strategies.newton_raphson import NewtonRaphsonStrategy
from rootfinder.strategies.secant import SecantStrategy

__all__ = [
    "MACHINE_EPSILON",
    "BisectionStrategy",
    "NewtonRaphsonStrategy",
    "SecantStrategy",
    "Strategy",
]
