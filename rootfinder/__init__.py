"""Scalar root finding with interchangeable strategies.

Bisection, Secant and Newton-Raphson run through a shared iteration driver;
Brent's method runs its own loop. Every finder can record a convergence log
of the points it evaluated.
"""

import logging

from rootfinder.brent import BrentRootFinder
from rootfinder.builder import RootFinderBuilder, RootFinderConfig, RootFindingMethod, find_root
from rootfinder.convergence_log import ConvergenceLog, IterationEntry
from rootfinder.driver import IterationDriver, RootFinder
from rootfinder.exceptions import (
    ConfigurationError,
    InvalidBracketError,
    MaxIterationsError,
    NumericalStallError,
    RootFindingError,
)
from rootfinder.interpolation import ExtrapolationStrategy, InterpolationType, Interpolator
from rootfinder.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from rootfinder.results import RootResult, RootStatus
from rootfinder.strategies import BisectionStrategy, NewtonRaphsonStrategy, SecantStrategy

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "BisectionStrategy",
    "BrentRootFinder",
    "ConfigurationError",
    "ConvergenceLog",
    "ExtrapolationStrategy",
    "InterpolationType",
    "Interpolator",
    "InvalidBracketError",
    "IterationDriver",
    "IterationEntry",
    "MaxIterationsError",
    "NewtonRaphsonStrategy",
    "NumericalStallError",
    "RootFinder",
    "RootFinderBuilder",
    "RootFinderConfig",
    "RootFindingError",
    "RootFindingMethod",
    "RootResult",
    "RootStatus",
    "SecantStrategy",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "find_root",
    "set_level",
    "set_module_level",
]
