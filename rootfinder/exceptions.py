"""Exception classes for root finding."""


class RootFindingError(Exception):
    """Base exception for root finding errors."""

    pass


class ConfigurationError(RootFindingError, ValueError):
    """Raised when a root finder cannot be built from the given parameters."""

    pass


class InvalidBracketError(RootFindingError):
    """Raised when the bracket endpoints don't have opposite-signed values."""

    pass


class NumericalStallError(RootFindingError):
    """Raised when a derivative or difference of values falls below machine epsilon."""

    pass


class MaxIterationsError(RootFindingError):
    """Raised when the iteration budget runs out before convergence."""

    pass
