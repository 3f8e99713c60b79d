"""Outcome types shared by every root finder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rootfinder.exceptions import (
    InvalidBracketError,
    MaxIterationsError,
    NumericalStallError,
    RootFindingError,
)


class RootStatus(Enum):
    """How a root search ended."""

    CONVERGED = "converged"
    INVALID_BRACKET = "invalid_bracket"
    NUMERICAL_STALL = "numerical_stall"
    MAX_ITERATIONS = "max_iterations"


_STATUS_ERRORS: dict[RootStatus, type[RootFindingError]] = {
    RootStatus.INVALID_BRACKET: InvalidBracketError,
    RootStatus.NUMERICAL_STALL: NumericalStallError,
    RootStatus.MAX_ITERATIONS: MaxIterationsError,
}


@dataclass(frozen=True)
class StopSignal:
    """A strategy's decision to end the search.

    Attributes:
        status: CONVERGED, or the failure that was detected.
        root: The accepted root when converged, otherwise None.
        message: Human readable reason for a failure.
    """

    status: RootStatus
    root: float | None = None
    message: str = ""

    @classmethod
    def converged(cls, root: float) -> StopSignal:
        return cls(RootStatus.CONVERGED, root=root)

    @classmethod
    def failed(cls, status: RootStatus, message: str) -> StopSignal:
        return cls(status, message=message)


@dataclass(frozen=True)
class RootResult:
    """Result of root finding.

    Attributes:
        root: The found root value, or None if the search failed.
        status: How the search ended.
        iterations: Number of iterations used.
        function_calls: Number of evaluations of the target function.
        method: Name of the method that produced the result.
        message: Reason for a failure, empty on convergence.
    """

    root: float | None
    status: RootStatus
    iterations: int
    function_calls: int
    method: str
    message: str = ""

    @property
    def converged(self) -> bool:
        return self.status is RootStatus.CONVERGED

    def raise_for_status(self) -> None:
        """Raise the matching RootFindingError if the search did not converge.

        Raises:
            InvalidBracketError: The bracket did not enclose a sign change.
            NumericalStallError: A denominator fell below machine epsilon.
            MaxIterationsError: The iteration budget was exhausted.
        """
        if self.converged:
            return
        error = _STATUS_ERRORS[self.status]
        raise error(f"{self.method}: {self.message}")
