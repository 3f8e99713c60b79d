"""Unit tests for Brent's root finding method."""

import math

import pytest

from rootfinder.brent import BrentRootFinder
from rootfinder.exceptions import InvalidBracketError, MaxIterationsError
from rootfinder.results import RootResult, RootStatus


def brent(f, a, b, tolerance=1e-12, max_iterations=100, log_convergence=False):
    return BrentRootFinder(
        f, a, b, tolerance=tolerance, max_iterations=max_iterations, log_convergence=log_convergence
    ).find_root()


class TestBrent:
    """Tests for BrentRootFinder.find_root."""

    def test_linear_root(self):
        """Find root of f(x) = x - 2 at x = 2."""
        result = brent(lambda x: x - 2, 0, 5)
        assert result.converged
        assert abs(result.root - 2.0) < 1e-10

    def test_quadratic_root_positive(self):
        """Find root of f(x) = x^2 - 4 at x = 2."""
        result = brent(lambda x: x**2 - 4, 1, 3)
        assert result.converged
        assert abs(result.root - 2.0) < 1e-10

    def test_quadratic_root_negative(self):
        """Find root of f(x) = x^2 - 4 at x = -2."""
        result = brent(lambda x: x**2 - 4, -3, -1)
        assert result.converged
        assert abs(result.root + 2.0) < 1e-10

    def test_cubic_root(self, cubic, cubic_root):
        f, _ = cubic
        result = brent(f, 1, 2, tolerance=1e-6)
        assert result.converged
        assert abs(result.root - cubic_root) < 1e-6

    def test_transcendental_root(self):
        """Find root of f(x) = cos(x) - x near x ≈ 0.739."""
        result = brent(lambda x: math.cos(x) - x, 0, 1)
        assert result.converged
        assert abs(result.root - 0.7390851332151607) < 1e-10

    def test_exponential_root(self):
        """Find root of f(x) = e^x - 10 at x = ln(10)."""
        result = brent(lambda x: math.exp(x) - 10, 2, 3)
        assert result.converged
        assert abs(result.root - math.log(10)) < 1e-10

    def test_log_root(self):
        """Find root of f(x) = ln(x) - 1 at x = e."""
        result = brent(lambda x: math.log(x) - 1, 2, 3)
        assert result.converged
        assert abs(result.root - math.e) < 1e-10

    def test_reversed_bracket(self):
        result = brent(lambda x: x - 2, 5, 0)
        assert result.converged
        assert abs(result.root - 2.0) < 1e-10

    def test_near_lower_boundary(self):
        result = brent(lambda x: x - 0.001, 0, 1)
        assert result.converged
        assert abs(result.root - 0.001) < 1e-10

    def test_near_upper_boundary(self):
        result = brent(lambda x: x - 0.999, 0, 1)
        assert result.converged
        assert abs(result.root - 0.999) < 1e-10

    def test_root_at_endpoint(self):
        result = brent(lambda x: x - 1.0, 1.0, 3.0)
        assert result.converged
        assert result.root == 1.0

    def test_root_at_zero(self):
        result = brent(lambda x: x, -1, 1)
        assert result.converged
        assert abs(result.root) < 1e-12

    def test_loose_tolerance_still_within_tolerance(self):
        result = brent(lambda x: math.cos(x) - x, 0, 1, tolerance=1e-3)
        assert result.converged
        assert abs(result.root - 0.7390851332151607) < 1e-3

    def test_result_fields(self):
        result = brent(lambda x: x - 1, 0, 2)
        assert isinstance(result, RootResult)
        assert result.method == "brent"
        assert result.status is RootStatus.CONVERGED
        assert result.message == ""

    def test_function_call_count(self, counted):
        f = counted(lambda x: x - 1)
        result = brent(f, 0, 2)
        assert result.function_calls == f.calls
        assert 2 <= result.function_calls < 50

    def test_iteration_count(self):
        result = brent(lambda x: x**3 - x - 2, 1, 2)
        assert result.iterations < 20


class TestBrentFailures:
    """Tests for invalid brackets and exhausted budgets."""

    def test_same_sign_is_invalid_bracket(self, counted):
        """No iteration is attempted when f(a) and f(b) share a sign."""
        f = counted(lambda x: x**2 + 1)
        result = brent(f, -1, 1)

        assert result.status is RootStatus.INVALID_BRACKET
        assert result.root is None
        assert result.iterations == 0
        assert f.calls == 2
        assert "opposite signs" in result.message

    def test_both_positive_is_invalid_bracket(self):
        result = brent(lambda x: x**2, 1, 2)
        assert result.status is RootStatus.INVALID_BRACKET

    def test_invalid_bracket_raise_for_status(self):
        result = brent(lambda x: x**2 + 1, -1, 1)
        with pytest.raises(InvalidBracketError, match="opposite signs"):
            result.raise_for_status()

    def test_budget_exhausted(self):
        result = brent(lambda x: math.cos(x) - x, 0, 1, max_iterations=1)

        assert result.status is RootStatus.MAX_ITERATIONS
        assert result.root is None
        assert result.iterations == 1
        assert result.function_calls == 3
        with pytest.raises(MaxIterationsError, match="failed to converge"):
            result.raise_for_status()


class TestBrentConvergenceLog:
    """Tests for Brent's own convergence log."""

    def test_log_entries(self):
        finder = BrentRootFinder(
            lambda x: math.cos(x) - x, 0.0, 1.0, tolerance=1e-10, log_convergence=True
        )
        result = finder.find_root()
        entries = finder.convergence_log.entries

        assert entries[0].x == (0.0, 1.0)
        assert len(entries) == result.function_calls - 1
        assert [e.iteration for e in entries] == list(range(1, len(entries) + 1))
        assert all(len(e.x) == len(e.fx) for e in entries)

    def test_log_disabled_by_default(self):
        finder = BrentRootFinder(lambda x: x - 1, 0.0, 2.0, tolerance=1e-10)
        finder.find_root()
        assert len(finder.convergence_log) == 0

    def test_log_reset_between_searches(self):
        finder = BrentRootFinder(lambda x: x - 1, 0.0, 2.0, tolerance=1e-10, log_convergence=True)
        first = finder.find_root()
        size = len(finder.convergence_log)
        second = finder.find_root()

        assert first == second
        assert len(finder.convergence_log) == size

    def test_invalid_bracket_logs_endpoints(self):
        finder = BrentRootFinder(lambda x: x**2 + 1, -1.0, 1.0, tolerance=1e-10, log_convergence=True)
        finder.find_root()
        assert finder.convergence_log.to_records() == [
            {"iteration": 1, "x": [-1.0, 1.0], "fx": [2.0, 2.0]}
        ]
