"""
Shared pytest fixtures for rootfinder tests.
"""

import logging
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Returns the root test_output directory. Created once per test session.
    Files here persist after tests complete for easy access.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Returns a directory for the current test to write output files.
    Directory structure: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_name = request.node.name

    test_dir = test_output_root / module_name / test_name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


class CallCounter:
    """Wraps a function and counts how often it is called."""

    def __init__(self, function):
        self.function = function
        self.calls = 0

    def __call__(self, x):
        self.calls += 1
        return self.function(x)


@pytest.fixture
def counted():
    """Factory wrapping a function in a CallCounter."""
    return CallCounter


@pytest.fixture
def cubic():
    """f(x) = x^3 - x - 2 and its derivative; simple root near 1.5213797."""
    return (lambda x: x**3 - x - 2.0), (lambda x: 3.0 * x**2 - 1.0)


CUBIC_ROOT = 1.5213797068045676


@pytest.fixture
def cubic_root() -> float:
    return CUBIC_ROOT


@pytest.fixture(autouse=True)
def reset_rootfinder_logging():
    """Reset the rootfinder logger before and after each test.

    Leaves only a NullHandler and an inherited level so logging
    configuration from one test doesn't leak into another.
    """
    logger = logging.getLogger("rootfinder")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)
        for name in ("brent", "builder", "driver"):
            logging.getLogger(f"rootfinder.{name}").setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()
