"""Compare how the root finding methods converge on the same problems.

Runs Bisection, Secant, Newton-Raphson and Brent on a handful of classic
test functions, prints a summary table and saves convergence plots.

Run:
    python examples/convergence_comparison.py --output output/convergence
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

import rootfinder
from rootfinder import RootFinderBuilder, RootFindingMethod


@dataclass(frozen=True)
class Problem:
    name: str
    function: Callable[[float], float]
    derivative: Callable[[float], float]
    bracket: tuple[float, float]
    initial_guess: float


PROBLEMS = [
    Problem("cubic", lambda x: x**3 - x - 2, lambda x: 3 * x**2 - 1, (1.0, 2.0), 2.0),
    Problem("cos(x) - x", lambda x: math.cos(x) - x, lambda x: -math.sin(x) - 1, (0.0, 1.0), 1.0),
    Problem("exp(x) - 10", lambda x: math.exp(x) - 10, math.exp, (2.0, 3.0), 3.0),
    Problem("x^2 - 2", lambda x: x**2 - 2, lambda x: 2 * x, (0.0, 2.0), 2.0),
]


def build_finder(method: RootFindingMethod, problem: Problem, tolerance: float, max_iterations: int):
    builder = (
        RootFinderBuilder(method)
        .function(problem.function)
        .tolerance(tolerance)
        .max_iterations(max_iterations)
        .log_convergence(True)
    )
    if method is RootFindingMethod.NEWTON_RAPHSON:
        builder.derivative(problem.derivative).initial_guess(problem.initial_guess)
    else:
        builder.boundaries(*problem.bracket)
    return builder.build()


def run_comparison(tolerance: float = 1e-10, max_iterations: int = 200):
    """Run every method on every problem.

    Returns:
        (summary DataFrame, {(problem, method): ConvergenceLog})
    """
    rows = []
    logs = {}
    methods = [
        RootFindingMethod.BISECTION,
        RootFindingMethod.SECANT,
        RootFindingMethod.NEWTON_RAPHSON,
        RootFindingMethod.BRENT,
    ]
    for problem in PROBLEMS:
        for method in methods:
            finder = build_finder(method, problem, tolerance, max_iterations)
            result = finder.find_root()
            logs[(problem.name, method.value)] = finder.convergence_log
            rows.append(
                {
                    "problem": problem.name,
                    "method": result.method,
                    "status": result.status.value,
                    "root": result.root,
                    "iterations": result.iterations,
                    "function_calls": result.function_calls,
                }
            )
    return pd.DataFrame(rows), logs


def visualize_results(logs, output_dir: Path) -> None:
    """Save one convergence plot per problem."""
    import matplotlib.pyplot as plt

    from rootfinder.plotting import plot_convergence

    output_dir.mkdir(parents=True, exist_ok=True)

    problems = sorted({name for name, _ in logs})
    fig, axes = plt.subplots(2, 2, figsize=(12, 9))
    for ax, name in zip(axes.flat, problems):
        for (problem, method), log in logs.items():
            if problem == name:
                plot_convergence(log, ax=ax, label=method)
        ax.set_title(name)

    fig.tight_layout()
    fig.savefig(output_dir / "convergence_comparison.png", dpi=150)
    plt.close(fig)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Root finding convergence comparison")
    parser.add_argument("--tolerance", type=float, default=1e-10, help="Convergence tolerance")
    parser.add_argument("--max-iterations", type=int, default=200, help="Iteration budget")
    parser.add_argument("--output", type=str, default="output/convergence", help="Output directory")
    parser.add_argument("--no-viz", action="store_true", help="Skip visualization generation")
    parser.add_argument("--verbose", action="store_true", help="Log every iteration")
    args = parser.parse_args()

    if args.verbose:
        rootfinder.enable_console_logging(level="DEBUG")

    summary, logs = run_comparison(tolerance=args.tolerance, max_iterations=args.max_iterations)
    print(summary.to_string(index=False))

    if not args.no_viz:
        output_dir = Path(args.output)
        visualize_results(logs, output_dir)
        print(f"\nVisualizations saved to: {output_dir.absolute()}")
