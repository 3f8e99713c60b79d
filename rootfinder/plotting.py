"""Matplotlib views of a convergence log.

Imported explicitly (``from rootfinder.plotting import plot_convergence``)
so that ``import rootfinder`` doesn't pull in pyplot.
"""

from __future__ import annotations

from collections.abc import Callable

import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from rootfinder.convergence_log import ConvergenceLog

# Floor for |f(x)| on the log axis; exact zeros would otherwise vanish.
_RESIDUAL_FLOOR = 1e-300


def plot_convergence(log: ConvergenceLog, ax: Axes | None = None, label: str | None = None) -> Axes:
    """Plot the smallest residual ``|f(x)|`` of each iteration on a log scale.

    Args:
        log: A log filled by a search run with ``log_convergence`` enabled.
        ax: Axes to draw on. A new figure is created when omitted.
        label: Legend label for the line.

    Returns:
        The Axes drawn on.
    """
    if ax is None:
        _, ax = plt.subplots()

    iterations = [entry.iteration for entry in log]
    residuals = [max(min(abs(v) for v in entry.fx), _RESIDUAL_FLOOR) for entry in log]

    ax.semilogy(iterations, residuals, marker="o", label=label)
    ax.set_xlabel("iteration")
    ax.set_ylabel("|f(x)|")
    ax.grid(True, which="both", alpha=0.3)
    if label is not None:
        ax.legend()
    return ax


def plot_search(
    log: ConvergenceLog,
    function: Callable[[float], float],
    ax: Axes | None = None,
    samples: int = 200,
) -> Axes:
    """Draw ``function`` over the explored range with the evaluated points on top.

    Points are coloured by iteration so the path of the search is visible.
    """
    if ax is None:
        _, ax = plt.subplots()

    df = log.to_dataframe()
    if df.empty:
        return ax

    lo, hi = df["x"].min(), df["x"].max()
    if lo == hi:
        lo, hi = lo - 1.0, hi + 1.0
    step = (hi - lo) / (samples - 1)
    xs = [lo + i * step for i in range(samples)]

    ax.plot(xs, [function(x) for x in xs], color="0.5", linewidth=1)
    ax.axhline(0.0, color="k", linewidth=0.5)
    points = ax.scatter(df["x"], df["fx"], c=df["iteration"], cmap="viridis", zorder=3)
    ax.figure.colorbar(points, ax=ax, label="iteration")
    ax.set_xlabel("x")
    ax.set_ylabel("f(x)")
    return ax
