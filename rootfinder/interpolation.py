"""Piecewise spline interpolation over a value table.

Independent of the root-finding engine; an Interpolator is a plain callable,
so it can be handed to a root finder as the target function (for example to
find where tabulated data crosses a level).

Example::

    curve = Interpolator(
        [0.0, 1.0, 2.0, 3.0],
        [0.0, 1.0, 8.0, 27.0],
        InterpolationType.CUBIC,
        ExtrapolationStrategy.EXTEND_SPLINE,
    )
    curve(1.5)
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from enum import Enum


class InterpolationType(Enum):
    LINEAR = "linear"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"
    CONSTANT_BACKWARD = "constant_backward"
    CONSTANT_FORWARD = "constant_forward"


class ExtrapolationStrategy(Enum):
    """What to do with x outside the table.

    NONE raises, CONSTANT holds the nearest end value, EXTEND_SPLINE keeps
    using the polynomial of the first or last segment.
    """

    NONE = "none"
    CONSTANT = "constant"
    EXTEND_SPLINE = "extend_spline"


def _linear_coefficients(h, slopes):
    n = len(h)
    return list(slopes), [0.0] * n, [0.0] * n


def _quadratic_coefficients(h, slopes):
    """C1 quadratic spline whose last segment is a straight line."""
    n = len(h)
    b = [0.0] * n
    c = [0.0] * n
    b[-1] = slopes[-1]
    for j in range(n - 2, -1, -1):
        c[j] = (b[j + 1] - slopes[j]) / h[j]
        b[j] = 2.0 * slopes[j] - b[j + 1]
    return b, c, [0.0] * n


def _cubic_coefficients(h, slopes):
    """Natural cubic spline (zero second derivative at both ends)."""
    n = len(h)
    # c holds the quadratic coefficient at every knot, c[0] = c[n] = 0
    c = [0.0] * (n + 1)
    mu = [0.0] * (n + 1)
    z = [0.0] * (n + 1)
    for i in range(1, n):
        alpha = 3.0 * (slopes[i] - slopes[i - 1])
        pivot = 2.0 * (h[i - 1] + h[i]) - h[i - 1] * mu[i - 1]
        mu[i] = h[i] / pivot
        z[i] = (alpha - h[i - 1] * z[i - 1]) / pivot

    b = [0.0] * n
    d = [0.0] * n
    for j in range(n - 1, -1, -1):
        c[j] = z[j] - mu[j] * c[j + 1]
        b[j] = slopes[j] - h[j] * (c[j + 1] + 2.0 * c[j]) / 3.0
        d[j] = (c[j + 1] - c[j]) / (3.0 * h[j])
    return b, c[:n], d


_COEFFICIENTS = {
    InterpolationType.LINEAR: _linear_coefficients,
    InterpolationType.QUADRATIC: _quadratic_coefficients,
    InterpolationType.CUBIC: _cubic_coefficients,
}


class Interpolator:
    """Evaluates a piecewise polynomial through ``(x_values, y_values)``.

    Each segment ``j`` is ``y[j] + b[j]*dx + c[j]*dx**2 + d[j]*dx**3`` with
    ``dx = x - x_values[j]``. Coefficients are computed once at construction.

    Raises:
        ValueError: If the tables differ in length, hold fewer than two
            points, or ``x_values`` is not strictly increasing.
    """

    def __init__(
        self,
        x_values: Sequence[float],
        y_values: Sequence[float],
        interpolation_type: InterpolationType = InterpolationType.LINEAR,
        extrapolation: ExtrapolationStrategy = ExtrapolationStrategy.NONE,
    ):
        if len(x_values) != len(y_values) or len(x_values) < 2:
            raise ValueError(
                "x_values and y_values must have the same length and contain at least two points"
            )
        if any(x1 <= x0 for x0, x1 in zip(x_values, x_values[1:])):
            raise ValueError("x_values must be strictly increasing")

        self.x_values = [float(x) for x in x_values]
        self.y_values = [float(y) for y in y_values]
        self.interpolation_type = interpolation_type
        self.extrapolation = extrapolation

        self._b: list[float] = []
        self._c: list[float] = []
        self._d: list[float] = []
        if interpolation_type in _COEFFICIENTS:
            xs, ys = self.x_values, self.y_values
            h = [xs[i + 1] - xs[i] for i in range(len(xs) - 1)]
            slopes = [(ys[i + 1] - ys[i]) / h[i] for i in range(len(h))]
            self._b, self._c, self._d = _COEFFICIENTS[interpolation_type](h, slopes)

    def __call__(self, x: float) -> float:
        return self.interpolate(x)

    def interpolate(self, x: float) -> float:
        """Value of the curve at ``x``.

        Raises:
            ValueError: If ``x`` is outside the table and extrapolation is
                disabled.
        """
        if x < self.x_values[0] or x > self.x_values[-1]:
            return self._extrapolate(x)

        if self.interpolation_type is InterpolationType.CONSTANT_BACKWARD:
            return self.y_values[bisect_right(self.x_values, x) - 1]
        if self.interpolation_type is InterpolationType.CONSTANT_FORWARD:
            return self.y_values[bisect_left(self.x_values, x)]

        j = min(bisect_right(self.x_values, x) - 1, len(self.x_values) - 2)
        return self._segment(j, x)

    def _segment(self, j: int, x: float) -> float:
        dx = x - self.x_values[j]
        return self.y_values[j] + dx * (self._b[j] + dx * (self._c[j] + dx * self._d[j]))

    def _extrapolate(self, x: float) -> float:
        below = x < self.x_values[0]
        if self.extrapolation is ExtrapolationStrategy.NONE:
            raise ValueError(
                f"Value x = {x} is out of bounds [{self.x_values[0]}, {self.x_values[-1]}] "
                "and no extrapolation is enabled"
            )
        if self.extrapolation is ExtrapolationStrategy.CONSTANT or not self._b:
            # Step curves have no polynomial to extend
            return self.y_values[0] if below else self.y_values[-1]
        return self._segment(0 if below else len(self.x_values) - 2, x)
