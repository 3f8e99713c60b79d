"""Unit tests for spline interpolation."""

import pytest

from rootfinder.interpolation import ExtrapolationStrategy, InterpolationType, Interpolator

EPSILON = 1e-4


class TestLinear:
    """Tests for piecewise linear interpolation."""

    def test_within_range(self):
        interp = Interpolator([0.0, 1.0, 2.0, 3.0], [0.0, 2.0, 4.0, 6.0], InterpolationType.LINEAR)

        assert interp(0.0) == 0.0
        assert interp(1.0) == 2.0
        assert interp(2.0) == 4.0
        assert interp(3.0) == 6.0
        assert interp(0.5) == 1.0
        assert interp(1.5) == 3.0
        assert interp(2.5) == 5.0

    def test_out_of_bounds_without_extrapolation(self):
        interp = Interpolator([0.0, 1.0, 2.0], [0.0, 1.0, 4.0], InterpolationType.LINEAR)
        with pytest.raises(ValueError, match="out of bounds"):
            interp.interpolate(-1.0)

    def test_constant_extrapolation(self):
        interp = Interpolator(
            [0.0, 2.0, 4.0], [0.0, 4.0, 8.0], InterpolationType.LINEAR, ExtrapolationStrategy.CONSTANT
        )
        assert interp(-1.0) == 0.0
        assert interp(5.0) == 8.0

    def test_extend_spline_extrapolation(self):
        interp = Interpolator(
            [0.0, 1.0, 2.0, 3.0],
            [0.0, 2.0, 4.0, 6.0],
            InterpolationType.LINEAR,
            ExtrapolationStrategy.EXTEND_SPLINE,
        )
        assert interp(-1.0) == -2.0
        assert interp(4.0) == 8.0


class TestQuadratic:
    """Tests for the C1 quadratic spline."""

    def test_hits_knots(self):
        interp = Interpolator([0.0, 1.0, 2.0], [0.0, 1.0, 4.0], InterpolationType.QUADRATIC)
        assert interp(0.0) == 0.0
        assert interp(1.0) == 1.0
        assert interp(2.0) == 4.0

    def test_last_segment_is_linear(self):
        interp = Interpolator([0.0, 1.0, 2.0], [0.0, 1.0, 4.0], InterpolationType.QUADRATIC)
        assert abs(interp(1.5) - 2.5) < EPSILON

    def test_non_uniform(self):
        interp = Interpolator([0.0, 1.0, 3.0], [1.0, 3.0, 19.0], InterpolationType.QUADRATIC)
        assert interp(0.0) == 1.0
        assert interp(1.0) == 3.0
        assert interp(3.0) == 19.0
        assert abs(interp(2.0) - 11.0) < EPSILON

    def test_smooth_at_interior_knots(self):
        xs = [0.0, 1.0, 2.0, 3.0, 4.0]
        interp = Interpolator(xs, [0.0, 1.0, 0.0, 2.0, 1.0], InterpolationType.QUADRATIC)
        h = 1e-6
        for knot in xs[1:-1]:
            left = (interp(knot) - interp(knot - h)) / h
            right = (interp(knot + h) - interp(knot)) / h
            assert abs(left - right) < 1e-3

    def test_extrapolation_constant(self):
        interp = Interpolator(
            [0.0, 1.0, 2.0], [0.0, 1.0, 4.0], InterpolationType.QUADRATIC, ExtrapolationStrategy.CONSTANT
        )
        assert interp(-1.0) == 0.0
        assert interp(3.0) == 4.0

    def test_extrapolation_extends_last_segment(self):
        interp = Interpolator(
            [0.0, 1.0, 2.0],
            [0.0, 1.0, 4.0],
            InterpolationType.QUADRATIC,
            ExtrapolationStrategy.EXTEND_SPLINE,
        )
        assert abs(interp(3.0) - 7.0) < EPSILON


class TestCubic:
    """Tests for the natural cubic spline."""

    def test_cubic_data(self):
        xs = [0.0, 1.0, 2.0, 3.0, 4.0]
        interp = Interpolator(xs, [x**3 - x**2 + 2 * x - 1 for x in xs], InterpolationType.CUBIC)

        assert abs(interp(2.5) - 13.09821) < EPSILON
        assert abs(interp(1.5) - 3.2232) < EPSILON

    def test_hits_knots(self):
        xs = [0.0, 1.0, 2.0, 3.0, 4.0]
        interp = Interpolator(xs, [x**3 for x in xs], InterpolationType.CUBIC)

        assert abs(interp(1.0) - 1.0) < EPSILON
        assert abs(interp(3.0) - 27.0) < EPSILON

    def test_irregular_data(self):
        interp = Interpolator(
            [0.0, 1.0, 2.5, 4.0, 5.5], [1.0, 2.5, 3.5, 1.0, 0.5], InterpolationType.CUBIC
        )
        assert 1.0 < interp(3.0) < 3.5
        assert 2.5 < interp(1.5) < 3.5

    def test_extend_spline(self):
        interp = Interpolator(
            [0.0, 1.0, 2.0, 3.0],
            [0.0, 1.0, 8.0, 27.0],
            InterpolationType.CUBIC,
            ExtrapolationStrategy.EXTEND_SPLINE,
        )
        assert interp(-1.0) < 0.0
        assert interp(4.0) > 27.0

    def test_no_extrapolation(self):
        interp = Interpolator([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 8.0, 27.0], InterpolationType.CUBIC)
        with pytest.raises(ValueError):
            interp(-1.0)

    def test_two_points(self):
        interp = Interpolator(
            [1.0, 2.0], [1.0, 8.0], InterpolationType.CUBIC, ExtrapolationStrategy.EXTEND_SPLINE
        )
        assert abs(interp(1.5) - 4.5) < EPSILON
        assert interp(0.5) < 1.0


class TestConstant:
    """Tests for step interpolation."""

    def test_backward(self):
        interp = Interpolator([0.0, 1.0, 2.0], [10.0, 20.0, 30.0], InterpolationType.CONSTANT_BACKWARD)
        assert interp(0.0) == 10.0
        assert interp(0.5) == 10.0
        assert interp(1.0) == 20.0
        assert interp(1.99) == 20.0
        assert interp(2.0) == 30.0

    def test_forward(self):
        interp = Interpolator([0.0, 1.0, 2.0], [10.0, 20.0, 30.0], InterpolationType.CONSTANT_FORWARD)
        assert interp(0.0) == 10.0
        assert interp(0.5) == 20.0
        assert interp(1.0) == 20.0
        assert interp(1.5) == 30.0

    def test_extend_spline_holds_end_values(self):
        interp = Interpolator(
            [0.0, 1.0],
            [10.0, 20.0],
            InterpolationType.CONSTANT_FORWARD,
            ExtrapolationStrategy.EXTEND_SPLINE,
        )
        assert interp(-5.0) == 10.0
        assert interp(5.0) == 20.0


class TestValidation:
    """Construction rejects malformed tables."""

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="same length"):
            Interpolator([0.0, 1.0], [0.0])

    def test_single_point(self):
        with pytest.raises(ValueError, match="at least two points"):
            Interpolator([0.0], [0.0])

    def test_not_increasing(self):
        with pytest.raises(ValueError, match="strictly increasing"):
            Interpolator([0.0, 2.0, 1.0], [0.0, 1.0, 2.0])
