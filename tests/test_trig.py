"""Test trigonometric wrappers in degrees and radians mode."""

import math

import numpy as np
import pytest

from drain.trig import TrigContext, acos, asin, atan, atan2, cos, cot, csc, sec, sin, tan


class TestDegreesMode:
    """Degrees is the default angle unit."""

    def test_forward_functions(self):
        assert math.isclose(sin(30), 0.5)
        assert math.isclose(cos(60), 0.5)
        assert math.isclose(tan(45), 1.0)

    def test_reciprocals(self):
        assert math.isclose(csc(30), 2.0)
        assert math.isclose(sec(60), 2.0)
        assert math.isclose(cot(45), 1.0)

    def test_inverse_functions_return_degrees(self):
        assert math.isclose(asin(0.5), 30.0)
        assert math.isclose(acos(0.5), 60.0)
        assert math.isclose(atan(1.0), 45.0)

    def test_atan2_is_quadrant_aware(self):
        assert math.isclose(atan2(1, 1), 45.0)
        assert math.isclose(atan2(1, -1), 135.0)
        assert math.isclose(atan2(-1, -1), -135.0)

    @pytest.mark.parametrize("theta", np.linspace(-89.0, 89.0, 37))
    def test_asin_inverts_sin(self, theta):
        assert math.isclose(asin(sin(theta)), theta, abs_tol=1e-9)

    def test_array_input(self):
        out = sin([0.0, 90.0, 180.0])
        assert np.allclose(out, [0.0, 1.0, 0.0])


class TestRadiansMode:
    def test_forward_functions_pass_radians_through(self):
        assert math.isclose(sin(math.pi / 2, degrees=False), 1.0)
        assert math.isclose(cos(math.pi, degrees=False), -1.0)

    def test_inverse_functions_return_radians(self):
        assert math.isclose(asin(1.0, degrees=False), math.pi / 2)
        assert math.isclose(atan2(1, 1, degrees=False), math.pi / 4)


class TestDegenerateValues:
    """Poles and out-of-domain inputs follow floating-point semantics."""

    def test_reciprocal_at_zero_is_infinite(self):
        assert csc(0) == math.inf
        assert cot(0) == math.inf

    def test_out_of_domain_inverse_is_nan(self):
        assert math.isnan(asin(2.0))
        assert math.isnan(acos(-1.5))


class TestTrigContext:
    def test_default_is_degrees(self):
        assert TrigContext().degrees is True

    def test_toggle_switches_only_that_instance(self):
        ctx = TrigContext()
        other = TrigContext()
        assert ctx.toggle() is ctx
        assert ctx.degrees is False
        assert other.degrees is True
        assert math.isclose(ctx.sin(math.pi / 2), 1.0)
        assert math.isclose(other.sin(90), 1.0)

    def test_toggle_twice_restores_mode(self):
        ctx = TrigContext(degrees=False)
        ctx.toggle().toggle()
        assert ctx.degrees is False
