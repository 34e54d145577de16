import math

import pytest

from drain.algebra import (
    cbrt,
    create_list,
    discriminant,
    factorial,
    inclusive_range,
    ln,
    log,
    ncr,
    npr,
    root,
    solve_quadratic,
)


class TestCombinatorics:
    def test_factorial(self):
        assert factorial(0) == 1
        assert factorial(1) == 1
        assert factorial(5) == 120
        assert factorial(20) == 2432902008176640000

    def test_factorial_rejects_invalid_input(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            factorial(-1)
        with pytest.raises(ValueError, match="whole number"):
            factorial(2.5)
        with pytest.raises(ValueError, match="whole number"):
            factorial("5")
        with pytest.raises(ValueError, match="whole number"):
            ncr(5, "2")

    def test_permutations_and_combinations(self):
        assert ncr(5, 2) == 10
        assert npr(5, 2) == 20
        assert ncr(6, 0) == 1
        assert ncr(6, 6) == 1

    def test_r_greater_than_n_raises(self):
        with pytest.raises(ValueError, match="cannot exceed"):
            ncr(2, 5)


class TestQuadratic:
    def test_two_roots(self):
        assert set(solve_quadratic(1, 0, -4)) == {2.0, -2.0}

    def test_repeated_root(self):
        assert solve_quadratic(1, 2, 1) == [-1.0]

    def test_no_real_roots(self):
        assert solve_quadratic(1, 0, 1) == []

    def test_second_root_divides_by_two_a(self):
        # 2x^2 - 10x + 12 = 2(x - 2)(x - 3)
        roots = solve_quadratic(2, -10, 12)
        assert sorted(roots) == [2.0, 3.0]
        for r in roots:
            assert math.isclose(2 * r**2 - 10 * r + 12, 0.0, abs_tol=1e-12)

    def test_discriminant(self):
        assert discriminant(1, 0, -4) == 16

    def test_zero_leading_coefficient_raises(self):
        with pytest.raises(ValueError):
            solve_quadratic(0, 2, 1)


def test_logs_and_roots():
    assert math.isclose(log(8, 2), 3.0)
    assert math.isclose(log(math.e), 1.0)
    assert math.isclose(ln(math.e**2), 2.0)
    assert math.isclose(root(27, 3), 3.0)


def test_logs_and_roots_propagate_degenerate_values():
    assert log(0) == -math.inf
    assert log(0, 10) == -math.inf
    assert math.isnan(ln(-1))
    assert math.isnan(root(-8, 3))
    assert math.isclose(cbrt(-8), -2.0)
    assert math.isclose(cbrt(27), 3.0)


def test_list_builders():
    assert inclusive_range(1, 4) == [1, 2, 3, 4]
    assert inclusive_range(3, 1) == [3, 2, 1]
    assert inclusive_range(2, 2) == [2]
    assert create_list(3, lambda i: i * i) == [0, 1, 4]
