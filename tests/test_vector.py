import math

import numpy as np
import pytest

from drain.vector import (
    add,
    col,
    div,
    dot,
    identity_matrix,
    length,
    length_squared,
    mmul,
    mul,
    sub,
    transpose,
    zip_with,
)


def test_elementwise_operations():
    assert np.array_equal(add([1, 2], [3, 4]), [4, 6])
    assert np.array_equal(sub([1, 2], [3, 4]), [-2, -2])
    assert np.array_equal(mul([1, 2], [3, 4]), [3, 8])
    assert np.allclose(div([1, 2], [4, 4]), [0.25, 0.5])


def test_div_by_zero_propagates_infinity():
    out = div([1.0, 0.0], [0.0, 0.0])
    assert out[0] == math.inf
    assert math.isnan(out[1])


@pytest.mark.parametrize("op", [add, sub, mul, div, dot])
def test_length_mismatch_raises(op):
    with pytest.raises(ValueError, match="Length mismatch: 2 != 3"):
        op([1, 2], [1, 2, 3])


def test_zip_with_applies_function_pairwise():
    assert zip_with([1, 2], ["a", "b"], lambda n, s: s * n) == ["a", "bb"]
    with pytest.raises(ValueError):
        zip_with([1], [], max)


def test_dot_and_length():
    assert dot([1, 2, 3], [4, 5, 6]) == 32.0
    assert length_squared([3, 4]) == 25.0
    assert length([3, 4]) == 5.0


def test_col_and_transpose():
    m = [[1, 2, 3], [4, 5, 6]]
    assert col(m, 1) == [2, 5]
    assert np.array_equal(transpose(m), [[1, 4], [2, 5], [3, 6]])


def test_identity_is_left_neutral():
    m = [[2.0, -1.0, 0.5], [3.0, 4.0, 1.0], [0.0, 7.0, -2.0]]
    assert np.array_equal(mmul(identity_matrix(3), m), np.array(m))
    assert np.array_equal(mmul(m, identity_matrix(3)), np.array(m))


def test_mmul_uses_columns_of_right_operand():
    a = [[1, 2, 3], [4, 5, 6]]
    b = [[7, 8], [9, 10], [11, 12]]
    out = mmul(a, b)
    assert out.shape == (2, 2)
    assert np.array_equal(out, [[58, 64], [139, 154]])
    assert np.array_equal(out, np.array(a) @ np.array(b))


def test_mmul_dimension_mismatch_raises():
    with pytest.raises(ValueError, match="2 columns"):
        mmul([[1, 2]], [[1, 2], [3, 4], [5, 6]])


def test_identity_matrix_rejects_negative_size():
    with pytest.raises(ValueError):
        identity_matrix(-1)
