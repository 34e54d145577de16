"""Elementwise vector helpers and row-major matrix multiplication.

Vectors are any ordered sequence of numbers. Matrices are sequences of row
vectors. Paired operations never truncate or pad: operands of different
length raise ``ValueError``.
"""

from __future__ import annotations

import math
from typing import Callable, List, Sequence

import numpy as np


def check_same_length(a: Sequence, b: Sequence) -> None:
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} != {len(b)}")


def zip_with(a: Sequence, b: Sequence, func: Callable) -> List:
    """Combine two equal-length sequences pairwise with ``func``.

    Raises:
        ValueError: If ``a`` and ``b`` differ in length.
    """
    check_same_length(a, b)
    return [func(x, y) for x, y in zip(a, b)]


def _pair(a: Sequence[float], b: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
    check_same_length(a, b)
    return np.asarray(a, dtype=float), np.asarray(b, dtype=float)


def add(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    x, y = _pair(a, b)
    return x + y


def sub(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    x, y = _pair(a, b)
    return x - y


def mul(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    x, y = _pair(a, b)
    return x * y


def div(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    """Elementwise ``a / b``; zero divisors yield ``inf`` or ``nan``."""
    x, y = _pair(a, b)
    with np.errstate(divide="ignore", invalid="ignore"):
        return x / y


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    x, y = _pair(a, b)
    return float(np.sum(x * y))


def length_squared(v: Sequence[float]) -> float:
    return dot(v, v)


def length(v: Sequence[float]) -> float:
    """Euclidean norm of ``v``."""
    return math.sqrt(length_squared(v))


def col(matrix: Sequence[Sequence[float]], index: int) -> List[float]:
    """Extract column ``index`` of a row-major matrix."""
    return [row[index] for row in matrix]


def transpose(matrix: Sequence[Sequence[float]]) -> np.ndarray:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    return np.array([col(matrix, j) for j in range(cols)], dtype=float)


def identity_matrix(n: int) -> np.ndarray:
    """Return the ``n`` x ``n`` identity matrix.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Matrix size must be non-negative, got {n}")
    return np.eye(int(n), dtype=float)


def mmul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> np.ndarray:
    """Multiply row-major matrices ``a`` (m x k) and ``b`` (k x n).

    Entry ``(i, j)`` of the product is the dot product of row ``i`` of ``a``
    with column ``j`` of ``b``.

    Args:
        a: Left operand as a sequence of ``m`` rows of length ``k``.
        b: Right operand as a sequence of ``k`` rows of length ``n``.

    Returns:
        numpy.ndarray: The ``m`` x ``n`` product.

    Raises:
        ValueError: If the column count of ``a`` differs from the row count
            of ``b``, or a row has the wrong length.
    """
    if len(a) == 0:
        return np.zeros((0, len(b[0]) if len(b) else 0), dtype=float)
    inner = len(a[0])
    if inner != len(b):
        raise ValueError(
            f"Cannot multiply: left operand has {inner} columns, "
            f"right operand has {len(b)} rows"
        )
    n_cols = len(b[0]) if len(b) else 0
    columns = [col(b, j) for j in range(n_cols)]
    return np.array(
        [[dot(row, column) for column in columns] for row in a], dtype=float
    ).reshape(len(a), n_cols)
