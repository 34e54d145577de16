"""Combinatorics, quadratic roots, logarithms and small list builders."""

from __future__ import annotations

import logging
import math
import numbers
import operator
from functools import reduce
from typing import Callable, List, Optional

import numpy as np

from .constants import MACHINE_EPSILON

logger = logging.getLogger(__name__)


def _check_count(name: str, value) -> int:
    if (
        isinstance(value, bool)
        or not isinstance(value, numbers.Real)
        or not float(value).is_integer()
    ):
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} cannot be negative, got {value}")
    return value


def factorial(n: int) -> int:
    """Return ``n!``, the product of ``1..n``; ``factorial(0) == 1``.

    Raises:
        ValueError: If ``n`` is negative or not a whole number.
    """
    n = _check_count("n", n)
    return reduce(operator.mul, range(1, n + 1), 1)


def npr(n: int, r: int) -> int:
    """Number of ordered selections of ``r`` items from ``n``."""
    n = _check_count("n", n)
    r = _check_count("r", r)
    if r > n:
        raise ValueError(f"r cannot exceed n (r={r}, n={n})")
    return factorial(n) // factorial(n - r)


def ncr(n: int, r: int) -> int:
    """Number of unordered selections of ``r`` items from ``n``."""
    n = _check_count("n", n)
    r = _check_count("r", r)
    if r > n:
        raise ValueError(f"r cannot exceed n (r={r}, n={n})")
    return factorial(n) // (factorial(n - r) * factorial(r))


def discriminant(a: float, b: float, c: float) -> float:
    return b * b - 4 * a * c


def solve_quadratic(a: float, b: float, c: float) -> List[float]:
    """Return the real roots of ``a*x**2 + b*x + c = 0``.

    Args:
        a (float): Quadratic coefficient; must be non-zero.
        b (float): Linear coefficient.
        c (float): Constant term.

    Returns:
        list[float]: ``[]`` when the discriminant is negative, the repeated
        root ``[-b / (2a)]`` when it is within machine epsilon of zero,
        otherwise ``[(-b + sqrt(d)) / (2a), (-b - sqrt(d)) / (2a)]``.

    Raises:
        ValueError: If ``a`` is zero. Unlike the other helpers here, a zero
            leading coefficient is rejected instead of returning ``inf`` or
            ``nan`` roots, since the equation is then not quadratic.
    """
    if a == 0:
        raise ValueError("Coefficient a must be non-zero for a quadratic.")
    disc = discriminant(a, b, c)
    logger.debug("Quadratic %s, %s, %s has discriminant %s", a, b, c, disc)
    if disc < 0:
        return []
    if disc < MACHINE_EPSILON:
        return [-b / (2 * a)]
    sqrt_disc = math.sqrt(disc)
    return [(-b + sqrt_disc) / (2 * a), (-b - sqrt_disc) / (2 * a)]


def log(x: float, base: Optional[float] = None) -> float:
    """Logarithm of ``x``; natural log when ``base`` is omitted.

    ``log(0)`` is ``-inf`` and negative input gives ``nan``.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        if base is None:
            return float(np.log(np.float64(x)))
        return float(np.log(np.float64(x)) / np.log(np.float64(base)))


def ln(x: float) -> float:
    return log(x)


def root(value: float, degree: float) -> float:
    """Return the ``degree``-th root of ``value``.

    Negative ``value`` gives ``nan``; use :func:`cbrt` for a real cube root.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.power(np.float64(value), 1.0 / np.float64(degree)))


def cbrt(value: float) -> float:
    """Real cube root, negative for negative ``value``."""
    return float(np.cbrt(value))


def inclusive_range(start: int, end: int) -> List[int]:
    """Integers from ``start`` to ``end`` inclusive, counting down if needed.

    ``inclusive_range(3, 1) == [3, 2, 1]``.
    """
    step = 1 if end >= start else -1
    return list(range(start, end + step, step))


def create_list(count: int, func: Callable[[int], object]) -> List:
    """Build a list of ``count`` items where item ``i`` is ``func(i)``."""
    return [func(i) for i in range(count)]
