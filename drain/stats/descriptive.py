"""Descriptive statistics over ordered numeric sequences.

Quartile convention:
    For a sequence of length ``n`` sorted ascending and a fractional
    ``position`` in ``[0, 1]``, let ``pos = n * position``.

    - If ``pos`` is a whole number, the quartile is the mean of the elements at
      zero-based indices ``pos - 1`` and ``pos`` (the midpoint between the two
      straddling observations).
    - Otherwise it is the element at index ``floor(pos)``.

    This gives ``median([1, 2, 3, 4]) == 2.5`` and ``median([1, 2, 3, 4, 5]) ==
    3``. The quartile helpers never sort; callers pass sorted data.

Degenerate input (empty sequences, a single-observation sample variance)
produces ``nan`` or ``inf`` rather than raising.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Hashable, List, Mapping, Optional, Sequence

import numpy as np


def _as_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float)


def _bessel(n: int, population: bool) -> int:
    return n if population else n - 1


def total(values: Sequence[float]) -> float:
    """Sum of ``values``; ``0.0`` when empty."""
    return float(np.sum(_as_array(values)))


def mean(values: Sequence[float]) -> float:
    arr = _as_array(values)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.sum(arr) / np.float64(arr.size))


def variance(values: Sequence[float], population: bool = False) -> float:
    """Variance of ``values``.

    Args:
        values (Sequence[float]): Observations.
        population (bool, optional): Divide by ``n`` when ``True``; by default
            divide by ``n - 1`` (Bessel's correction, unbiased sample
            estimate).

    Returns:
        float: The variance, ``nan`` for a single-observation sample.
    """
    arr = _as_array(values)
    if arr.size == 0:
        return math.nan
    m = mean(arr)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(
            np.sum((arr - m) ** 2) / np.float64(_bessel(arr.size, population))
        )


def stddev(values: Sequence[float], population: bool = False) -> float:
    """Standard deviation; see :func:`variance` for ``population``."""
    return math.sqrt(variance(values, population))


def quartile(values: Sequence[float], position: float) -> float:
    """Return the value at fractional ``position`` of a sorted sequence.

    See the module docstring for the interpolation rule. Indices are clamped
    into range so ``position`` 0 and 1 return the first and last elements.
    """
    n = len(values)
    if n == 0:
        return math.nan
    pos = n * position
    if float(pos).is_integer():
        hi = min(max(int(pos), 0), n - 1)
        lo = max(int(pos) - 1, 0)
        return float((values[lo] + values[hi]) / 2)
    return float(values[min(int(math.floor(pos)), n - 1)])


def median(values: Sequence[float]) -> float:
    return quartile(values, 1 / 2)


def q1(values: Sequence[float]) -> float:
    return quartile(values, 1 / 4)


def q3(values: Sequence[float]) -> float:
    return quartile(values, 3 / 4)


def iqr(values: Sequence[float]) -> float:
    """Interquartile range ``q3 - q1`` of a sorted sequence."""
    return q3(values) - q1(values)


def zscore(values: Sequence[float], value: float, population: bool = False) -> float:
    """Standard score of ``value`` relative to ``values``."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(
            (np.float64(value) - mean(values))
            / np.float64(stddev(values, population))
        )


def _field(element: Any, key: Any) -> Any:
    if isinstance(element, Mapping) or (
        isinstance(key, int) and isinstance(element, Sequence)
    ):
        return element[key]
    return getattr(element, key)


def pluck(values: Sequence[Any], key: Any) -> List[Any]:
    """Extract ``key`` from every element (mapping key, index or attribute)."""
    return [_field(element, key) for element in values]


def minimum(values: Sequence[float], limit: Optional[float] = None) -> float | None:
    """Smallest element strictly greater than ``limit``.

    Returns ``None`` when no element qualifies, including for empty input.
    Without a ``limit`` every element qualifies.
    """
    candidates = [x for x in values if limit is None or x > limit]
    return min(candidates) if candidates else None


def maximum(values: Sequence[float], limit: Optional[float] = None) -> float | None:
    """Largest element strictly less than ``limit``; ``None`` if none qualify."""
    candidates = [x for x in values if limit is None or x < limit]
    return max(candidates) if candidates else None


def obj_map(values: Sequence[Hashable], func: Callable[[Any], Any]) -> Dict[Any, Any]:
    """Map each element to ``func(element)`` in a dict keyed by the element."""
    return {element: func(element) for element in values}
