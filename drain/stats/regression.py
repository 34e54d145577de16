"""Provide least-squares regression and goodness-of-fit utilities.

This module supports:
- closed-form simple linear regression with Pearson correlation,
- residual, RSS/TSS and R^2 decomposition for any fitted equation, and
- Pearson's chi-square statistic for paired observed/expected counts.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Callable, Dict, Sequence

import numpy as np
from scipy.stats import chi2
from scipy.stats import t as student_t

from ..vector import check_same_length
from .descriptive import mean, stddev

logger = logging.getLogger(__name__)


def linear(slope: float, intercept: float) -> Callable[[float], float]:
    """Return the straight line ``f(x) = slope * x + intercept``."""

    def equation(x):
        return x * slope + intercept

    return equation


@dataclass(frozen=True)
class LinearFit:
    """Result of :func:`lin_reg`.

    Attributes:
        slope: Least-squares slope.
        intercept: Least-squares intercept.
        r: Pearson correlation coefficient.
        n: Number of paired observations.
        p_value: Two-sided p-value for ``r != 0`` (Student t with ``n - 2``
            degrees of freedom); ``nan`` when undefined.
    """

    slope: float
    intercept: float
    r: float
    n: int
    p_value: float = math.nan

    @property
    def equation(self) -> Callable[[float], float]:
        return linear(self.slope, self.intercept)

    @property
    def r_squared(self) -> float:
        return self.r**2

    def __call__(self, x):
        return self.equation(x)

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def _correlation_p_value(r: float, n: int) -> float:
    dof = n - 2
    if dof <= 0 or not math.isfinite(r):
        return math.nan
    if abs(r) >= 1.0:
        return 0.0
    t_stat = r * math.sqrt(dof / ((1.0 - r) * (1.0 + r)))
    return float(2 * student_t.sf(abs(t_stat), dof))


def lin_reg(
    x: Sequence[float], y: Sequence[float], population: bool = False
) -> LinearFit:
    """Fit ``y = slope * x + intercept`` by ordinary least squares.

    Args:
        x (Sequence[float]): Independent variable.
        y (Sequence[float]): Dependent variable, paired with ``x``.
        population (bool, optional): Treat the data as a full population when
            computing the correlation; the standard deviations and the
            divisor both use ``n`` instead of ``n - 1``. Either way ``r`` is
            Pearson's coefficient.

    Returns:
        LinearFit: Slope, intercept, correlation and p-value.

    Raises:
        ValueError: If ``x`` and ``y`` differ in length.

    Note:
        Zero variance in ``x`` or ``y`` propagates as ``nan``/``inf`` in the
        affected fields rather than raising.
    """
    check_same_length(x, y)
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    n = int(x_arr.size)

    xbar = mean(x_arr)
    ybar = mean(y_arr)
    dx = x_arr - xbar
    dy = y_arr - ybar

    with np.errstate(divide="ignore", invalid="ignore"):
        slope = float(np.sum(dx * dy) / np.sum(dx**2))
        intercept = float((np.sum(y_arr) - slope * np.sum(x_arr)) / np.float64(n))
        sdx = np.float64(stddev(x_arr, population))
        sdy = np.float64(stddev(y_arr, population))
        divisor = np.float64(n if population else n - 1)
        r = float(np.sum((dx / sdx) * (dy / sdy)) / divisor)

    fit = LinearFit(
        slope=slope,
        intercept=intercept,
        r=r,
        n=n,
        p_value=_correlation_p_value(r, n),
    )
    logger.debug(
        "Linear fit over %d points: slope=%.6g intercept=%.6g r=%.6g",
        n,
        slope,
        intercept,
        r,
    )
    return fit


def residuals(
    x: Sequence[float], y: Sequence[float], equation: Callable[[float], float]
) -> np.ndarray:
    """Observed minus predicted values, ``y[i] - equation(x[i])``."""
    check_same_length(x, y)
    return np.array([yi - equation(xi) for xi, yi in zip(x, y)], dtype=float)


def rss(
    x: Sequence[float], y: Sequence[float], equation: Callable[[float], float]
) -> float:
    """Residual sum of squares."""
    return float(np.sum(residuals(x, y, equation) ** 2))


def tss(y: Sequence[float]) -> float:
    """Total sum of squares about the mean of ``y``."""
    y_arr = np.asarray(y, dtype=float)
    return float(np.sum((y_arr - mean(y_arr)) ** 2))


def r2(
    x: Sequence[float], y: Sequence[float], equation: Callable[[float], float]
) -> float:
    """Coefficient of determination ``1 - RSS/TSS``."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(1.0 - np.float64(rss(x, y, equation)) / np.float64(tss(y)))


def chi_square(observed: Sequence[float], expected: Sequence[float]) -> float:
    """Pearson's chi-square statistic, the sum of ``(o - e)**2 / e``.

    Raises:
        ValueError: If the sequences differ in length.
    """
    check_same_length(observed, expected)
    o = np.asarray(observed, dtype=float)
    e = np.asarray(expected, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.sum((o - e) ** 2 / e))


def chi_square_test(
    observed: Sequence[float], expected: Sequence[float]
) -> Dict[str, float]:
    """Goodness-of-fit test with ``k - 1`` degrees of freedom.

    Returns:
        dict[str, float]: ``statistic``, ``dof`` and upper-tail ``p_value``.
    """
    statistic = chi_square(observed, expected)
    dof = len(observed) - 1
    p_value = float(chi2.sf(statistic, dof)) if dof > 0 else math.nan
    return {"statistic": statistic, "dof": dof, "p_value": p_value}
