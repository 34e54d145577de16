"""
Statistical utilities for numeric sequences.

This subpackage provides the descriptive statistics, regression and boxplot
routines of the toolkit. All functions accept plain sequences (lists, tuples,
numpy arrays) and never modify their arguments.

Modules:
    descriptive:
        Sum, mean, variance and standard deviation (sample or population),
        quartiles using the midpoint convention, z-scores, bounded
        minimum/maximum and field extraction.

    regression:
        Closed-form simple linear regression with Pearson correlation,
        residual/RSS/TSS/R^2 decomposition, and the chi-square statistic.

    boxplot:
        Quartiles, whisker ends and Tukey mild/extreme outlier classification.

Design Principle:
    This subpackage has no dependencies on plotting or output modules.
"""

from .boxplot import Boxplot, boxplot
from .descriptive import (
    iqr,
    maximum,
    mean,
    median,
    minimum,
    obj_map,
    pluck,
    q1,
    q3,
    quartile,
    stddev,
    total,
    variance,
    zscore,
)
from .regression import (
    LinearFit,
    chi_square,
    chi_square_test,
    lin_reg,
    linear,
    r2,
    residuals,
    rss,
    tss,
)

__all__ = [
    "Boxplot",
    "boxplot",
    "iqr",
    "maximum",
    "mean",
    "median",
    "minimum",
    "obj_map",
    "pluck",
    "q1",
    "q3",
    "quartile",
    "stddev",
    "total",
    "variance",
    "zscore",
    "LinearFit",
    "chi_square",
    "chi_square_test",
    "lin_reg",
    "linear",
    "r2",
    "residuals",
    "rss",
    "tss",
]
