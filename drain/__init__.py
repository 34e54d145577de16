"""
A personal toolkit of math, trigonometry, statistics and vector helpers.

Modules:
    - constants: Angle conversion factors, machine epsilon and fence multipliers.
    - trig: Trigonometric wrappers honouring a degrees/radians TrigContext.
    - randomness: Uniform random reals/integers, pick and Fisher-Yates shuffle.
    - vector: Elementwise vector operations and row-major matrix multiplication.
    - algebra: Factorials, permutations/combinations, quadratic roots, logs.
    - stats: Descriptive statistics, linear regression and boxplot summaries.
    - sequence: The Sample list type exposing the statistics as methods.
    - output: One-value-per-line printing and CSV summaries.
    - plotting: Boxplot and regression figures.
"""

__version__ = "3.0.0"

from .algebra import (
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
from .constants import DTR, E, PI, RTD
from .output import col_text, print_col, save_summary_csv, summary_frame
from .randomness import make_rng, pick, random_int, random_real, shuffle
from .sequence import Sample
from .stats import (
    Boxplot,
    LinearFit,
    boxplot,
    chi_square,
    chi_square_test,
    iqr,
    lin_reg,
    linear,
    maximum,
    mean,
    median,
    minimum,
    obj_map,
    pluck,
    q1,
    q3,
    quartile,
    r2,
    residuals,
    rss,
    stddev,
    total,
    tss,
    variance,
    zscore,
)
from .trig import (
    TrigContext,
    acos,
    asin,
    atan,
    atan2,
    cos,
    cot,
    csc,
    sec,
    sin,
    tan,
)
from .vector import (
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

__all__ = [
    # Constants
    "PI",
    "E",
    "DTR",
    "RTD",
    # Trigonometry
    "TrigContext",
    "sin",
    "cos",
    "tan",
    "csc",
    "sec",
    "cot",
    "asin",
    "acos",
    "atan",
    "atan2",
    # Randomness
    "make_rng",
    "random_real",
    "random_int",
    "pick",
    "shuffle",
    # Vectors and matrices
    "zip_with",
    "add",
    "sub",
    "mul",
    "div",
    "dot",
    "length",
    "length_squared",
    "col",
    "transpose",
    "identity_matrix",
    "mmul",
    # Algebra
    "factorial",
    "npr",
    "ncr",
    "discriminant",
    "solve_quadratic",
    "log",
    "ln",
    "root",
    "cbrt",
    "inclusive_range",
    "create_list",
    # Statistics
    "Sample",
    "total",
    "mean",
    "variance",
    "stddev",
    "quartile",
    "median",
    "q1",
    "q3",
    "iqr",
    "zscore",
    "pluck",
    "minimum",
    "maximum",
    "obj_map",
    "LinearFit",
    "linear",
    "lin_reg",
    "residuals",
    "rss",
    "tss",
    "r2",
    "chi_square",
    "chi_square_test",
    "Boxplot",
    "boxplot",
    # Output
    "col_text",
    "print_col",
    "summary_frame",
    "save_summary_csv",
]
