"""Console and CSV helpers for moving results into a spreadsheet.

``print_col`` writes one value per line so a column can be pasted straight
into a sheet; ``save_summary_csv`` exports the descriptive summary of one or
more named samples.
"""

from __future__ import annotations

import os
from typing import Iterable, Mapping, Sequence, Union

import pandas as pd

from .stats import boxplot, mean, stddev, total, variance

Samples = Union[Mapping[str, Sequence[float]], Sequence[float]]

SUMMARY_COLUMNS = [
    "Sample",
    "n",
    "Sum",
    "Mean",
    "Variance",
    "Std Dev",
    "Q1",
    "Median",
    "Q3",
    "IQR",
    "Whisker Low",
    "Whisker High",
    "Mild Outliers",
    "Extreme Outliers",
]


def col_text(values: Iterable[object]) -> str:
    """Join ``values`` with newlines, preserving order."""
    return "\n".join(str(v) for v in values)


def print_col(values: Iterable[object]) -> None:
    """Print each element of ``values`` on its own line."""
    print(col_text(values))


def _named(samples: Samples) -> Mapping[str, Sequence[float]]:
    if isinstance(samples, Mapping):
        return samples
    return {"sample": samples}


def summary_frame(samples: Samples) -> pd.DataFrame:
    """Tabulate descriptive statistics and boxplot fields per sample.

    Args:
        samples (Mapping[str, Sequence[float]] | Sequence[float]): Named
            samples, or a single unnamed sample (labelled ``"sample"``).

    Returns:
        pandas.DataFrame: One row per sample with the columns listed in
        ``SUMMARY_COLUMNS``. Variance and standard deviation are sample
        (``n - 1``) estimates.
    """
    rows = []
    for name, values in _named(samples).items():
        box = boxplot(values)
        rows.append(
            {
                "Sample": name,
                "n": len(values),
                "Sum": total(values),
                "Mean": mean(values),
                "Variance": variance(values),
                "Std Dev": stddev(values),
                "Q1": box.q1,
                "Median": box.median,
                "Q3": box.q3,
                "IQR": box.iqr,
                "Whisker Low": box.minimum,
                "Whisker High": box.maximum,
                "Mild Outliers": len(box.mild_outliers),
                "Extreme Outliers": len(box.extreme_outliers),
            }
        )
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def save_summary_csv(
    samples: Samples, output_dir: str = "output", filename: str = "summary.csv"
) -> str:
    """Write :func:`summary_frame` to ``output_dir/filename``.

    Returns:
        str: Path of the written CSV file.
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    summary_frame(samples).to_csv(path, index=False)
    print(f"Saved summary statistics to {path}")
    return path
