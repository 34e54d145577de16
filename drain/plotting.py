"""Figures for boxplot summaries and linear fits.

Boxes are drawn from :func:`drain.stats.boxplot` results via ``Axes.bxp`` so
the plotted quartiles, whiskers and outliers match the toolkit's own
convention rather than matplotlib's.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np

from .stats import LinearFit, boxplot, lin_reg

FIGURE_DPI = 300
FIGSIZE_SINGLE: tuple[float, float] = (7.0, 4.2)
GRID_ALPHA = 0.20


def _save(fig: plt.Figure, output_dir: str, file_stem: str) -> str:
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, f"{file_stem}.png")
    fig.savefig(path, dpi=FIGURE_DPI, bbox_inches="tight", pad_inches=0.12)
    plt.close(fig)
    return path


def plot_boxplot(
    samples: Union[Mapping[str, Sequence[float]], Sequence[float]],
    output_dir: str = "output",
    file_stem: str = "boxplot",
    title: Optional[str] = None,
) -> str:
    """Draw one box per sample, marking mild and extreme outliers.

    Args:
        samples: Named samples, or a single unnamed sample.
        output_dir (str): Directory for the PNG file.
        file_stem (str): File name without extension.
        title (str, optional): Axes title.

    Returns:
        str: Path of the saved PNG.
    """
    named = samples if isinstance(samples, Mapping) else {"sample": samples}

    stats = []
    extreme_x, extreme_y = [], []
    for position, (label, values) in enumerate(named.items(), start=1):
        box = boxplot(values)
        stats.append(
            {
                "label": label,
                "q1": box.q1,
                "med": box.median,
                "q3": box.q3,
                "whislo": box.minimum if box.minimum is not None else box.q1,
                "whishi": box.maximum if box.maximum is not None else box.q3,
                "fliers": list(box.mild_outliers),
            }
        )
        extreme_x.extend([position] * len(box.extreme_outliers))
        extreme_y.extend(box.extreme_outliers)

    fig, ax = plt.subplots(figsize=FIGSIZE_SINGLE)
    ax.bxp(stats, showfliers=True, flierprops={"marker": "o", "markersize": 5})
    if extreme_y:
        ax.scatter(
            extreme_x, extreme_y, marker="*", s=60, color="tab:red", zorder=3,
            label="Extreme outlier",
        )
        ax.legend(frameon=False)
    ax.grid(True, axis="y", alpha=GRID_ALPHA)
    if title:
        ax.set_title(title)
    return _save(fig, output_dir, file_stem)


def plot_regression(
    x: Sequence[float],
    y: Sequence[float],
    fit: Optional[LinearFit] = None,
    output_dir: str = "output",
    file_stem: str = "regression",
) -> str:
    """Scatter ``(x, y)`` with the least-squares line.

    Args:
        x: Independent variable.
        y: Dependent variable.
        fit (LinearFit, optional): Precomputed fit; computed when omitted.
        output_dir (str): Directory for the PNG file.
        file_stem (str): File name without extension.

    Returns:
        str: Path of the saved PNG.
    """
    if fit is None:
        fit = lin_reg(x, y)
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    x_line = np.linspace(np.min(x_arr), np.max(x_arr), 100)

    fig, ax = plt.subplots(figsize=FIGSIZE_SINGLE)
    ax.scatter(x_arr, y_arr, s=24, label="Data")
    ax.plot(
        x_line,
        fit(x_line),
        linewidth=2.0,
        label=f"y = {fit.slope:.4g}x + {fit.intercept:.4g} (r = {fit.r:.3f})",
    )
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.grid(True, alpha=GRID_ALPHA)
    ax.legend(frameon=False)
    return _save(fig, output_dir, file_stem)
