"""Five-number summary with Tukey outlier fences."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Sequence, Tuple

from ..constants import EXTREME_FENCE, MILD_FENCE
from .descriptive import maximum, median, minimum, q1, q3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Boxplot:
    """Summary statistics for a box-and-whisker plot.

    Attributes:
        q1: First quartile.
        q3: Third quartile.
        iqr: ``q3 - q1``.
        median: Second quartile.
        minimum: Smallest value inside the lower mild fence (whisker end),
            ``None`` if nothing qualifies.
        maximum: Largest value inside the upper mild fence (whisker end),
            ``None`` if nothing qualifies.
        mild_outliers: Values between the mild and extreme fences.
        extreme_outliers: Values beyond the extreme fences.
    """

    q1: float
    q3: float
    iqr: float
    median: float
    minimum: float | None
    maximum: float | None
    mild_outliers: Tuple[float, ...]
    extreme_outliers: Tuple[float, ...]

    @property
    def lower_mild_fence(self) -> float:
        return self.q1 - self.iqr * MILD_FENCE

    @property
    def upper_mild_fence(self) -> float:
        return self.q3 + self.iqr * MILD_FENCE

    @property
    def lower_extreme_fence(self) -> float:
        return self.q1 - self.iqr * EXTREME_FENCE

    @property
    def upper_extreme_fence(self) -> float:
        return self.q3 + self.iqr * EXTREME_FENCE

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


def boxplot(values: Sequence[float]) -> Boxplot:
    """Compute quartiles, whisker ends and outliers of ``values``.

    The data are sorted ascending before the quartiles are taken; the caller's
    sequence is left untouched. Mild fences sit 1.5 IQR beyond the quartiles
    and extreme fences 3 IQR beyond them.

    Args:
        values (Sequence[float]): Observations in any order.

    Returns:
        Boxplot: Summary with outliers listed in ascending order.
    """
    data = sorted(values)
    lower_q = q1(data)
    upper_q = q3(data)
    spread = upper_q - lower_q

    lower_mild = lower_q - spread * MILD_FENCE
    upper_mild = upper_q + spread * MILD_FENCE
    lower_extreme = lower_q - spread * EXTREME_FENCE
    upper_extreme = upper_q + spread * EXTREME_FENCE

    mild = tuple(
        x
        for x in data
        if lower_extreme < x < lower_mild or upper_mild < x < upper_extreme
    )
    extreme = tuple(x for x in data if x < lower_extreme or x > upper_extreme)

    logger.debug(
        "Boxplot over %d values: fences [%.6g, %.6g] / [%.6g, %.6g], "
        "%d mild and %d extreme outliers",
        len(data),
        lower_mild,
        upper_mild,
        lower_extreme,
        upper_extreme,
        len(mild),
        len(extreme),
    )
    return Boxplot(
        q1=lower_q,
        q3=upper_q,
        iqr=spread,
        median=median(data),
        minimum=minimum(data, lower_mild),
        maximum=maximum(data, upper_mild),
        mild_outliers=mild,
        extreme_outliers=extreme,
    )
