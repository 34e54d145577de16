"""List type carrying the statistics helpers as methods.

``Sample`` is an ordinary ``list`` subclass, so it can be built from any
iterable and passed anywhere a list is expected. Methods delegate to the free
functions in :mod:`drain.stats` and :mod:`drain.randomness`; nothing is added
to the built-in ``list`` type.

Example:
    >>> Sample([4, 1, 3, 2]).sorted().median()
    2.5
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import numpy as np

from . import randomness
from .stats.boxplot import Boxplot, boxplot as summarize
from .stats import descriptive


class Sample(list):
    """A list of numbers with statistical methods attached."""

    def sorted(self, reverse: bool = False) -> "Sample":
        """Return a sorted copy; quartile methods expect sorted data."""
        return Sample(sorted(self, reverse=reverse))

    def sum(self) -> float:
        return descriptive.total(self)

    def mean(self) -> float:
        return descriptive.mean(self)

    def variance(self, population: bool = False) -> float:
        return descriptive.variance(self, population)

    def stddev(self, population: bool = False) -> float:
        return descriptive.stddev(self, population)

    def quartile(self, position: float) -> float:
        return descriptive.quartile(self, position)

    def median(self) -> float:
        return descriptive.median(self)

    def q1(self) -> float:
        return descriptive.q1(self)

    def q3(self) -> float:
        return descriptive.q3(self)

    def iqr(self) -> float:
        return descriptive.iqr(self)

    def zscore(self, value: float, population: bool = False) -> float:
        return descriptive.zscore(self, value, population)

    def min(self, limit: Optional[float] = None):
        return descriptive.minimum(self, limit)

    def max(self, limit: Optional[float] = None):
        return descriptive.maximum(self, limit)

    def pluck(self, key: Any) -> "Sample":
        return Sample(descriptive.pluck(self, key))

    def obj_map(self, func: Callable[[Any], Any]) -> Dict[Any, Any]:
        return descriptive.obj_map(self, func)

    def boxplot(self) -> Boxplot:
        return summarize(self)

    def pick(self, rng: Optional[np.random.Generator] = None):
        return randomness.pick(self, rng)

    def shuffle(self, rng: Optional[np.random.Generator] = None) -> "Sample":
        """Shuffle in place and return ``self``."""
        randomness.shuffle(self, rng)
        return self
