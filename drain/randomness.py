"""Uniform random helpers built on :class:`numpy.random.Generator`.

Every function accepts an optional ``rng`` so results can be made
reproducible; without one a module-level generator seeded from OS entropy is
used.
"""

from __future__ import annotations

import math
from typing import MutableSequence, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")

_DEFAULT_RNG = np.random.default_rng()


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a random generator, deterministic when ``seed`` is given.

    Args:
        seed (int, optional): Integer seed. ``None`` draws fresh entropy.

    Returns:
        numpy.random.Generator: Generator instance.
    """
    return np.random.default_rng(seed)


def _generator(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return _DEFAULT_RNG if rng is None else rng


def random_real(
    lo: float, hi: float, rng: Optional[np.random.Generator] = None
) -> float:
    """Return a uniformly distributed float in ``[lo, hi)``."""
    return float(lo + _generator(rng).random() * (hi - lo))


def random_int(lo: int, hi: int, rng: Optional[np.random.Generator] = None) -> int:
    """Return a uniformly distributed integer in ``[lo, hi]`` (both inclusive).

    Computed as ``floor(random_real(lo, hi + 1))``; the result is clamped to
    ``hi`` to absorb floating-point rounding at the upper edge.
    """
    value = int(math.floor(random_real(lo, hi + 1, rng)))
    return min(value, int(hi))


def pick(seq: Sequence[T], rng: Optional[np.random.Generator] = None) -> T | None:
    """Return a uniformly chosen element of ``seq``, or ``None`` if it is empty."""
    n = len(seq)
    if n == 0:
        return None
    return seq[int(math.floor(_generator(rng).random() * n))]


def shuffle(
    seq: MutableSequence[T], rng: Optional[np.random.Generator] = None
) -> MutableSequence[T]:
    """Shuffle ``seq`` in place with the Fisher-Yates algorithm.

    Args:
        seq (MutableSequence): Sequence to permute. It is mutated.
        rng (numpy.random.Generator, optional): Source of randomness.

    Returns:
        MutableSequence: The same object, for chaining.
    """
    for i in range(len(seq) - 1, 0, -1):
        j = random_int(0, i, rng)
        seq[i], seq[j] = seq[j], seq[i]
    return seq
