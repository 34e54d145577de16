"""Shared fixtures; puts the checkout root on ``sys.path`` for ``main``."""

import os
import sys

import matplotlib
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")

from drain.randomness import make_rng  # noqa: E402


@pytest.fixture
def rng():
    """Seeded generator so random draws are repeatable across runs."""
    return make_rng(1234)
