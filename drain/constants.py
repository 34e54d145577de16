"""Centralized numeric constants shared across the toolkit."""

from __future__ import annotations

import math
import sys

PI: float = math.pi
E: float = math.e

# Angle conversion factors.
DTR: float = math.pi / 180.0
RTD: float = 180.0 / math.pi

MACHINE_EPSILON: float = sys.float_info.epsilon

# Tukey fence multipliers applied to the IQR.
MILD_FENCE: float = 1.5
EXTREME_FENCE: float = 3.0
