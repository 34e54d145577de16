"""Trigonometric wrappers that honour a degrees/radians mode.

The angle mode is held by a :class:`TrigContext` instance instead of a
process-wide flag, so two callers can work in different units side by side.
Forward functions (``sin`` through ``cot``) convert their argument to radians
when the context is in degrees mode; inverse functions (``asin`` through
``atan2``) convert their radian result back to degrees.

Reciprocal functions follow IEEE floating-point semantics: ``csc(0)`` is
``inf`` rather than an exception.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .constants import DTR, RTD


@dataclass
class TrigContext:
    """Angle-mode configuration for trigonometric calls.

    Attributes:
        degrees: When ``True`` (the default) angles are read and reported in
            degrees; otherwise radians are used unchanged.
    """

    degrees: bool = True

    def toggle(self) -> "TrigContext":
        """Flip between degrees and radians mode on this instance."""
        self.degrees = not self.degrees
        return self

    def to_radians(self, angle):
        x = np.asarray(angle, dtype=float)
        return x * DTR if self.degrees else x

    def from_radians(self, angle):
        return angle * RTD if self.degrees else angle

    def sin(self, angle):
        return np.sin(self.to_radians(angle))

    def cos(self, angle):
        return np.cos(self.to_radians(angle))

    def tan(self, angle):
        return np.tan(self.to_radians(angle))

    def csc(self, angle):
        with np.errstate(divide="ignore", invalid="ignore"):
            return 1.0 / np.sin(self.to_radians(angle))

    def sec(self, angle):
        with np.errstate(divide="ignore", invalid="ignore"):
            return 1.0 / np.cos(self.to_radians(angle))

    def cot(self, angle):
        with np.errstate(divide="ignore", invalid="ignore"):
            return 1.0 / np.tan(self.to_radians(angle))

    def asin(self, value):
        with np.errstate(invalid="ignore"):
            return self.from_radians(np.arcsin(np.asarray(value, dtype=float)))

    def acos(self, value):
        with np.errstate(invalid="ignore"):
            return self.from_radians(np.arccos(np.asarray(value, dtype=float)))

    def atan(self, value):
        return self.from_radians(np.arctan(np.asarray(value, dtype=float)))

    def atan2(self, y, x):
        """Angle of the point ``(x, y)``, quadrant-aware."""
        return self.from_radians(
            np.arctan2(np.asarray(y, dtype=float), np.asarray(x, dtype=float))
        )


def sin(angle, *, degrees: bool = True):
    return TrigContext(degrees).sin(angle)


def cos(angle, *, degrees: bool = True):
    return TrigContext(degrees).cos(angle)


def tan(angle, *, degrees: bool = True):
    return TrigContext(degrees).tan(angle)


def csc(angle, *, degrees: bool = True):
    return TrigContext(degrees).csc(angle)


def sec(angle, *, degrees: bool = True):
    return TrigContext(degrees).sec(angle)


def cot(angle, *, degrees: bool = True):
    return TrigContext(degrees).cot(angle)


def asin(value, *, degrees: bool = True):
    return TrigContext(degrees).asin(value)


def acos(value, *, degrees: bool = True):
    return TrigContext(degrees).acos(value)


def atan(value, *, degrees: bool = True):
    return TrigContext(degrees).atan(value)


def atan2(y, x, *, degrees: bool = True):
    return TrigContext(degrees).atan2(y, x)
