"""
Floating-point guards shared by the variate generators and special functions.

Degenerate draws are mapped to documented sentinel values instead of letting
``log(0)`` or ``x / 0`` produce NaN or infinities.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys

import numpy as np

_FINFO = np.finfo(np.float64)

DBL_MIN: float = float(_FINFO.tiny)
"""Smallest positive normal double, substituted for a zero log operand."""

DBL_MAX: float = float(_FINFO.max)
"""Largest finite double, returned instead of dividing by an exact zero."""

DBL_EPSILON: float = float(_FINFO.eps)
"""Machine epsilon for doubles."""


def floor_to_tiny(x: float) -> float:
    """Return ``x`` or :data:`DBL_MIN` when ``x`` is exactly zero."""
    return DBL_MIN if x == 0.0 else x


def ieee_log(x: float) -> float:
    """
    Natural logarithm with IEEE semantics outside the positive reals.

    ``math.log`` raises on ``0.0`` and negative input; here ``log(0)`` is
    ``-inf`` and a negative or NaN operand gives NaN.
    """
    if x == 0.0:
        return -math.inf
    if not x > 0.0:
        return math.nan
    return math.log(x)


def ieee_div(num: float, den: float) -> float:
    """Divide with IEEE semantics: ``x / 0`` is a signed infinity, ``0 / 0`` is NaN."""
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def ieee_pow(x: float, y: float) -> float:
    """
    Power with IEEE semantics.

    Python's ``**`` turns a negative base with a fractional exponent into a
    complex number and ``math.pow`` raises; both cases yield NaN here.
    """
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(x), np.float64(y)))


def saturating_int(x: float) -> int:
    """
    Truncate toward zero like a C ``(int)`` cast, without raising.

    Infinities saturate to ``±sys.maxsize`` and NaN maps to ``0``.
    """
    if math.isnan(x):
        return 0
    if math.isinf(x):
        return sys.maxsize if x > 0 else -sys.maxsize
    return int(x)


__all__ = [
    "DBL_MIN",
    "DBL_MAX",
    "DBL_EPSILON",
    "floor_to_tiny",
    "ieee_log",
    "ieee_div",
    "ieee_pow",
    "saturating_int",
]
