"""
Sine and Cosine Integrals
=========================

Series-evaluated sine integral ``Si`` and entire cosine integral ``Cin``,
and the functions built on them:

- ``Si(x)  = ∫_0^x sin(t)/t dt``;
- ``Cin(x) = ∫_0^x (1 - cos(t))/t dt``;
- ``Ci(x)  = ln|x| + γ - Cin(x)``;
- auxiliary ``fi(x) = ∫_0^∞ sin(t)/(t+x) dt`` and
  ``gi(x) = ∫_0^∞ cos(t)/(t+x) dt``.

Notes
-----
- For ``|x| <= 1`` the power series are summed backward, from the highest
  order term toward the constant term, with a truncation order fitted to
  ``|x|``. Near zero a two-term closed form replaces the series.
- For ``|x| > 1`` ``Si`` and ``Ci`` come from :func:`scipy.special.sici`; the
  auxiliary functions switch to their asymptotic expansions from
  ``x = 48`` on.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
from scipy.special import sici

from pysatl_variates.variates.guards import DBL_MAX

EULER_GAMMA = float(np.euler_gamma)

SI_SHORTCUT_THRESHOLD = 0.0003
"""``|x|`` at or below which ``Si(x) ≈ x exp(-x²/18)``."""

CIN_SHORTCUT_THRESHOLD = 0.00025
"""``|x|`` below which ``Cin(x) ≈ x² exp(-x²/24) / 4``."""

POWER_SERIES_RADIUS = 1.0
"""Largest ``|x|`` for which the fitted truncation order is valid."""

AUXILIARY_ASYMPTOTIC_CUTOFF = 48.0
"""``x`` from which ``fi`` and ``gi`` use their asymptotic expansions."""

_PI_2 = 0.5 * math.pi


def _check_series_argument(x: float) -> None:
    if not abs(x) <= POWER_SERIES_RADIUS:
        raise ValueError(f"Power series is only valid for |x| <= {POWER_SERIES_RADIUS}, got {x}")


def power_series_si(x: float) -> float:
    """
    Sine integral by its power series.

    ``Si(x) = x Σ_{j>=0} (-x²)^j / ((2j+1) (2j+1)!)``, truncated at order
    ``n = int(-3.42 x² + 7.46 |x| + 6.95)`` and summed backward.

    Parameters
    ----------
    x : float
        Argument, ``|x| <= 1``.

    Returns
    -------
    float
        ``Si(x)``; ``x exp(-x²/18)`` for ``|x| <= 0.0003``.

    Raises
    ------
    ValueError
        If ``|x| > 1``.
    """
    _check_series_argument(x)
    xx = -x * x
    if abs(x) <= SI_SHORTCUT_THRESHOLD:
        return x * math.exp(xx / 18.0)

    n = int(3.42 * xx + 7.46 * abs(x) + 6.95)
    k = n + n
    total = xx / ((k + 1) * (k + 1) * k) + 1.0 / (k - 1)
    k -= 1
    while k >= 3:
        total *= xx / (k * (k - 1))
        total += 1.0 / (k - 2)
        k -= 2
    return x * total


def power_series_cin(x: float) -> float:
    """
    Entire cosine integral by its power series.

    ``Cin(x) = -Σ_{j>=1} (-x²)^j / ((2j) (2j)!)``, truncated at order
    ``n = int(-2.41 x² + 7.15 |x| + 7.00)`` and summed backward.

    Parameters
    ----------
    x : float
        Argument, ``|x| <= 1``.

    Returns
    -------
    float
        ``Cin(x)``; ``x² exp(-x²/24) / 4`` for ``|x| < 0.00025``.

    Raises
    ------
    ValueError
        If ``|x| > 1``.
    """
    _check_series_argument(x)
    xx = -x * x
    if abs(x) < CIN_SHORTCUT_THRESHOLD:
        return -(math.exp(xx / 24.0) * xx) / 4.0

    n = int(2.41 * xx + 7.15 * abs(x) + 7.00)
    k = n + n
    total = xx / (k * k * (k - 1)) + 1.0 / (k - 2)
    k -= 2
    while k > 2:
        total *= xx / (k * (k - 1))
        total += 1.0 / (k - 2)
        k -= 2
    return -xx * total / 2.0


def _clamp(value: float) -> float:
    if math.isinf(value) or abs(value) > DBL_MAX:
        return -DBL_MAX if value < 0.0 else DBL_MAX
    return value


def sin_integral_si(x: float) -> float:
    """Sine integral ``Si(x)`` for any real ``x`` (odd in ``x``)."""
    if abs(x) <= POWER_SERIES_RADIUS:
        return power_series_si(x)
    si, _ = sici(abs(x))
    return -float(si) if x < 0.0 else float(si)


def entire_cos_integral_cin(x: float) -> float:
    """Entire cosine integral ``Cin(x)`` for any real ``x`` (even in ``x``)."""
    if abs(x) <= POWER_SERIES_RADIUS:
        return power_series_cin(x)
    _, ci = sici(abs(x))
    return math.log(abs(x)) + EULER_GAMMA - float(ci)


def cos_integral_ci(x: float) -> float:
    """
    Cosine integral ``Ci(x) = -∫_x^∞ cos(t)/t dt``.

    For negative ``x`` the real part ``Ci(|x|)`` is returned. ``Ci(0)`` is
    ``-DBL_MAX``.
    """
    if x == 0.0:
        return -DBL_MAX
    if abs(x) <= POWER_SERIES_RADIUS:
        return _clamp(math.log(abs(x)) + EULER_GAMMA - power_series_cin(x))
    _, ci = sici(abs(x))
    return _clamp(float(ci))


def sin_cos_integrals_si_ci(x: float) -> tuple[float, float]:
    """
    Return ``(Si(x), Ci(x))`` together.

    At ``x == 0`` the pair is ``(0.0, -DBL_MAX)``.
    """
    return sin_integral_si(x), cos_integral_ci(x)


def _asymptotic_series(x: float, j: int) -> float:
    # Sum of the divergent expansion up to its smallest term.
    xx = -x * x
    term = 1.0
    xn = 1.0
    factorial = 1.0
    total = 0.0
    while True:
        total += term
        old_term = term
        factorial *= j * (j - 1)
        xn *= xx
        term = factorial / xn
        j += 2
        if not abs(term) < abs(old_term):
            return total


def auxiliary_sin_integral_fi(x: float) -> float:
    """
    Auxiliary sine integral ``fi(x) = sin(x) Ci(x) + cos(x) (π/2 - Si(x))``.

    Defined for ``x >= 0`` with ``fi(0) = π/2``.
    """
    if x == 0.0:
        return _PI_2
    if x >= AUXILIARY_ASYMPTOTIC_CUTOFF:
        return _asymptotic_series(x, 2) / x
    si, ci = sin_cos_integrals_si_ci(x)
    return math.sin(x) * ci + math.cos(x) * (_PI_2 - si)


def auxiliary_cos_integral_gi(x: float) -> float:
    """
    Auxiliary cosine integral ``gi(x) = sin(x) (π/2 - Si(x)) - cos(x) Ci(x)``.

    Defined for ``x > 0``; ``gi(x) → ∞`` as ``x → 0+`` and ``gi(0)`` is
    ``DBL_MAX``.
    """
    if x == 0.0:
        return DBL_MAX
    if x >= AUXILIARY_ASYMPTOTIC_CUTOFF:
        return _asymptotic_series(x, 3) / (x * x)
    si, ci = sin_cos_integrals_si_ci(x)
    return _clamp(math.sin(x) * (_PI_2 - si) - math.cos(x) * ci)


__all__ = [
    "EULER_GAMMA",
    "power_series_si",
    "power_series_cin",
    "sin_integral_si",
    "entire_cos_integral_cin",
    "cos_integral_ci",
    "sin_cos_integrals_si_ci",
    "auxiliary_sin_integral_fi",
    "auxiliary_cos_integral_gi",
]
