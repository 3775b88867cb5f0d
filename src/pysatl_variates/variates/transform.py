"""
Transform Samplers
==================

Stateless one-shot mappings from one or two draws of a
:class:`~pysatl_variates.variates.sources.RandomSource` to a variate of the
target distribution.

Notes
-----
- Parameters are not validated. Out-of-domain shapes produce NaN, infinities
  or meaningless values rather than exceptions.
- Every function accepts ``source=None`` meaning the process-wide default
  source.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_variates.variates.guards import DBL_MAX, ieee_div, ieee_log, ieee_pow
from pysatl_variates.variates.sources import resolve_source

if TYPE_CHECKING:
    from pysatl_variates.variates.sources import RandomSource


def uniform_0_1_variate(source: RandomSource | None = None) -> float:
    """Return a uniform variate on (0, 1)."""
    return resolve_source(source).uniform()


def exponential_variate(source: RandomSource | None = None) -> float:
    """Return a standard exponential variate (mean 1)."""
    return resolve_source(source).exponential()


def weibull_variate(a: float, source: RandomSource | None = None) -> float:
    """
    Weibull variate with shape ``a`` as ``e ** (1/a)``, ``e`` standard exponential.

    An exponential draw of exactly zero returns ``0.0``.
    """
    e = resolve_source(source).exponential()
    if e == 0.0:
        return 0.0
    return ieee_pow(e, ieee_div(1.0, a))


def pareto_variate(a: float, source: RandomSource | None = None) -> float:
    """
    Pareto variate with shape ``a`` and support ``[1, ∞)``.

    Generated as ``1 + e / g`` with ``e`` standard exponential and ``g`` a
    Gamma(a) draw.
    """
    rs = resolve_source(source)
    e = rs.exponential()
    g = rs.gamma(a)
    return 1.0 + ieee_div(e, g)


def gumbel_maximum_variate(source: RandomSource | None = None) -> float:
    """Gumbel (maximum) variate ``-ln(e)``."""
    return -ieee_log(resolve_source(source).exponential())


def gumbel_minimum_variate(source: RandomSource | None = None) -> float:
    """Gumbel (minimum) variate ``ln(e)``."""
    return ieee_log(resolve_source(source).exponential())


def logistic_variate(source: RandomSource | None = None) -> float:
    """Standard logistic variate by inversion, ``ln(u / (1 - u))``."""
    u = resolve_source(source).uniform()
    return ieee_log(ieee_div(u, 1.0 - u))


def laplace_variate(source: RandomSource | None = None) -> float:
    """
    Standard Laplace variate.

    A uniform ``u`` picks the sign of an exponential draw ``e``: ``-e`` for
    ``u < 0.5``, ``e`` for ``u > 0.5`` and exactly ``0.0`` when ``u == 0.5``.
    """
    rs = resolve_source(source)
    u = rs.uniform()
    e = rs.exponential()
    if u < 0.5:
        return -e
    if u > 0.5:
        return e
    return 0.0


def kumaraswamy_variate(a: float, b: float, source: RandomSource | None = None) -> float:
    """Kumaraswamy(a, b) variate by inversion, ``(1 - u**(1/b)) ** (1/a)``."""
    u = resolve_source(source).uniform()
    return ieee_pow(1.0 - ieee_pow(u, ieee_div(1.0, b)), ieee_div(1.0, a))


def t2_variate(source: RandomSource | None = None) -> float:
    """
    Student-t variate with 2 degrees of freedom by inversion.

    Returns ``-DBL_MAX`` for ``u == 0`` and ``DBL_MAX`` for ``u == 1``.
    """
    u = resolve_source(source).uniform()
    if u == 0.0:
        return -DBL_MAX
    if u == 1.0:
        return DBL_MAX
    return math.sqrt(2.0) * (u - 0.5) / math.sqrt(u * (1.0 - u))


def chi_square_variate(n: int, source: RandomSource | None = None) -> float:
    """Chi-square variate with ``n`` degrees of freedom, ``2 * Gamma(n/2)``."""
    return 2.0 * resolve_source(source).gamma(0.5 * n)


def sum_12_uniforms_variate(source: RandomSource | None = None) -> float:
    """
    Approximate standard Gaussian variate ``sum(u_1..u_12) - 6``.

    The result is confined to ``[-6, 6]``.
    """
    rs = resolve_source(source)
    z = 0.0
    for _ in range(12):
        z += rs.uniform()
    return z - 6.0


__all__ = [
    "uniform_0_1_variate",
    "exponential_variate",
    "weibull_variate",
    "pareto_variate",
    "gumbel_maximum_variate",
    "gumbel_minimum_variate",
    "logistic_variate",
    "laplace_variate",
    "kumaraswamy_variate",
    "t2_variate",
    "chi_square_variate",
    "sum_12_uniforms_variate",
]
