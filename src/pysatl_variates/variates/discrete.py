"""
Discrete Samplers
=================

Integer-valued variate generators:

- Bernoulli and Geometric by direct transforms;
- Logarithmic-series by Kemp's method;
- Poisson, Binomial and Negative binomial by gamma/beta splitting with
  exponential waiting times for the remainder.

Notes
-----
Casts to ``int`` truncate toward zero. Degenerate quotients from
out-of-domain parameters saturate instead of raising, see
:func:`~pysatl_variates.variates.guards.saturating_int`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_variates.variates.guards import ieee_div, ieee_log, ieee_pow, saturating_int
from pysatl_variates.variates.sources import resolve_source

if TYPE_CHECKING:
    from pysatl_variates.variates.sources import RandomSource

POISSON_INTER_ARRIVAL_THRESHOLD = 6.0
"""Means up to this value are sampled by counting exponential inter-arrival times."""

BINOMIAL_SPLITTING_THRESHOLD = 3.0
"""Beta splitting continues while ``n * p`` is at least this value."""


def bernoulli_variate(p: float, source: RandomSource | None = None) -> int:
    """
    Bernoulli(p) variate.

    Returns ``1`` when the uniform draw is ``<= p`` (boundary draws count as
    success) and ``0`` otherwise.
    """
    return 1 if resolve_source(source).uniform() <= p else 0


def geometric_variate(p: float, source: RandomSource | None = None) -> int:
    """
    Geometric(p) variate counting failures before the first success.

    Computed as ``int(-e / ln(1 - p))``; both operands are non-positive for
    ``0 < p < 1`` so the truncation equals the floor.
    """
    y = -resolve_source(source).exponential()
    return saturating_int(ieee_div(y, ieee_log(1.0 - p)))


def log_series_variate(p: float, source: RandomSource | None = None) -> int:
    """
    Logarithmic-series(p) variate by Kemp's method.

    The decision runs in a fixed order:

    1. ``u >= p`` returns ``1`` without a second draw;
    2. with ``y = 1 - (1-p)**t`` for a second uniform ``t``, ``u > y`` returns ``1``;
    3. ``u > y²`` returns ``2``;
    4. otherwise ``int(1 + ln(u) / ln(y))``.
    """
    rs = resolve_source(source)
    u = rs.uniform()
    if u >= p:
        return 1
    y = 1.0 - ieee_pow(1.0 - p, rs.uniform())
    if u > y:
        return 1
    if u > y * y:
        return 2
    return saturating_int(1.0 + ieee_div(ieee_log(u), ieee_log(y)))


def _inter_arrival_count(mu: float, rs: RandomSource) -> int:
    x = 0
    total = 0.0
    while total <= mu:
        x += 1
        total += rs.exponential()
    return x - 1


def _waiting_time_count(n: int, p: float, rs: RandomSource) -> int:
    bound = -ieee_log(1.0 - p)
    total = 0.0
    x = 0
    while total <= bound:
        if x >= n:
            return n
        total += rs.exponential() / (n - x)
        x += 1
    return x - 1


def binomial_variate(n: int, p: float, source: RandomSource | None = None) -> int:
    """
    Binomial(n, p) variate.

    While ``n * p >= 3`` the trials are split at ``i = int((n+1) p)`` using the
    i-th order statistic of ``n`` uniforms, a Beta(i, n-i+1) draw. The
    remaining small problem is finished by summing exponential waiting times.
    """
    rs = resolve_source(source)
    x = 0
    while n * p >= BINOMIAL_SPLITTING_THRESHOLD:
        i = saturating_int((n + 1) * p)
        dp = rs.beta(float(i), float(n - i + 1))
        if dp <= p:
            x += i
            n -= i
            p = ieee_div(p - dp, 1.0 - dp)
        else:
            n = i - 1
            p = ieee_div(p, dp)
    if n == 0 or p <= 0.0:
        return x
    return x + _waiting_time_count(n, p, rs)


def poisson_variate(mu: float, source: RandomSource | None = None) -> int:
    """
    Poisson(mu) variate.

    Small means count exponential inter-arrival times. Larger means draw
    ``g ~ Gamma(n)`` with ``n = int(mu / 2)``: if ``g <= mu`` the count is ``n``
    plus a Poisson(mu - g) variate, otherwise Binomial(n - 1, mu / g). An
    infinite mean saturates without drawing.
    """
    rs = resolve_source(source)
    if math.isinf(mu):
        return saturating_int(mu)
    count = 0
    while mu > POISSON_INTER_ARRIVAL_THRESHOLD:
        n = int(0.5 * mu)
        g = rs.gamma(float(n))
        if g > mu:
            return count + binomial_variate(n - 1, mu / g, rs)
        count += n
        mu -= g
    return count + _inter_arrival_count(mu, rs)


def negative_binomial_variate(n: int, p: float, source: RandomSource | None = None) -> int:
    """Negative binomial(n, p) variate as a Gamma(n)-mixed Poisson."""
    rs = resolve_source(source)
    y = rs.gamma(float(n))
    return poisson_variate(ieee_div((1.0 - p) * y, p), rs)


__all__ = [
    "POISSON_INTER_ARRIVAL_THRESHOLD",
    "BINOMIAL_SPLITTING_THRESHOLD",
    "bernoulli_variate",
    "geometric_variate",
    "log_series_variate",
    "binomial_variate",
    "poisson_variate",
    "negative_binomial_variate",
]
