"""
Rejection Samplers
==================

Loop-until-accept generators drawing pairs of uniforms on ``(-1, 1)`` until
the point falls inside the closed unit disk.

The expected number of attempts is ``4 / π ≈ 1.27``. Loops are unbounded by
default; pass ``max_iterations`` to cap them, in which case
:class:`RejectionLimitExceeded` is raised once the cap is exhausted.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_variates.variates.guards import DBL_MAX
from pysatl_variates.variates.sources import resolve_source

if TYPE_CHECKING:
    from pysatl_variates.variates.sources import RandomSource


class RejectionLimitExceeded(RuntimeError):
    """Raised when a capped rejection loop rejects every attempt."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"No candidate accepted after {attempts} attempts")
        self.attempts = attempts


def unit_disk_point(
    source: RandomSource | None = None, max_iterations: int | None = None
) -> tuple[float, float, float]:
    """
    Draw a point uniformly distributed in the closed unit disk.

    Parameters
    ----------
    source : RandomSource, optional
        Source of uniforms; the default source when omitted.
    max_iterations : int, optional
        Upper bound on attempts. ``None`` loops until acceptance.

    Returns
    -------
    tuple[float, float, float]
        ``(u, v, w)`` with ``w = u² + v² <= 1``.

    Raises
    ------
    RejectionLimitExceeded
        If ``max_iterations`` attempts are all rejected.
    """
    rs = resolve_source(source)
    attempts = 0
    while max_iterations is None or attempts < max_iterations:
        attempts += 1
        u = 2.0 * rs.uniform() - 1.0
        v = 2.0 * rs.uniform() - 1.0
        w = u * u + v * v
        if w <= 1.0:
            return u, v, w
    raise RejectionLimitExceeded(attempts)


def cauchy_variate(source: RandomSource | None = None, max_iterations: int | None = None) -> float:
    """
    Standard Cauchy variate by the ratio of uniforms.

    Returns ``u / v`` for the accepted point, or :data:`DBL_MAX` when ``v`` is
    exactly zero.
    """
    u, v, _ = unit_disk_point(source, max_iterations)
    return DBL_MAX if v == 0.0 else u / v


__all__ = [
    "RejectionLimitExceeded",
    "unit_disk_point",
    "cauchy_variate",
]
