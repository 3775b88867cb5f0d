"""
Random Sources
==============

This module defines the single randomness contract used by every variate
generator in the package:

- :class:`RandomSource` — protocol for independent uniform, exponential,
  gamma and beta draws.
- :class:`GeneratorSource` — implementation backed by
  :class:`numpy.random.Generator`.

It also manages the process-wide default source used when a generator is
called without an explicit ``source``.

Notes
-----
- ``uniform()`` must return values in the open interval ``(0, 1)``. Samplers
  still keep their own floor-substitution guards for sources that violate
  this.
- No generator in the package produces randomness except by composing calls
  to a :class:`RandomSource`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for sources of independent random draws."""

    def uniform(self) -> float:
        """Return a uniform variate in the open interval (0, 1)."""
        ...

    def exponential(self) -> float:
        """Return a standard exponential variate (mean 1)."""
        ...

    def gamma(self, a: float) -> float:
        """Return a standard gamma variate with shape ``a``."""
        ...

    def beta(self, a: float, b: float) -> float:
        """Return a beta variate with shapes ``a`` and ``b``."""
        ...


class GeneratorSource:
    """
    Random source backed by a NumPy generator.

    Parameters
    ----------
    seed : int | numpy.random.Generator | None, optional
        Seed or an existing generator. ``None`` draws fresh entropy from the OS.

    Notes
    -----
    ``Generator.random`` samples the half-open interval ``[0, 1)``; an exact
    ``0.0`` is redrawn so that :meth:`uniform` honours the open interval.
    Out-of-domain gamma and beta shapes give NaN instead of raising.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | np.random.Generator | None = None) -> None:
        self._rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        """Underlying NumPy generator."""
        return self._rng

    def uniform(self) -> float:
        u = float(self._rng.random())
        while u == 0.0:
            u = float(self._rng.random())
        return u

    def exponential(self) -> float:
        return float(self._rng.standard_exponential())

    def gamma(self, a: float) -> float:
        if not a >= 0.0:
            return math.nan
        return float(self._rng.standard_gamma(a))

    def beta(self, a: float, b: float) -> float:
        if not (a > 0.0 and b > 0.0):
            return math.nan
        return float(self._rng.beta(a, b))


_default_source: RandomSource | None = None


def get_default_source() -> RandomSource:
    """
    Return the process-wide default source, creating it on first use.

    Returns
    -------
    RandomSource
        The shared default source.
    """
    global _default_source
    if _default_source is None:
        _default_source = GeneratorSource()
    return _default_source


def set_default_source(source: RandomSource) -> None:
    """
    Replace the process-wide default source.

    Raises
    ------
    TypeError
        If ``source`` does not implement :class:`RandomSource`.
    """
    global _default_source
    if not isinstance(source, RandomSource):
        raise TypeError(f"Expected a RandomSource, got {type(source).__name__}")
    _default_source = source


def seed_default_source(seed: int | None) -> RandomSource:
    """
    Install a freshly seeded :class:`GeneratorSource` as the default source.

    Parameters
    ----------
    seed : int or None
        Seed for :func:`numpy.random.default_rng`.

    Returns
    -------
    RandomSource
        The newly installed default source.
    """
    source = GeneratorSource(seed)
    set_default_source(source)
    return source


def reset_default_source() -> None:
    """Drop the default source; the next use creates an unseeded one."""
    global _default_source
    _default_source = None


def resolve_source(source: RandomSource | None) -> RandomSource:
    """Return ``source`` or the process-wide default when it is ``None``."""
    return get_default_source() if source is None else source


__all__ = [
    "RandomSource",
    "GeneratorSource",
    "get_default_source",
    "set_default_source",
    "seed_default_source",
    "reset_default_source",
    "resolve_source",
]
