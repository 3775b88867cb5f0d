"""
Paired-Output Gaussian Generators
=================================

Box–Muller and Polar-Marsaglia each turn one expensive step into *two*
independent standard Gaussian variates. They expose a single-variate
:meth:`PairedGaussianGenerator.sample` backed by an explicit per-instance
cache:

- calls 1, 3, 5, … compute a fresh pair, return the first value and cache
  the second;
- calls 2, 4, 6, … return the cached value and invalidate the cache.

Notes
-----
- The cache belongs to the generator instance; two instances never share one.
- Instances are not thread-safe. Concurrent callers sharing an instance may
  receive the same cached value twice; give each caller its own instance or
  serialize access externally.

This module also keeps the process-wide pluggable Gaussian generator used by
:func:`gaussian_variate`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_variates.variates.guards import floor_to_tiny
from pysatl_variates.variates.rejection import unit_disk_point
from pysatl_variates.variates.sources import resolve_source

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource

    type GaussianGenerator = Callable[[], float]

_TWO_PI = 2.0 * math.pi


@dataclass(slots=True)
class PairedVariateCache:
    """
    Second variate of the last computed pair.

    Attributes
    ----------
    value : float
        Cached variate; meaningful only while ``valid`` is True.
    valid : bool
        Whether ``value`` is waiting to be consumed.
    """

    value: float = 0.0
    valid: bool = False

    def store(self, value: float) -> None:
        self.value = value
        self.valid = True

    def consume(self) -> float:
        self.valid = False
        return self.value

    def clear(self) -> None:
        self.value = 0.0
        self.valid = False


class PairedGaussianGenerator(ABC):
    """
    Base class for generators producing standard Gaussians in pairs.

    Parameters
    ----------
    source : RandomSource, optional
        Source of uniforms. ``None`` resolves the process-wide default source
        each time a new pair is computed.
    """

    def __init__(self, source: RandomSource | None = None) -> None:
        self.source = source
        self.cache = PairedVariateCache()

    @abstractmethod
    def generate_pair(self) -> tuple[float, float]:
        """Compute two independent standard Gaussian variates."""

    def sample(self) -> float:
        """
        Return the next standard Gaussian variate.

        Returns the cached second variate if one is pending, otherwise
        computes a new pair and caches its second element.
        """
        if self.cache.valid:
            return self.cache.consume()
        first, second = self.generate_pair()
        self.cache.store(second)
        return first

    def reset(self) -> None:
        """Discard a pending cached variate."""
        self.cache.clear()

    __call__ = sample


class BoxMullerGenerator(PairedGaussianGenerator):
    """
    Box–Muller transform.

    With uniforms ``u`` and ``v``, ``r = sqrt(-2 ln u)`` and the pair is
    ``(r cos 2πv, r sin 2πv)``. A zero ``u`` is replaced by ``DBL_MIN``
    before the logarithm.
    """

    def generate_pair(self) -> tuple[float, float]:
        rs = resolve_source(self.source)
        u = floor_to_tiny(rs.uniform())
        r = math.sqrt(-2.0 * math.log(u))
        v = rs.uniform()
        return r * math.cos(_TWO_PI * v), r * math.sin(_TWO_PI * v)


class PolarMarsagliaGenerator(PairedGaussianGenerator):
    """
    Marsaglia's polar method.

    A point ``(u, v)`` is drawn in the unit disk by rejection,
    ``w = u² + v²``, ``k = sqrt(-2 ln w / w)`` and the pair is
    ``(u k, v k)``. A zero ``w`` is replaced by ``DBL_MIN`` before the
    logarithm.

    Parameters
    ----------
    source : RandomSource, optional
        Source of uniforms.
    max_iterations : int, optional
        Cap on rejection attempts per pair; unbounded when ``None``.
    """

    def __init__(
        self, source: RandomSource | None = None, max_iterations: int | None = None
    ) -> None:
        super().__init__(source)
        self.max_iterations = max_iterations

    def generate_pair(self) -> tuple[float, float]:
        u, v, w = unit_disk_point(resolve_source(self.source), self.max_iterations)
        w = floor_to_tiny(w)
        k = math.sqrt(-2.0 * math.log(w) / w)
        return u * k, v * k


_gaussian_generator: GaussianGenerator | None = None


def get_gaussian_generator() -> GaussianGenerator:
    """
    Return the generator behind :func:`gaussian_variate`.

    A :class:`PolarMarsagliaGenerator` over the default source is created on
    first use.
    """
    global _gaussian_generator
    if _gaussian_generator is None:
        _gaussian_generator = PolarMarsagliaGenerator()
    return _gaussian_generator


def set_gaussian_generator(generator: GaussianGenerator) -> None:
    """
    Install the generator used by :func:`gaussian_variate`.

    Parameters
    ----------
    generator : Callable[[], float]
        Any zero-argument callable returning a standard Gaussian variate,
        e.g. a :class:`PairedGaussianGenerator` instance or a function.

    Notes
    -----
    Replacing a paired generator that still holds a cached variate discards
    that variate; a ``UserWarning`` is emitted in that case.
    """
    global _gaussian_generator
    previous = _gaussian_generator
    if (
        isinstance(previous, PairedGaussianGenerator)
        and previous is not generator
        and previous.cache.valid
    ):
        warnings.warn(
            "Replacing the Gaussian generator discards its cached variate",
            UserWarning,
            stacklevel=2,
        )
    _gaussian_generator = generator


def reset_gaussian_generator() -> None:
    """Forget the installed generator; the default is recreated on next use."""
    global _gaussian_generator
    _gaussian_generator = None


def gaussian_variate() -> float:
    """Return a standard Gaussian variate from the installed generator."""
    return get_gaussian_generator()()


__all__ = [
    "PairedVariateCache",
    "PairedGaussianGenerator",
    "BoxMullerGenerator",
    "PolarMarsagliaGenerator",
    "get_gaussian_generator",
    "set_gaussian_generator",
    "reset_gaussian_generator",
    "gaussian_variate",
]
