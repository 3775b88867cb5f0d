"""
Support primitives for distributions.

- :class:`ContinuousSupport` — an interval of the real line.
- :class:`IntegerLatticeDiscreteSupport` — integer points
  ``{residue + k * modulus}``, optionally bounded on either side.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import floor
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_variates.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[Number]: ...

    def iter_leq(self, x: Number) -> Iterator[Number]: ...


@dataclass(slots=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Integer lattice support.

    Parameters
    ----------
    residue : int
        Any lattice point; points are ``residue + j * modulus``.
    modulus : int
        Positive step between consecutive points.
    min_k, max_k : int, optional
        Inclusive bounds; ``None`` leaves the side unbounded.
    """

    residue: int = 0
    modulus: int = 1
    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError("modulus must be a positive integer.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        finite = np.isfinite(xf)
        v = np.floor(np.where(finite, xf, 0.0))
        mask = finite & (xf == v)

        if self.min_k is not None:
            mask &= v >= self.min_k
        if self.max_k is not None:
            mask &= v <= self.max_k
        mask &= np.mod(v - self.residue, self.modulus) == 0

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def first(self) -> int | None:
        """Smallest support point, or ``None`` when unbounded on the left or empty."""
        if self.min_k is None:
            return None
        first = self.min_k + (self.residue - self.min_k) % self.modulus
        if self.max_k is not None and first > self.max_k:
            return None
        return first

    def last(self) -> int | None:
        """Largest support point, or ``None`` when unbounded on the right or empty."""
        if self.max_k is None:
            return None
        last = self.max_k - (self.max_k - self.residue) % self.modulus
        if self.min_k is not None and last < self.min_k:
            return None
        return last

    def iter_points(self) -> Iterator[int]:
        """
        Iterate over the support in increasing order.

        Raises
        ------
        RuntimeError
            If the support is unbounded on the left.
        """
        return self._iter_between(self.max_k)

    def iter_leq(self, x: Number) -> Iterator[int]:
        """
        Iterate over the support points ``<= x`` in increasing order.

        Raises
        ------
        RuntimeError
            If the support is unbounded on the left.
        """
        bound = int(floor(float(x)))
        if self.max_k is not None:
            bound = min(bound, self.max_k)
        return self._iter_between(bound)

    def _iter_between(self, bound: int | None) -> Iterator[int]:
        if self.min_k is None:
            raise RuntimeError(
                "Cannot enumerate a left-unbounded IntegerLatticeDiscreteSupport; provide min_k."
            )
        first = self.first()
        current = first if first is not None else self.min_k
        while first is not None and (bound is None or current <= bound):
            yield current
            current += self.modulus

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
