"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy` — resolves characteristic methods.
- :class:`AnalyticalComputationStrategy` — resolves the closed-form
  characteristics a distribution provides.
- :class:`SamplingStrategy` — draws samples from a distribution.
- :class:`VariateSamplingStrategy` — draws ``(n, 1)`` samples by calling a
  variate generator bound to the distribution and a random source.
- :class:`InverseTransformSamplingStrategy` — draws ``(n, 1)`` samples by
  applying ``ppf`` to uniforms of a random source.

Notes
-----
- Sampling strategies accept a ``source`` option (a
  :class:`~pysatl_variates.variates.sources.RandomSource`); the process-wide
  default source is used when it is omitted.
- Options a strategy does not understand are ignored with a ``UserWarning``.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np
from mypy_extensions import KwArg

from pysatl_variates.distributions.computation import AnalyticalComputation
from pysatl_variates.types import (
    EuclideanDistributionType,
    GenericCharacteristicName,
    Kind,
    Number,
)
from pysatl_variates.variates.sources import RandomSource, resolve_source

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .distribution import Distribution

type VariateFactory = Callable[["Distribution", RandomSource, KwArg(Any)], Callable[[], Number]]
"""Builds a zero-argument variate generator for a distribution and a source."""

SOURCE_OPTION = "source"


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> AnalyticalComputation[In, Out]: ...


class AnalyticalComputationStrategy[In, Out]:
    """
    Characteristic resolver restricted to analytical computations.

    Raises
    ------
    RuntimeError
        If the distribution provides no analytical form of the requested
        characteristic.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> AnalyticalComputation[In, Out]:
        """
        Resolve the analytical method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical computations.
        **options
            Unused; accepted for protocol compatibility.

        Returns
        -------
        AnalyticalComputation
            Callable implementing ``state``.
        """
        computations = distr.analytical_computations
        if state not in computations:
            available = ", ".join(sorted(computations)) or "none"
            raise RuntimeError(
                f"Characteristic '{state}' has no analytical form (available: {available})."
            )
        return computations[state]


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


def _check_sample_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"Sample size must be non-negative, got {n}")


def _warn_unknown_options(options: Iterable[str], known: Iterable[str]) -> None:
    unknown = sorted(set(options) - set(known))
    if unknown:
        # attributed to the caller of Distribution.sample
        warnings.warn(
            f"Ignoring unknown sampling options: {', '.join(unknown)}",
            UserWarning,
            stacklevel=4,
        )


def _sample_dtype(distr: "Distribution") -> type[np.generic]:
    distr_type = distr.distribution_type
    if isinstance(distr_type, EuclideanDistributionType) and distr_type.kind == Kind.DISCRETE:
        return np.int64
    return np.float64


class VariateSamplingStrategy(SamplingStrategy):
    """
    Sampler drawing i.i.d. variates from a dedicated generator.

    Each :meth:`sample` call builds a fresh generator with ``factory``, so
    generators keeping state between draws (e.g. a paired Gaussian cache) are
    never shared between calls.

    Parameters
    ----------
    factory : VariateFactory
        ``factory(distr, source, **options)`` returning a zero-argument
        callable that produces one variate.
    options : Iterable[str], optional
        Names of the options ``factory`` understands, besides ``source``.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``; ``int64`` for discrete distributions,
        ``float64`` otherwise.
    """

    def __init__(self, factory: VariateFactory, options: Iterable[str] = ()) -> None:
        self.factory = factory
        self.options = frozenset(options)

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        _check_sample_size(n)
        source = resolve_source(options.pop(SOURCE_OPTION, None))
        _warn_unknown_options(options, self.options)
        known = {key: value for key, value in options.items() if key in self.options}

        draw = self.factory(distr, source, **known)
        values = np.fromiter(
            (draw() for _ in range(n)), dtype=_sample_dtype(distr), count=n
        ).reshape(n, 1)
        return ArraySample(values)


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)`` drawn from the random source.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        _check_sample_size(n)
        source = resolve_source(options.pop(SOURCE_OPTION, None))
        _warn_unknown_options(options, ())

        ppf = distr.query_method("ppf")
        u = np.array([source.uniform() for _ in range(n)], dtype=np.float64)
        vals = np.asarray(ppf(u), dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)


__all__ = [
    "VariateFactory",
    "ComputationStrategy",
    "AnalyticalComputationStrategy",
    "SamplingStrategy",
    "VariateSamplingStrategy",
    "InverseTransformSamplingStrategy",
]
