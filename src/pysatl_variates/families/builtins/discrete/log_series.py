"""
Logarithmic-series distribution family implementation.

Contains the LogSeries family sampled by Kemp's method.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from functools import partial
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import exp1

from pysatl_variates.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)
from pysatl_variates.variates.discrete import log_series_variate
from pysatl_variates.variates.guards import DBL_EPSILON

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource

EXACT_TERMS = 1 << 20
"""Largest number of mass-function terms the log-series CDF sums explicitly."""


def configure_log_series_family() -> None:
    """
    Configure and register the Logarithmic-series distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOG_SERIES):
        return

    LOG_SERIES_DOC = """
    Logarithmic-series distribution.

    Probability mass function:
        P(X = k) = -p^k / (k·ln(1 - p))  for k = 1, 2, 3, ...

    The CDF is the running sum of the mass function. Variates follow
    Kemp's method, which returns 1 after a single uniform draw whenever
    that draw is at least p.
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for Logarithmic-series distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - p: float (shape, 0 < p < 1)
        x : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probabilities P(X = x); zero off the positive integers
        """
        parameters = cast(_Shape, parameters)

        p = parameters.p
        x = np.asarray(x, dtype=np.float64)
        on_support = _SUPPORT.contains(x)
        k = np.where(on_support, x, 1.0)
        mass = -np.exp(k * math.log(p)) / (k * math.log1p(-p))
        return cast(NumericArray, np.where(on_support, mass, 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Logarithmic-series distribution.

        Partial sums of ``p^i / i`` are accumulated up to ``floor(x)``. Terms
        below ``DBL_EPSILON`` relative to the first no longer change the sum,
        so the accumulation stops there. Beyond ``EXACT_TERMS`` terms the tail
        ``sum_{i>k} p^i / i`` is taken as ``E1((k + 1/2)·(-ln p))`` instead.
        """
        parameters = cast(_Shape, parameters)

        p = parameters.p
        x = np.asarray(x, dtype=np.float64)
        normalizer = -math.log1p(-p)
        negligible_after = int(math.log(DBL_EPSILON) / math.log(p)) + 2
        finite = np.where(np.isfinite(x), x, 1.0)
        k = np.floor(np.clip(finite, 1.0, negligible_after)).astype(np.int64)

        exact = k <= EXACT_TERMS
        length = int(k[exact].max(initial=1))
        i = np.arange(1, length + 1, dtype=np.float64)
        partial_sums = np.cumsum(np.exp(i * math.log(p)) / i) / normalizer

        head = partial_sums[np.minimum(k, length) - 1]
        tail = 1.0 - exp1(-math.log(p) * (k + 0.5)) / normalizer
        probability = np.minimum(np.where(exact, head, tail), 1.0)
        probability = np.where(x < 1.0, 0.0, np.where(np.isinf(x), 1.0, probability))
        return cast(NumericArray, np.where(np.isnan(x), np.nan, probability))


    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], int]:
        """Logarithmic-series variate by Kemp's method."""
        parameters = cast(_Shape, parameters)
        return partial(log_series_variate, parameters.p, source)

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of Logarithmic-series distribution"""
        return _SUPPORT

    _SUPPORT = IntegerLatticeDiscreteSupport(min_k=1)

    LogSeries = ParametricFamily(
        name=FamilyName.LOG_SERIES,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["shape"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
        },
        support_by_parametrization=_support,
        variate=variate,
    )
    LogSeries.__doc__ = LOG_SERIES_DOC

    @parametrization(family=LogSeries, name="shape")
    class _Shape(Parametrization):
        """
        Shape parametrization of Logarithmic-series distribution.

        Parameters
        ----------
        p : float
            Shape parameter, 0 < p < 1
        """

        p: float

        @constraint(description="0 < p < 1")
        def check_p_in_range(self) -> bool:
            """Check that shape parameter lies in (0, 1)."""
            return 0 < self.p < 1

    ParametricFamilyRegister.register(LogSeries)
