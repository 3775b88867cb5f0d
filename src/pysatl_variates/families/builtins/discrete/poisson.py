"""
Poisson distribution family implementation.

Contains the Poisson family sampled by exponential inter-arrival counting
with gamma splitting for large means.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import partial
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaincc, gammaln

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
from pysatl_variates.variates.discrete import poisson_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution with mean mu.

    Probability mass function:
        P(X = k) = mu^k·exp(-mu) / k!  for k = 0, 1, 2, ...

    Cumulative distribution function:
        F(k) = Q(k + 1, mu), the regularized upper incomplete gamma function

    Means up to 6 are sampled by counting exponential inter-arrival times;
    larger means are reduced by Gamma splitting first.
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for Poisson distribution.

        Evaluated as ``exp(k·ln(mu) - mu - lnΓ(k + 1))``; zero off the
        non-negative integers.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
        x : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probabilities P(X = x)
        """
        parameters = cast(_Mean, parameters)

        mu = parameters.mu
        x = np.asarray(x, dtype=np.float64)
        on_support = _SUPPORT.contains(x)
        k = np.where(on_support, x, 0.0)
        mass = np.exp(k * np.log(mu) - mu - gammaln(k + 1.0))
        return cast(NumericArray, np.where(on_support, mass, 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function ``Q(floor(x) + 1, mu)`` for x ≥ 0, else 0."""
        parameters = cast(_Mean, parameters)

        x = np.asarray(x, dtype=np.float64)
        k = np.floor(np.where(x >= 0.0, x, 0.0))
        return cast(NumericArray, np.where(x < 0.0, 0.0, gammaincc(k + 1.0, parameters.mu)))

    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], int]:
        """Poisson variate."""
        parameters = cast(_Mean, parameters)
        return partial(poisson_variate, parameters.mu, source)

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of Poisson distribution"""
        return _SUPPORT

    _SUPPORT = IntegerLatticeDiscreteSupport(min_k=0)

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["mean"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
        },
        support_by_parametrization=_support,
        variate=variate,
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="mean")
    class _Mean(Parametrization):
        """
        Mean parametrization of Poisson distribution.

        Parameters
        ----------
        mu : float
            Mean (and variance) of the distribution
        """

        mu: float

        @constraint(description="mu > 0")
        def check_mu_positive(self) -> bool:
            """Check that mean is positive."""
            return self.mu > 0

    ParametricFamilyRegister.register(Poisson)
