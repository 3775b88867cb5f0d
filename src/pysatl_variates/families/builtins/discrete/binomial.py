"""
Binomial and negative binomial distribution families implementation.

Both are sampled by splitting: the binomial by Beta order statistics, the
negative binomial as a Gamma mixture of Poisson variates.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import partial
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betainc, gammaln

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
from pysatl_variates.variates.discrete import binomial_variate, negative_binomial_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution: number of successes in n independent
    Bernoulli(p) trials.

    Probability mass function:
        P(X = k) = C(n, k)·p^k·(1 - p)^(n-k)  for k = 0, ..., n

    Cumulative distribution function:
        F(k) = I_(1-p)(n - k, k + 1), the regularized incomplete beta function
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for Binomial distribution.

        Evaluated in the log domain with ``lnΓ`` for the binomial coefficient.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - n: int (number of trials)
            - p: float (success probability)
        x : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probabilities P(X = x)
        """
        parameters = cast(_Trials, parameters)

        n, p = parameters.n, parameters.p
        x = np.asarray(x, dtype=np.float64)
        on_support = IntegerLatticeDiscreteSupport(min_k=0, max_k=n).contains(x)
        k = np.where(on_support, x, 0.0)
        log_mass = (
            gammaln(n + 1.0)
            - gammaln(k + 1.0)
            - gammaln(n - k + 1.0)
            + k * np.log(p)
            + (n - k) * np.log1p(-p)
        )
        return cast(NumericArray, np.where(on_support, np.exp(log_mass), 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for Binomial distribution."""
        parameters = cast(_Trials, parameters)

        n, p = parameters.n, parameters.p
        x = np.asarray(x, dtype=np.float64)
        k = np.floor(np.clip(x, 0.0, n - 1.0))
        probability = betainc(n - k, k + 1.0, 1.0 - p)
        return cast(NumericArray, np.where(x < 0.0, 0.0, np.where(x >= n, 1.0, probability)))

    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], int]:
        """Binomial variate by Beta splitting."""
        parameters = cast(_Trials, parameters)
        return partial(binomial_variate, parameters.n, parameters.p, source)

    def _support(parameters: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of Binomial distribution"""
        parameters = cast(_Trials, parameters)
        return IntegerLatticeDiscreteSupport(min_k=0, max_k=parameters.n)

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["trials"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
        },
        support_by_parametrization=_support,
        variate=variate,
    )
    Binomial.__doc__ = BINOMIAL_DOC

    @parametrization(family=Binomial, name="trials")
    class _Trials(Parametrization):
        """
        Trials parametrization of Binomial distribution.

        Parameters
        ----------
        n : int
            Number of trials
        p : float
            Probability of success in each trial
        """

        n: int
        p: float

        @constraint(description="n is a positive integer")
        def check_n_positive_integer(self) -> bool:
            """Check that the number of trials is a positive integer."""
            return float(self.n).is_integer() and self.n > 0

        @constraint(description="0 < p < 1")
        def check_p_in_range(self) -> bool:
            """Check that success probability lies in (0, 1)."""
            return 0 < self.p < 1

    ParametricFamilyRegister.register(Binomial)


def configure_negative_binomial_family() -> None:
    """
    Configure and register the Negative binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NEGATIVE_BINOMIAL):
        return

    NEGATIVE_BINOMIAL_DOC = """
    Negative binomial distribution: number of failures before the n-th
    success of independent Bernoulli(p) trials.

    Probability mass function:
        P(X = k) = C(k + n - 1, k)·p^n·(1 - p)^k  for k = 0, 1, 2, ...

    Cumulative distribution function:
        F(k) = I_p(n, k + 1), the regularized incomplete beta function
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability mass function for Negative binomial distribution."""
        parameters = cast(_Successes, parameters)

        n, p = parameters.n, parameters.p
        x = np.asarray(x, dtype=np.float64)
        on_support = _SUPPORT.contains(x)
        k = np.where(on_support, x, 0.0)
        log_mass = (
            gammaln(k + n) - gammaln(n) - gammaln(k + 1.0) + n * np.log(p) + k * np.log1p(-p)
        )
        return cast(NumericArray, np.where(on_support, np.exp(log_mass), 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for Negative binomial distribution."""
        parameters = cast(_Successes, parameters)

        x = np.asarray(x, dtype=np.float64)
        k = np.floor(np.where(x >= 0.0, x, 0.0))
        probability = betainc(parameters.n, k + 1.0, parameters.p)
        return cast(NumericArray, np.where(x < 0.0, 0.0, probability))

    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], int]:
        """Negative binomial variate as a Gamma-mixed Poisson."""
        parameters = cast(_Successes, parameters)
        return partial(negative_binomial_variate, parameters.n, parameters.p, source)

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of Negative binomial distribution"""
        return _SUPPORT

    _SUPPORT = IntegerLatticeDiscreteSupport(min_k=0)

    NegativeBinomial = ParametricFamily(
        name=FamilyName.NEGATIVE_BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["successes"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
        },
        support_by_parametrization=_support,
        variate=variate,
    )
    NegativeBinomial.__doc__ = NEGATIVE_BINOMIAL_DOC

    @parametrization(family=NegativeBinomial, name="successes")
    class _Successes(Parametrization):
        """
        Successes parametrization of Negative binomial distribution.

        Parameters
        ----------
        n : int
            Number of successes to wait for
        p : float
            Probability of success in each trial
        """

        n: int
        p: float

        @constraint(description="n is a positive integer")
        def check_n_positive_integer(self) -> bool:
            """Check that the number of successes is a positive integer."""
            return float(self.n).is_integer() and self.n > 0

        @constraint(description="0 < p < 1")
        def check_p_in_range(self) -> bool:
            """Check that success probability lies in (0, 1)."""
            return 0 < self.p < 1

    ParametricFamilyRegister.register(NegativeBinomial)
