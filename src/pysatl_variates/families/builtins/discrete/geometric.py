"""
Geometric distribution family implementation.

Contains the Geometric family counting failures before the first success.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import partial
from typing import TYPE_CHECKING, cast

import numpy as np

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
from pysatl_variates.variates.discrete import geometric_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return

    GEOMETRIC_DOC = """
    Geometric distribution: number of failures before the first success of
    independent Bernoulli(p) trials.

    Probability mass function:
        P(X = k) = p·(1 - p)^k  for k = 0, 1, 2, ...

    Cumulative distribution function:
        F(k) = 1 - (1 - p)^(k+1)

    Variates are ``int(-e / ln(1 - p))`` for an exponential draw e.
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for Geometric distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - p: float (success probability)
        x : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probabilities P(X = x); zero off the non-negative integers
        """
        parameters = cast(_SuccessProbability, parameters)

        p = parameters.p
        x = np.asarray(x, dtype=np.float64)
        on_support = _SUPPORT.contains(x)
        k = np.where(on_support, x, 0.0)
        return cast(NumericArray, np.where(on_support, p * (1.0 - p) ** k, 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function ``1 - (1 - p)^(floor(x) + 1)`` for x ≥ 0."""
        parameters = cast(_SuccessProbability, parameters)

        x = np.asarray(x, dtype=np.float64)
        k = np.floor(np.where(x >= 0.0, x, 0.0))
        with np.errstate(divide="ignore"):
            probability = -np.expm1((k + 1.0) * np.log1p(-parameters.p))
        return cast(NumericArray, np.where(x < 0.0, 0.0, probability))

    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], int]:
        """Geometric variate by inversion of an exponential draw."""
        parameters = cast(_SuccessProbability, parameters)
        return partial(geometric_variate, parameters.p, source)

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of Geometric distribution"""
        return _SUPPORT

    _SUPPORT = IntegerLatticeDiscreteSupport(min_k=0)

    Geometric = ParametricFamily(
        name=FamilyName.GEOMETRIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["probability"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
        },
        support_by_parametrization=_support,
        variate=variate,
    )
    Geometric.__doc__ = GEOMETRIC_DOC

    @parametrization(family=Geometric, name="probability")
    class _SuccessProbability(Parametrization):
        """
        Success-probability parametrization of Geometric distribution.

        Parameters
        ----------
        p : float
            Probability of success in each trial, 0 < p ≤ 1
        """

        p: float

        @constraint(description="0 < p <= 1")
        def check_p_in_range(self) -> bool:
            """Check that success probability lies in (0, 1]."""
            return 0 < self.p <= 1

    ParametricFamilyRegister.register(Geometric)
