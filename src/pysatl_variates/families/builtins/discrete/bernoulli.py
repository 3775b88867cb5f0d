"""
Bernoulli distribution family implementation.
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
from pysatl_variates.variates.discrete import bernoulli_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    BERNOULLI_DOC = """
    Bernoulli distribution: a single trial succeeding (1) with probability p
    and failing (0) otherwise.

    A uniform draw u yields 1 when u ≤ p.
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function: ``1 - p`` at 0, ``p`` at 1, zero elsewhere.

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
            Probabilities P(X = x)
        """
        parameters = cast(_SuccessProbability, parameters)

        p = parameters.p
        x = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, np.where(x == 0.0, 1.0 - p, np.where(x == 1.0, p, 0.0)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function: 0 below 0, ``1 - p`` on [0, 1), 1 from 1 on."""
        parameters = cast(_SuccessProbability, parameters)

        x = np.asarray(x, dtype=np.float64)
        return cast(
            NumericArray, np.where(x < 0.0, 0.0, np.where(x < 1.0, 1.0 - parameters.p, 1.0))
        )

    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], int]:
        """Bernoulli variate ``1 if u <= p else 0``."""
        parameters = cast(_SuccessProbability, parameters)
        return partial(bernoulli_variate, parameters.p, source)

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of Bernoulli distribution"""
        return IntegerLatticeDiscreteSupport(min_k=0, max_k=1)

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["probability"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
        },
        support_by_parametrization=_support,
        variate=variate,
    )
    Bernoulli.__doc__ = BERNOULLI_DOC

    @parametrization(family=Bernoulli, name="probability")
    class _SuccessProbability(Parametrization):
        """
        Success-probability parametrization of Bernoulli distribution.

        Parameters
        ----------
        p : float
            Probability of success, 0 ≤ p ≤ 1
        """

        p: float

        @constraint(description="0 <= p <= 1")
        def check_p_in_range(self) -> bool:
            """Check that success probability lies in [0, 1]."""
            return 0 <= self.p <= 1

    ParametricFamilyRegister.register(Bernoulli)
