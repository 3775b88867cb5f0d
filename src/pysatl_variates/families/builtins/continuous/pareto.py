"""
Pareto distribution family implementation.

Contains the one-parameter Pareto family with support [1, ∞).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import partial
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_variates.distributions.support import ContinuousSupport
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
    UnivariateContinuous,
)
from pysatl_variates.variates.transform import pareto_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource


def configure_pareto_family() -> None:
    """
    Configure and register the Pareto distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.PARETO):
        return

    PARETO_DOC = """
    Pareto distribution with shape a and unit minimum.

    Probability density function:
        f(x) = a / x^(a+1) for x ≥ 1

    Variates are ``1 + e/g`` for an exponential draw e and a Gamma(a) draw g.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Pareto distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - a: float (shape)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_Shape, parameters)

        a = parameters.a
        x = np.asarray(x, dtype=np.float64)
        tail = np.where(x >= 1.0, x, 1.0)
        return cast(NumericArray, np.where(x < 1.0, 0.0, a / tail ** (a + 1.0)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function ``1 - x^(-a)`` for x ≥ 1, else 0."""
        parameters = cast(_Shape, parameters)

        x = np.asarray(x, dtype=np.float64)
        tail = np.where(x >= 1.0, x, 1.0)
        return cast(NumericArray, np.where(x < 1.0, 0.0, 1.0 - tail ** (-parameters.a)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function ``(1 - p)^(-1/a)``.

        Returns 1 for p = 0 and inf for p = 1.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_Shape, parameters)
        survival = 1.0 - np.asarray(p, dtype=np.float64)
        with np.errstate(divide="ignore"):
            return cast(NumericArray, np.power(survival, -1.0 / parameters.a))

    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], float]:
        """Pareto variate from an exponential and a gamma draw."""
        parameters = cast(_Shape, parameters)
        return partial(pareto_variate, parameters.a, source)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Pareto distribution"""
        return ContinuousSupport(left=1.0)

    Pareto = ParametricFamily(
        name=FamilyName.PARETO,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shape"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
        variate=variate,
    )
    Pareto.__doc__ = PARETO_DOC

    @parametrization(family=Pareto, name="shape")
    class _Shape(Parametrization):
        """
        Shape parametrization of Pareto distribution.

        Parameters
        ----------
        a : float
            Shape (tail index) of the distribution
        """

        a: float

        @constraint(description="a > 0")
        def check_a_positive(self) -> bool:
            """Check that shape parameter is positive."""
            return self.a > 0

    ParametricFamilyRegister.register(Pareto)
