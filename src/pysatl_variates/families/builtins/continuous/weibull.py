"""
Weibull distribution family implementation.

Contains the one-parameter (shape) Weibull family.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
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
from pysatl_variates.variates.guards import DBL_MAX
from pysatl_variates.variates.transform import weibull_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource

LOG_DBL_MAX = math.log(DBL_MAX)


def configure_weibull_family() -> None:
    """
    Configure and register the Weibull distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.WEIBULL):
        return

    WEIBULL_DOC = """
    Weibull distribution with shape a (unit scale).

    Probability density function:
        f(x) = a·x^(a-1)·exp(-x^a) for x > 0

    At x = 0 the density is 0 for a > 1, 1 for a = 1 and unbounded for
    a < 1, reported as DBL_MAX.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Weibull distribution.

        Evaluated in the log domain; values that would overflow are clamped
        to ``DBL_MAX``.

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
        positive = np.where(x > 0.0, x, 1.0)
        with np.errstate(over="ignore"):
            log_density = math.log(a) + (a - 1.0) * np.log(positive) - positive**a
        density = np.where(
            log_density >= LOG_DBL_MAX, DBL_MAX, np.exp(np.minimum(log_density, LOG_DBL_MAX))
        )

        if a > 1.0:
            at_zero = 0.0
        elif a == 1.0:
            at_zero = 1.0
        else:
            at_zero = DBL_MAX
        return cast(NumericArray, np.where(x < 0.0, 0.0, np.where(x == 0.0, at_zero, density)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function ``1 - exp(-x^a)`` for x > 0, else 0."""
        parameters = cast(_Shape, parameters)

        x = np.asarray(x, dtype=np.float64)
        positive = np.where(x > 0.0, x, 0.0)
        with np.errstate(over="ignore"):
            return cast(NumericArray, np.where(x <= 0.0, 0.0, -np.expm1(-(positive**parameters.a))))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function ``(-ln(1 - p))^(1/a)``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_Shape, parameters)
        with np.errstate(divide="ignore"):
            return cast(NumericArray, (-np.log1p(-p)) ** (1.0 / parameters.a))

    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], float]:
        """Weibull variate ``e^(1/a)`` of an exponential draw ``e``."""
        parameters = cast(_Shape, parameters)
        return partial(weibull_variate, parameters.a, source)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Weibull distribution"""
        return ContinuousSupport(left=0.0)

    Weibull = ParametricFamily(
        name=FamilyName.WEIBULL,
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
    Weibull.__doc__ = WEIBULL_DOC

    @parametrization(family=Weibull, name="shape")
    class _Shape(Parametrization):
        """
        Shape parametrization of Weibull distribution.

        Parameters
        ----------
        a : float
            Shape parameter of the distribution
        """

        a: float

        @constraint(description="a > 0")
        def check_a_positive(self) -> bool:
            """Check that shape parameter is positive."""
            return self.a > 0

    ParametricFamilyRegister.register(Weibull)
