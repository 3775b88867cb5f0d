"""
Kumaraswamy distribution family implementation.

Contains the two-shape Kumaraswamy family on the unit interval.
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
from pysatl_variates.variates.transform import kumaraswamy_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource


def configure_kumaraswamy_family() -> None:
    """
    Configure and register the Kumaraswamy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.KUMARASWAMY):
        return

    KUMARASWAMY_DOC = """
    Kumaraswamy distribution with shapes a and b.

    Probability density function:
        f(x) = a·b·x^(a-1)·(1 - x^a)^(b-1) for 0 < x < 1

    Cumulative distribution function:
        F(x) = 1 - (1 - x^a)^b

    A beta-like distribution with a closed-form inverse, sampled by inversion.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Kumaraswamy distribution.

        Zero outside the open interval (0, 1).

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - a: float (first shape)
            - b: float (second shape)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_Shapes, parameters)

        a, b = parameters.a, parameters.b
        x = np.asarray(x, dtype=np.float64)
        inside = (x > 0.0) & (x < 1.0)
        t = np.where(inside, x, 0.5)
        x_pow = t ** (a - 1.0)
        density = a * b * x_pow * (1.0 - x_pow * t) ** (b - 1.0)
        return cast(NumericArray, np.where(inside, density, 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function; 0 for x ≤ 0 and 1 for x ≥ 1."""
        parameters = cast(_Shapes, parameters)

        x = np.asarray(x, dtype=np.float64)
        t = np.clip(x, 0.0, 1.0)
        probability = 1.0 - (1.0 - t**parameters.a) ** parameters.b
        return cast(NumericArray, np.where(x <= 0.0, 0.0, np.where(x >= 1.0, 1.0, probability)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function ``(1 - (1 - p)^(1/b))^(1/a)``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_Shapes, parameters)
        survival = 1.0 - np.asarray(p, dtype=np.float64)
        return cast(
            NumericArray, (1.0 - survival ** (1.0 / parameters.b)) ** (1.0 / parameters.a)
        )

    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], float]:
        """Kumaraswamy variate by inversion of a uniform draw."""
        parameters = cast(_Shapes, parameters)
        return partial(kumaraswamy_variate, parameters.a, parameters.b, source)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Kumaraswamy distribution"""
        return ContinuousSupport(left=0.0, right=1.0)

    Kumaraswamy = ParametricFamily(
        name=FamilyName.KUMARASWAMY,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapes"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
        variate=variate,
    )
    Kumaraswamy.__doc__ = KUMARASWAMY_DOC

    @parametrization(family=Kumaraswamy, name="shapes")
    class _Shapes(Parametrization):
        """
        Shape parametrization of Kumaraswamy distribution.

        Parameters
        ----------
        a : float
            First shape parameter
        b : float
            Second shape parameter
        """

        a: float
        b: float

        @constraint(description="a > 0")
        def check_a_positive(self) -> bool:
            """Check that first shape parameter is positive."""
            return self.a > 0

        @constraint(description="b > 0")
        def check_b_positive(self) -> bool:
            """Check that second shape parameter is positive."""
            return self.b > 0

    ParametricFamilyRegister.register(Kumaraswamy)
