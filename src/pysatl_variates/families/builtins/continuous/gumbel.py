"""
Gumbel distribution families implementation.

Contains the location-scale Gumbel families of maxima and of minima, both
sampled from the logarithm of an exponential draw.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

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
from pysatl_variates.variates.transform import gumbel_maximum_variate, gumbel_minimum_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource


def _support(_: Parametrization) -> ContinuousSupport:
    """Support of Gumbel distributions"""
    return ContinuousSupport()


def configure_gumbel_maximum_family() -> None:
    """
    Configure and register the Gumbel (maximum) distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GUMBEL_MAXIMUM):
        return

    GUMBEL_MAXIMUM_DOC = """
    Gumbel distribution of maxima (type I extreme value, right-skewed).

    Probability density function:
        f(x) = exp(-z - exp(-z)) / scale,  z = (x - loc) / scale

    Cumulative distribution function:
        F(x) = exp(-exp(-z))
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Gumbel (maximum) distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - loc: float (mode)
            - scale: float (scale)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_MaximumLocScale, parameters)

        z = (x - parameters.loc) / parameters.scale
        with np.errstate(over="ignore"):
            return cast(NumericArray, np.exp(-z - np.exp(-z)) / parameters.scale)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for Gumbel (maximum) distribution."""
        parameters = cast(_MaximumLocScale, parameters)

        z = (x - parameters.loc) / parameters.scale
        with np.errstate(over="ignore"):
            return cast(NumericArray, np.exp(-np.exp(-z)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function ``loc - scale * ln(-ln p)``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_MaximumLocScale, parameters)
        with np.errstate(divide="ignore"):
            return cast(NumericArray, parameters.loc - parameters.scale * np.log(-np.log(p)))

    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], float]:
        """Gumbel (maximum) variate ``loc - scale * ln(e)``."""
        parameters = cast(_MaximumLocScale, parameters)
        loc, scale = parameters.loc, parameters.scale
        return lambda: loc + scale * gumbel_maximum_variate(source)

    GumbelMaximum = ParametricFamily(
        name=FamilyName.GUMBEL_MAXIMUM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
        variate=variate,
    )
    GumbelMaximum.__doc__ = GUMBEL_MAXIMUM_DOC

    @parametrization(family=GumbelMaximum, name="locScale")
    class _MaximumLocScale(Parametrization):
        """
        Location-scale parametrization of Gumbel (maximum) distribution.

        Parameters
        ----------
        loc : float
            Mode of the distribution
        scale : float
            Scale of the distribution
        """

        loc: float = 0.0
        scale: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale is positive."""
            return self.scale > 0

    ParametricFamilyRegister.register(GumbelMaximum)


def configure_gumbel_minimum_family() -> None:
    """
    Configure and register the Gumbel (minimum) distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GUMBEL_MINIMUM):
        return

    GUMBEL_MINIMUM_DOC = """
    Gumbel distribution of minima (type I extreme value, left-skewed).

    Probability density function:
        f(x) = exp(z - exp(z)) / scale,  z = (x - loc) / scale

    Cumulative distribution function:
        F(x) = 1 - exp(-exp(z))
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for Gumbel (minimum) distribution."""
        parameters = cast(_MinimumLocScale, parameters)

        z = (x - parameters.loc) / parameters.scale
        with np.errstate(over="ignore"):
            return cast(NumericArray, np.exp(z - np.exp(z)) / parameters.scale)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function, evaluated as ``-expm1(-exp(z))``."""
        parameters = cast(_MinimumLocScale, parameters)

        z = (x - parameters.loc) / parameters.scale
        with np.errstate(over="ignore"):
            return cast(NumericArray, -np.expm1(-np.exp(z)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function ``loc + scale * ln(-ln(1 - p))``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_MinimumLocScale, parameters)
        with np.errstate(divide="ignore"):
            return cast(NumericArray, parameters.loc + parameters.scale * np.log(-np.log1p(-p)))

    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], float]:
        """Gumbel (minimum) variate ``loc + scale * ln(e)``."""
        parameters = cast(_MinimumLocScale, parameters)
        loc, scale = parameters.loc, parameters.scale
        return lambda: loc + scale * gumbel_minimum_variate(source)

    GumbelMinimum = ParametricFamily(
        name=FamilyName.GUMBEL_MINIMUM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
        variate=variate,
    )
    GumbelMinimum.__doc__ = GUMBEL_MINIMUM_DOC

    @parametrization(family=GumbelMinimum, name="locScale")
    class _MinimumLocScale(Parametrization):
        """
        Location-scale parametrization of Gumbel (minimum) distribution.

        Parameters
        ----------
        loc : float
            Mode of the distribution
        scale : float
            Scale of the distribution
        """

        loc: float = 0.0
        scale: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale is positive."""
            return self.scale > 0

    ParametricFamilyRegister.register(GumbelMinimum)
