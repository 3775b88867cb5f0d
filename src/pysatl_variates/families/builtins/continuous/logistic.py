"""
Logistic distribution family implementation.

Contains the location-scale Logistic family sampled by inversion.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import expit, logit

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
from pysatl_variates.variates.transform import logistic_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource


def configure_logistic_family() -> None:
    """
    Configure and register the Logistic distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGISTIC):
        return

    LOGISTIC_DOC = """
    Logistic distribution.

    Probability density function:
        f(x) = exp(-z) / (scale·(1 + exp(-z))²),  z = (x - loc) / scale

    Cumulative distribution function:
        F(x) = 1 / (1 + exp(-z))
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Logistic distribution.

        Evaluated as ``exp(-|z|) / (1 + exp(-|z|))²`` which is symmetric and
        does not overflow in either tail.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - loc: float (location)
            - scale: float (scale)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_LocScale, parameters)

        tail = np.exp(-np.abs((x - parameters.loc) / parameters.scale))
        return cast(NumericArray, tail / (parameters.scale * (1.0 + tail) ** 2))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for Logistic distribution."""
        parameters = cast(_LocScale, parameters)
        return cast(NumericArray, expit((x - parameters.loc) / parameters.scale))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function ``loc + scale * ln(p / (1 - p))``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_LocScale, parameters)
        return cast(NumericArray, parameters.loc + parameters.scale * logit(p))

    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], float]:
        """Logistic variate by inversion of a uniform draw."""
        parameters = cast(_LocScale, parameters)
        loc, scale = parameters.loc, parameters.scale
        return lambda: loc + scale * logistic_variate(source)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Logistic distribution"""
        return ContinuousSupport()

    Logistic = ParametricFamily(
        name=FamilyName.LOGISTIC,
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
    Logistic.__doc__ = LOGISTIC_DOC

    @parametrization(family=Logistic, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of Logistic distribution.

        Parameters
        ----------
        loc : float
            Location (mean) of the distribution
        scale : float
            Scale of the distribution
        """

        loc: float = 0.0
        scale: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale is positive."""
            return self.scale > 0

    ParametricFamilyRegister.register(Logistic)
