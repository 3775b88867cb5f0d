"""
Laplace distribution family implementation.

Contains the location-scale Laplace (double exponential) family.
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
from pysatl_variates.variates.transform import laplace_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    LAPLACE_DOC = """
    Laplace (double exponential) distribution.

    Probability density function:
        f(x) = exp(-|z|) / (2·scale),  z = (x - loc) / scale

    Variates are exponential draws with a sign chosen by a uniform draw.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Laplace distribution.

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

        z = (x - parameters.loc) / parameters.scale
        return cast(NumericArray, 0.5 * np.exp(-np.abs(z)) / parameters.scale)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Laplace distribution.

        Returns ``exp(-|z|)/2`` for ``z <= 0`` and ``1 - exp(-|z|)/2`` otherwise.
        """
        parameters = cast(_LocScale, parameters)

        z = (x - parameters.loc) / parameters.scale
        half_tail = 0.5 * np.exp(-np.abs(z))
        return cast(NumericArray, np.where(z <= 0.0, half_tail, 1.0 - half_tail))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Laplace distribution.

        Returns -inf and inf for p equal to 0 and 1 respectively.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_LocScale, parameters)
        p = np.asarray(p, dtype=np.float64)
        with np.errstate(divide="ignore"):
            z = np.where(p < 0.5, np.log(2.0 * p), -np.log(2.0 * (1.0 - p)))
        return cast(NumericArray, parameters.loc + parameters.scale * z)

    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], float]:
        """Laplace variate ``loc + scale * (±e)``."""
        parameters = cast(_LocScale, parameters)
        loc, scale = parameters.loc, parameters.scale
        return lambda: loc + scale * laplace_variate(source)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Laplace distribution"""
        return ContinuousSupport()

    Laplace = ParametricFamily(
        name=FamilyName.LAPLACE,
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
    Laplace.__doc__ = LAPLACE_DOC

    @parametrization(family=Laplace, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of Laplace distribution.

        Parameters
        ----------
        loc : float
            Location (mean and median) of the distribution
        scale : float
            Scale of the distribution
        """

        loc: float = 0.0
        scale: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale is positive."""
            return self.scale > 0

    ParametricFamilyRegister.register(Laplace)
