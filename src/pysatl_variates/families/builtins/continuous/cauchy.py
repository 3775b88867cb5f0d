"""
Cauchy distribution family implementation.

Contains the location-scale Cauchy family sampled by the ratio of uniforms.
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
from pysatl_variates.variates.rejection import cauchy_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return

    CAUCHY_DOC = """
    Cauchy distribution.

    Heavy-tailed symmetric distribution with no finite mean, defined by a
    location and a scale.

    Probability density function:
        f(x) = 1 / (π·scale·(1 + z²)),  z = (x - loc) / scale

    Variates are ``loc + scale * u / v`` for a point ``(u, v)`` drawn in the
    unit disk by rejection; ``max_iterations`` caps the rejection loop.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Cauchy distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - loc: float (location, the median)
            - scale: float (half width at half maximum)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_LocScale, parameters)

        z = (x - parameters.loc) / parameters.scale
        return cast(NumericArray, 1.0 / (np.pi * parameters.scale * (1.0 + z * z)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function, ``1/2 + arctan(z)/π``."""
        parameters = cast(_LocScale, parameters)

        z = (x - parameters.loc) / parameters.scale
        return cast(NumericArray, 0.5 + np.arctan(z) / np.pi)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Cauchy distribution.

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
        q = parameters.loc + parameters.scale * np.tan(np.pi * (p - 0.5))
        return cast(NumericArray, np.where(p == 0, -np.inf, np.where(p == 1, np.inf, q)))

    def variate(
        parameters: Parametrization, source: RandomSource, max_iterations: int | None = None
    ) -> Callable[[], float]:
        """Cauchy variate by the ratio of uniforms."""
        parameters = cast(_LocScale, parameters)
        loc, scale = parameters.loc, parameters.scale
        return lambda: loc + scale * cauchy_variate(source, max_iterations)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Cauchy distribution"""
        return ContinuousSupport()

    Cauchy = ParametricFamily(
        name=FamilyName.CAUCHY,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
        variate=variate,
        variate_options=("max_iterations",),
    )
    Cauchy.__doc__ = CAUCHY_DOC

    @parametrization(family=Cauchy, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of Cauchy distribution.

        Parameters
        ----------
        loc : float
            Location (median) of the distribution
        scale : float
            Scale of the distribution
        """

        loc: float = 0.0
        scale: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale is positive."""
            return self.scale > 0

    ParametricFamilyRegister.register(Cauchy)
