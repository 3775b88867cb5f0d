"""
Chi-square distribution family implementation.

Contains the Chi-square family with an integer number of degrees of freedom.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammainc, gammaln

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
from pysatl_variates.variates.transform import chi_square_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource


def configure_chi_square_family() -> None:
    """
    Configure and register the Chi-square distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARE):
        return

    CHI_SQUARE_DOC = """
    Chi-square distribution with n degrees of freedom.

    Probability density function:
        f(x) = (x/2)^(n/2-1)·exp(-x/2) / (2·Γ(n/2)) for x > 0

    Cumulative distribution function:
        F(x) = P(n/2, x/2), the regularized lower incomplete gamma function

    At x = 0 the density is unbounded for n = 1 (reported as DBL_MAX),
    1/2 for n = 2 and 0 otherwise. Variates are twice a Gamma(n/2) draw.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Chi-square distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - n: int (degrees of freedom)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_DegreesOfFreedom, parameters)

        n2 = 0.5 * parameters.n
        x = np.asarray(x, dtype=np.float64)
        positive = np.where(x > 0.0, x, 1.0)
        density = 0.5 * np.exp((n2 - 1.0) * np.log(0.5 * positive) - 0.5 * positive - gammaln(n2))

        if parameters.n == 1:
            at_zero = DBL_MAX
        elif parameters.n == 2:
            at_zero = 0.5
        else:
            at_zero = 0.0
        return cast(NumericArray, np.where(x < 0.0, 0.0, np.where(x == 0.0, at_zero, density)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for Chi-square distribution."""
        parameters = cast(_DegreesOfFreedom, parameters)

        x = np.asarray(x, dtype=np.float64)
        positive = np.where(x > 0.0, x, 0.0)
        return cast(
            NumericArray, np.where(x <= 0.0, 0.0, gammainc(0.5 * parameters.n, 0.5 * positive))
        )

    def variate(parameters: Parametrization, source: RandomSource) -> Callable[[], float]:
        """Chi-square variate ``2 * Gamma(n/2)``."""
        parameters = cast(_DegreesOfFreedom, parameters)
        n = parameters.n
        return lambda: chi_square_variate(n, source)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Chi-square distribution"""
        return ContinuousSupport(left=0.0)

    ChiSquare = ParametricFamily(
        name=FamilyName.CHI_SQUARE,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["dof"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
        },
        support_by_parametrization=_support,
        variate=variate,
    )
    ChiSquare.__doc__ = CHI_SQUARE_DOC

    @parametrization(family=ChiSquare, name="dof")
    class _DegreesOfFreedom(Parametrization):
        """
        Degrees-of-freedom parametrization of Chi-square distribution.

        Parameters
        ----------
        n : int
            Number of degrees of freedom
        """

        n: int

        @constraint(description="n is an integer")
        def check_n_integer(self) -> bool:
            """Check that the number of degrees of freedom is integral."""
            return float(self.n).is_integer()

        @constraint(description="n > 0")
        def check_n_positive(self) -> bool:
            """Check that the number of degrees of freedom is positive."""
            return self.n > 0

    ParametricFamilyRegister.register(ChiSquare)
