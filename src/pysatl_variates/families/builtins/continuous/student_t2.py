"""
Student-t distribution with two degrees of freedom.

Contains the parameter-free StudentT2 family, which has closed-form CDF and
inverse CDF.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import Parametrization, parametrization
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)
from pysatl_variates.variates.transform import t2_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource

DENSITY_CUTOFF = 3.5553731598732436e102
"""``1 / cbrt(DBL_MIN)``: beyond this ``|x|`` the density underflows to zero."""

CDF_SATURATION = 9.4906265624251559e07
"""``sqrt(2 / DBL_EPSILON)``: beyond this ``|x|`` the CDF is exactly 0 or 1."""


def configure_student_t2_family() -> None:
    """
    Configure and register the Student-t(2) distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.STUDENT_T2):
        return

    STUDENT_T2_DOC = """
    Student's t distribution with 2 degrees of freedom.

    Probability density function:
        f(x) = (2 + x²)^(-3/2)

    Cumulative distribution function:
        F(x) = (1 + x / sqrt(2 + x²)) / 2

    Variates are obtained by inverting F on a uniform draw.
    """

    def pdf(_: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Student-t(2) distribution.

        Parameters
        ----------
        _ : Parametrization
            Parameter-free parametrization
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        x = np.asarray(x, dtype=np.float64)
        bounded = np.where(np.abs(x) < DENSITY_CUTOFF, x, 0.0)
        p = 1.0 / (2.0 + bounded * bounded)
        return cast(NumericArray, np.where(np.abs(x) < DENSITY_CUTOFF, p * np.sqrt(p), 0.0))

    def cdf(_: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function, saturated for ``|x| > sqrt(2/ε)``."""
        x = np.asarray(x, dtype=np.float64)
        bounded = np.clip(x, -CDF_SATURATION, CDF_SATURATION)
        probability = 0.5 * (1.0 + bounded / np.sqrt(2.0 + bounded * bounded))
        return cast(
            NumericArray,
            np.where(x > CDF_SATURATION, 1.0, np.where(x < -CDF_SATURATION, 0.0, probability)),
        )

    def ppf(_: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function ``sqrt(2)·(p - 1/2) / sqrt(p(1 - p))``.

        Returns -inf and inf for p equal to 0 and 1 respectively.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        p = np.asarray(p, dtype=np.float64)
        inner = np.where((p > 0.0) & (p < 1.0), p, 0.5)
        q = np.sqrt(2.0) * (inner - 0.5) / np.sqrt(inner * (1.0 - inner))
        return cast(NumericArray, np.where(p == 0.0, -np.inf, np.where(p == 1.0, np.inf, q)))

    def variate(_: Parametrization, source: RandomSource) -> Callable[[], float]:
        """Student-t(2) variate by inversion."""
        return lambda: t2_variate(source)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Student-t(2) distribution"""
        return ContinuousSupport()

    StudentT2 = ParametricFamily(
        name=FamilyName.STUDENT_T2,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
        variate=variate,
    )
    StudentT2.__doc__ = STUDENT_T2_DOC

    @parametrization(family=StudentT2, name="standard")
    class _Standard(Parametrization):
        """Student-t(2) has no free parameters."""

    ParametricFamilyRegister.register(StudentT2)
