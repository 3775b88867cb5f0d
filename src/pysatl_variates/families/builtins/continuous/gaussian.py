"""
Gaussian distribution family implementation.

Contains the Gaussian family sampled by paired-output generators.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import StrEnum
from functools import partial
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import erf, erfinv

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
from pysatl_variates.variates.paired import BoxMullerGenerator, PolarMarsagliaGenerator
from pysatl_variates.variates.transform import sum_12_uniforms_variate

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_variates.variates.sources import RandomSource


class GaussianSamplingMethod(StrEnum):
    """Standard Gaussian generators available to the Gaussian family."""

    POLAR_MARSAGLIA = "polar_marsaglia"
    BOX_MULLER = "box_muller"
    SUM_12_UNIFORMS = "sum_12_uniforms"


def standard_gaussian_generator(
    method: str, source: RandomSource, max_iterations: int | None = None
) -> Callable[[], float]:
    """
    Build a zero-argument standard Gaussian generator.

    Paired methods get a new generator instance, hence a new empty cache.

    Raises
    ------
    ValueError
        If ``method`` is not a :class:`GaussianSamplingMethod`.
    """
    try:
        chosen = GaussianSamplingMethod(method)
    except ValueError:
        known = ", ".join(m.value for m in GaussianSamplingMethod)
        raise ValueError(
            f"Unknown Gaussian sampling method '{method}', expected one of: {known}"
        ) from None

    if chosen is GaussianSamplingMethod.BOX_MULLER:
        return BoxMullerGenerator(source)
    if chosen is GaussianSamplingMethod.SUM_12_UNIFORMS:
        return partial(sum_12_uniforms_variate, source)
    return PolarMarsagliaGenerator(source, max_iterations=max_iterations)


def configure_gaussian_family() -> None:
    """
    Configure and register the Gaussian distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAUSSIAN):
        return

    GAUSSIAN_DOC = """
    Gaussian (normal) distribution.

    Defined by its mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Sampling option ``method`` selects the standard Gaussian generator:
    ``"polar_marsaglia"`` (default), ``"box_muller"`` or
    ``"sum_12_uniforms"`` (an approximation with support [-6, 6]).
    ``max_iterations`` caps the polar method's rejection loop.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Gaussian distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_MeanStd, parameters)

        sigma = parameters.sigma
        z = (x - parameters.mu) / sigma
        return cast(NumericArray, np.exp(-0.5 * z * z) / (sigma * np.sqrt(2 * np.pi)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Gaussian distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields mu and sigma
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_MeanStd, parameters)

        z = (x - parameters.mu) / (parameters.sigma * np.sqrt(2))
        return cast(NumericArray, 0.5 * (1 + erf(z)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Gaussian distribution.

        Returns -inf and inf for p equal to 0 and 1 respectively.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_MeanStd, parameters)
        return cast(
            NumericArray, parameters.mu + parameters.sigma * np.sqrt(2) * erfinv(2 * p - 1)
        )

    def variate(
        parameters: Parametrization,
        source: RandomSource,
        method: str = GaussianSamplingMethod.POLAR_MARSAGLIA,
        max_iterations: int | None = None,
    ) -> Callable[[], float]:
        """Gaussian variate ``mu + sigma * z`` for a standard Gaussian ``z``."""
        parameters = cast(_MeanStd, parameters)
        standard = standard_gaussian_generator(method, source, max_iterations)
        mu, sigma = parameters.mu, parameters.sigma
        return lambda: mu + sigma * standard()

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Gaussian distribution"""
        return ContinuousSupport()

    Gaussian = ParametricFamily(
        name=FamilyName.GAUSSIAN,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
        variate=variate,
        variate_options=("method", "max_iterations"),
    )
    Gaussian.__doc__ = GAUSSIAN_DOC

    @parametrization(family=Gaussian, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of Gaussian distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        sigma : float
            Standard deviation of the distribution
        """

        mu: float = 0.0
        sigma: float = 1.0

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            """Check that standard deviation is positive."""
            return self.sigma > 0

    ParametricFamilyRegister.register(Gaussian)
