"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_variates.distributions.distribution import Distribution
from pysatl_variates.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_variates.distributions.computation import AnalyticalComputation
    from pysatl_variates.distributions.sampling import Sample
    from pysatl_variates.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_variates.distributions.support import Support
    from pysatl_variates.families.parametric_family import ParametricFamily
    from pysatl_variates.families.parametrizations import Parametrization
    from pysatl_variates.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.

    Examples
    --------
    >>> from pysatl_variates.families import configure_families_register
    >>> from pysatl_variates.variates import GeneratorSource
    >>> poisson = configure_families_register().get("Poisson")
    >>> distr = poisson(mu=3.5)
    >>> distr.sample(10, source=GeneratorSource(7)).shape
    (10, 1)
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None
    _analytical_cache: tuple[
        tuple[int, str], Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]
    ] | None = field(default=None, init=False, repr=False, compare=False)

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the distribution was created with."""
        return self.parameters.name

    @property
    def base_parameters(self) -> Parametrization:
        """Parameters converted to the family's base parametrization."""
        return self.family.to_base(self.parameters)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Lazily computed and cached per instance. The cache is rebuilt when the
        parametrization object is replaced.
        """
        key = (id(self.parameters), self.parameters.name)
        if self._analytical_cache is None or self._analytical_cache[0] != key:
            computations = self.family._build_analytical_computations(self.parameters)
            self._analytical_cache = (key, computations)
        return self._analytical_cache[1]

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        """Get the computation strategy for this distribution."""
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self._support

    def sample(self, n: int, **options: Any) -> Sample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        **options : Any
            Sampling options, e.g. ``source`` (a random source) or, for the
            Gaussian family, ``method``.

        Returns
        -------
        Sample
            Generated samples of shape ``(n, 1)``.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)
