"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of PySATL variates:

- Continuous families: Gaussian, Cauchy, Laplace, Logistic, Gumbel (maximum
  and minimum), Weibull, Pareto, Kumaraswamy, Chi-square, Student t(2),
  Exponential and Continuous uniform.
- Discrete families: Poisson, Geometric, Logarithmic series, Bernoulli,
  Binomial and Negative binomial.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Every family samples through its dedicated variate generator.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_variates.families.builtins import (
    configure_bernoulli_family,
    configure_binomial_family,
    configure_cauchy_family,
    configure_chi_square_family,
    configure_exponential_family,
    configure_gaussian_family,
    configure_geometric_family,
    configure_gumbel_maximum_family,
    configure_gumbel_minimum_family,
    configure_kumaraswamy_family,
    configure_laplace_family,
    configure_log_series_family,
    configure_logistic_family,
    configure_negative_binomial_family,
    configure_pareto_family,
    configure_poisson_family,
    configure_student_t2_family,
    configure_uniform_family,
    configure_weibull_family,
)
from pysatl_variates.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_gaussian_family()
    configure_cauchy_family()
    configure_laplace_family()
    configure_logistic_family()
    configure_gumbel_maximum_family()
    configure_gumbel_minimum_family()
    configure_weibull_family()
    configure_pareto_family()
    configure_kumaraswamy_family()
    configure_chi_square_family()
    configure_student_t2_family()
    configure_exponential_family()
    configure_uniform_family()

    configure_poisson_family()
    configure_geometric_family()
    configure_log_series_family()
    configure_bernoulli_family()
    configure_binomial_family()
    configure_negative_binomial_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
