"""
Built-in distribution families for PySATL variates.

This package contains the statistical distribution families available by
default, each backed by a dedicated variate generator.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.continuous import (
    GaussianSamplingMethod,
    configure_cauchy_family,
    configure_chi_square_family,
    configure_exponential_family,
    configure_gaussian_family,
    configure_gumbel_maximum_family,
    configure_gumbel_minimum_family,
    configure_kumaraswamy_family,
    configure_laplace_family,
    configure_logistic_family,
    configure_pareto_family,
    configure_student_t2_family,
    configure_uniform_family,
    configure_weibull_family,
    standard_gaussian_generator,
)
from pysatl_variates.families.builtins.discrete import (
    configure_bernoulli_family,
    configure_binomial_family,
    configure_geometric_family,
    configure_log_series_family,
    configure_negative_binomial_family,
    configure_poisson_family,
)

__all__ = [
    "GaussianSamplingMethod",
    "standard_gaussian_generator",
    # continuous
    "configure_gaussian_family",
    "configure_cauchy_family",
    "configure_laplace_family",
    "configure_logistic_family",
    "configure_gumbel_maximum_family",
    "configure_gumbel_minimum_family",
    "configure_weibull_family",
    "configure_pareto_family",
    "configure_kumaraswamy_family",
    "configure_chi_square_family",
    "configure_student_t2_family",
    "configure_exponential_family",
    "configure_uniform_family",
    # discrete
    "configure_poisson_family",
    "configure_geometric_family",
    "configure_log_series_family",
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_negative_binomial_family",
]
