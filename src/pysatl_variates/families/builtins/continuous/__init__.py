"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.continuous.cauchy import configure_cauchy_family
from pysatl_variates.families.builtins.continuous.chi_square import configure_chi_square_family
from pysatl_variates.families.builtins.continuous.exponential import configure_exponential_family
from pysatl_variates.families.builtins.continuous.gaussian import (
    GaussianSamplingMethod,
    configure_gaussian_family,
    standard_gaussian_generator,
)
from pysatl_variates.families.builtins.continuous.gumbel import (
    configure_gumbel_maximum_family,
    configure_gumbel_minimum_family,
)
from pysatl_variates.families.builtins.continuous.kumaraswamy import configure_kumaraswamy_family
from pysatl_variates.families.builtins.continuous.laplace import configure_laplace_family
from pysatl_variates.families.builtins.continuous.logistic import configure_logistic_family
from pysatl_variates.families.builtins.continuous.pareto import configure_pareto_family
from pysatl_variates.families.builtins.continuous.student_t2 import configure_student_t2_family
from pysatl_variates.families.builtins.continuous.uniform import configure_uniform_family
from pysatl_variates.families.builtins.continuous.weibull import configure_weibull_family

__all__ = [
    "GaussianSamplingMethod",
    "standard_gaussian_generator",
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
]
