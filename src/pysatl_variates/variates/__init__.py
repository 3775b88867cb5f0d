"""
Variates subpackage

Random-variate generators driven by a single uniform source contract:

- random sources and the process-wide default (:mod:`.sources`);
- floating-point guards shared by the generators (:mod:`.guards`);
- transform samplers (:mod:`.transform`);
- rejection samplers (:mod:`.rejection`);
- paired-output Gaussian generators (:mod:`.paired`);
- discrete samplers (:mod:`.discrete`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .discrete import (
    bernoulli_variate,
    binomial_variate,
    geometric_variate,
    log_series_variate,
    negative_binomial_variate,
    poisson_variate,
)
from .guards import DBL_MAX, DBL_MIN
from .paired import (
    BoxMullerGenerator,
    PairedGaussianGenerator,
    PairedVariateCache,
    PolarMarsagliaGenerator,
    gaussian_variate,
    get_gaussian_generator,
    reset_gaussian_generator,
    set_gaussian_generator,
)
from .rejection import RejectionLimitExceeded, cauchy_variate, unit_disk_point
from .sources import (
    GeneratorSource,
    RandomSource,
    get_default_source,
    reset_default_source,
    seed_default_source,
    set_default_source,
)
from .transform import (
    chi_square_variate,
    exponential_variate,
    gumbel_maximum_variate,
    gumbel_minimum_variate,
    kumaraswamy_variate,
    laplace_variate,
    logistic_variate,
    pareto_variate,
    sum_12_uniforms_variate,
    t2_variate,
    uniform_0_1_variate,
    weibull_variate,
)

__all__ = [
    # sources
    "RandomSource",
    "GeneratorSource",
    "get_default_source",
    "set_default_source",
    "seed_default_source",
    "reset_default_source",
    # guards
    "DBL_MIN",
    "DBL_MAX",
    # transform samplers
    "uniform_0_1_variate",
    "exponential_variate",
    "weibull_variate",
    "pareto_variate",
    "gumbel_maximum_variate",
    "gumbel_minimum_variate",
    "logistic_variate",
    "laplace_variate",
    "kumaraswamy_variate",
    "t2_variate",
    "chi_square_variate",
    "sum_12_uniforms_variate",
    # rejection samplers
    "RejectionLimitExceeded",
    "unit_disk_point",
    "cauchy_variate",
    # paired generators
    "PairedVariateCache",
    "PairedGaussianGenerator",
    "BoxMullerGenerator",
    "PolarMarsagliaGenerator",
    "get_gaussian_generator",
    "set_gaussian_generator",
    "reset_gaussian_generator",
    "gaussian_variate",
    # discrete samplers
    "bernoulli_variate",
    "geometric_variate",
    "log_series_variate",
    "binomial_variate",
    "poisson_variate",
    "negative_binomial_variate",
]
