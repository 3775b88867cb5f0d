"""
Built-in discrete distribution families.

This module contains implementations of integer-valued parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.discrete.bernoulli import configure_bernoulli_family
from pysatl_variates.families.builtins.discrete.binomial import (
    configure_binomial_family,
    configure_negative_binomial_family,
)
from pysatl_variates.families.builtins.discrete.geometric import configure_geometric_family
from pysatl_variates.families.builtins.discrete.log_series import configure_log_series_family
from pysatl_variates.families.builtins.discrete.poisson import configure_poisson_family

__all__ = [
    "configure_poisson_family",
    "configure_geometric_family",
    "configure_log_series_family",
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_negative_binomial_family",
]
