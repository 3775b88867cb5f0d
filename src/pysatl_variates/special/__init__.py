"""
Special functions

Sine and cosine integrals evaluated by power series near the origin.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .sici import (
    EULER_GAMMA,
    auxiliary_cos_integral_gi,
    auxiliary_sin_integral_fi,
    cos_integral_ci,
    entire_cos_integral_cin,
    power_series_cin,
    power_series_si,
    sin_cos_integrals_si_ci,
    sin_integral_si,
)

__all__ = [
    "EULER_GAMMA",
    "power_series_si",
    "power_series_cin",
    "sin_integral_si",
    "entire_cos_integral_cin",
    "cos_integral_ci",
    "sin_cos_integrals_si_ci",
    "auxiliary_sin_integral_fi",
    "auxiliary_cos_integral_gi",
]
