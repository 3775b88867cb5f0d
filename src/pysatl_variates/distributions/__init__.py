"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL variates:

- analytical computations (:mod:`.computation`);
- distribution protocol (:mod:`.distribution`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable strategies (:mod:`.strategies`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation, Computation
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import (
    AnalyticalComputationStrategy,
    ComputationStrategy,
    InverseTransformSamplingStrategy,
    SamplingStrategy,
    VariateFactory,
    VariateSamplingStrategy,
)
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)

__all__ = [
    # computation primitives
    "Computation",
    "AnalyticalComputation",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "ComputationStrategy",
    "AnalyticalComputationStrategy",
    "SamplingStrategy",
    "VariateFactory",
    "VariateSamplingStrategy",
    "InverseTransformSamplingStrategy",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
