"""
PySATL Variates
===============

Random-variate generation for probabilistic distributions: a uniform random
source contract, transform, rejection and paired Gaussian generators,
discrete samplers, sine and cosine integrals, and parametric families that
sample through these generators.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .families import *
from .families import __all__ as _family_all
from .special import *
from .special import __all__ as _special_all
from .types import *
from .types import __all__ as _types_all
from .variates import *
from .variates import __all__ as _variates_all

__version__ = version("pysatl-variates")
__all__ = [
    "__version__",
    *_distr_all,
    *_family_all,
    *_special_all,
    *_types_all,
    *_variates_all,
]

del _distr_all
del _family_all
del _special_all
del _types_all
del _variates_all
