from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_variates.families.configuration import reset_families_register
from pysatl_variates.variates.paired import reset_gaussian_generator
from pysatl_variates.variates.sources import reset_default_source

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_globals() -> Generator[None, Any, None]:
    reset_families_register()
    reset_default_source()
    reset_gaussian_generator()
    yield
    reset_gaussian_generator()
    reset_default_source()
