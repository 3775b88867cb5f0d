from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys

import pytest

from pysatl_variates.variates.guards import (
    DBL_EPSILON,
    DBL_MAX,
    DBL_MIN,
    floor_to_tiny,
    ieee_div,
    ieee_log,
    ieee_pow,
    saturating_int,
)


def test_constants_match_float_info() -> None:
    assert DBL_MIN == sys.float_info.min
    assert DBL_MAX == sys.float_info.max
    assert DBL_EPSILON == sys.float_info.epsilon


def test_floor_to_tiny() -> None:
    assert floor_to_tiny(0.0) == DBL_MIN
    assert floor_to_tiny(0.3) == 0.3


@pytest.mark.parametrize(
    "x, expected",
    [(0.0, -math.inf), (1.0, 0.0), (math.e, 1.0)],
)
def test_ieee_log(x: float, expected: float) -> None:
    assert ieee_log(x) == pytest.approx(expected)


def test_ieee_log_of_negative_is_nan() -> None:
    assert math.isnan(ieee_log(-1.0))
    assert math.isnan(ieee_log(math.nan))


@pytest.mark.parametrize(
    "num, den, expected",
    [
        (1.0, 0.0, math.inf),
        (-1.0, 0.0, -math.inf),
        (1.0, -0.0, -math.inf),
        (3.0, 2.0, 1.5),
    ],
)
def test_ieee_div(num: float, den: float, expected: float) -> None:
    assert ieee_div(num, den) == expected


def test_ieee_div_zero_by_zero_is_nan() -> None:
    assert math.isnan(ieee_div(0.0, 0.0))


def test_ieee_pow() -> None:
    assert ieee_pow(4.0, 0.5) == 2.0
    assert math.isnan(ieee_pow(-8.0, 1.0 / 3.0))
    assert ieee_pow(0.0, -1.0) == math.inf


@pytest.mark.parametrize(
    "x, expected",
    [
        (2.9, 2),
        (-2.9, -2),
        (math.inf, sys.maxsize),
        (-math.inf, -sys.maxsize),
        (math.nan, 0),
    ],
)
def test_saturating_int(x: float, expected: int) -> None:
    assert saturating_int(x) == expected
