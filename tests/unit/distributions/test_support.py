from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import islice
from math import inf, nan

import numpy as np
import pytest

from pysatl_variates.distributions.support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)
from pysatl_variates.types import ContinuousSupportShape1D


class TestContinuousSupport:
    support_example = ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=False)

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0, True),
            (1, False),
            (0.5, True),
            (-0.1, False),
            (inf, False),
            (-inf, False),
        ],
        ids=[
            "left_bound_closed",
            "right_bound_open",
            "inside_interval",
            "outside_interval",
            "+inf",
            "-inf",
        ],
    )
    def test_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    @pytest.mark.parametrize("infinity", [-inf, inf])
    def test_real_line_doesnt_contain_inf(self, infinity):
        support = ContinuousSupport()
        assert infinity not in support
        assert support.contains(infinity) is False

    def test_contains_array(self):
        result = self.support_example.contains(np.array([-1.0, 0.0, 0.5, 1.0]))
        assert isinstance(result, np.ndarray)
        assert result.tolist() == [False, True, True, False]

    @pytest.mark.parametrize(
        "support, expected_shape",
        [
            (ContinuousSupport(1, 0), ContinuousSupportShape1D.EMPTY),
            (ContinuousSupport(0, 1), ContinuousSupportShape1D.BOUNDED_INTERVAL),
            (ContinuousSupport(left=0), ContinuousSupportShape1D.RAY_RIGHT),
            (ContinuousSupport(right=0), ContinuousSupportShape1D.RAY_LEFT),
            (ContinuousSupport(), ContinuousSupportShape1D.REAL_LINE),
            (ContinuousSupport(1, 1), ContinuousSupportShape1D.SINGLE_POINT),
        ],
        ids=["empty", "bounded", "ray_right", "ray_left", "real_line", "single_point"],
    )
    def test_shape_variants(self, support, expected_shape):
        assert support.shape == expected_shape

    def test_is_support(self):
        assert isinstance(self.support_example, Support)


class TestIntegerLatticeDiscreteSupport:
    def test_non_negative_integers(self):
        support = IntegerLatticeDiscreteSupport(min_k=0)
        assert 0 in support
        assert 7 in support
        assert 7.0 in support
        assert -1 not in support
        assert 2.5 not in support

    @pytest.mark.parametrize("value", [inf, -inf, nan])
    def test_non_finite_values_are_outside(self, value):
        assert IntegerLatticeDiscreteSupport().contains(value) is False

    def test_contains_array(self):
        support = IntegerLatticeDiscreteSupport(min_k=1, max_k=3)
        result = support.contains(np.array([0.0, 1.0, 1.5, 3.0, 4.0, inf]))
        assert result.tolist() == [False, True, False, True, False, False]

    def test_residue_and_modulus(self):
        support = IntegerLatticeDiscreteSupport(residue=1, modulus=2, min_k=0, max_k=9)
        assert support.first() == 1
        assert support.last() == 9
        assert list(support.iter_points()) == [1, 3, 5, 7, 9]
        assert 4 not in support

    def test_iter_leq(self):
        support = IntegerLatticeDiscreteSupport(min_k=0)
        assert list(support.iter_leq(3.7)) == [0, 1, 2, 3]
        assert list(support.iter_leq(-1)) == []

    def test_iter_leq_respects_upper_bound(self):
        support = IntegerLatticeDiscreteSupport(min_k=0, max_k=2)
        assert list(support.iter_leq(10)) == [0, 1, 2]

    def test_unbounded_right_iteration_is_lazy(self):
        support = IntegerLatticeDiscreteSupport(min_k=1)
        assert list(islice(support, 4)) == [1, 2, 3, 4]
        assert support.last() is None

    def test_left_unbounded_iteration_fails(self):
        support = IntegerLatticeDiscreteSupport()
        assert support.first() is None
        with pytest.raises(RuntimeError, match="min_k"):
            next(support.iter_points())

    def test_empty_lattice(self):
        support = IntegerLatticeDiscreteSupport(residue=0, modulus=5, min_k=1, max_k=4)
        assert support.first() is None
        assert support.last() is None
        assert list(support.iter_points()) == []

    def test_invalid_modulus(self):
        with pytest.raises(ValueError, match="modulus"):
            IntegerLatticeDiscreteSupport(modulus=0)

    def test_is_discrete_support(self):
        assert isinstance(IntegerLatticeDiscreteSupport(min_k=0), DiscreteSupport)
