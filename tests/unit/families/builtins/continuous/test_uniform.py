"""
Tests for Uniform Distribution Family

This module tests the functionality of the continuous uniform distribution
family, including parametrization, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import uniform

from pysatl_variates.types import (
    CharacteristicName,
    ContinuousSupportShape1D,
    FamilyName,
    UnivariateContinuous,
)
from tests.unit.families.builtins.base import BaseDistributionTest
from tests.utils.mocks import SequenceSource


class TestUniformFamily(BaseDistributionTest):
    """Test suite for uniform distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.uniform_family = self.family(FamilyName.CONTINUOUS_UNIFORM)
        self.uniform_dist_example = self.uniform_family(lower_bound=-1.0, upper_bound=3.0)

    def test_family_properties(self):
        """Test basic properties of uniform family."""
        assert self.uniform_family.name == FamilyName.CONTINUOUS_UNIFORM
        assert self.uniform_family.parametrization_names == ["standard"]

    def test_distribution_creation(self):
        """Test creation of distribution with explicit bounds."""
        dist = self.uniform_dist_example

        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters.parameters == {"lower_bound": -1.0, "upper_bound": 3.0}

    def test_default_parameters_are_unit_interval(self):
        """Test that omitted bounds give the unit interval."""
        dist = self.uniform_family()
        assert dist.parameters.parameters == {"lower_bound": 0.0, "upper_bound": 1.0}

    @pytest.mark.parametrize(
        "lower_bound, upper_bound",
        [(1.0, 1.0), (2.0, -2.0)],
    )
    def test_parametrization_constraints(self, lower_bound, upper_bound):
        """Test that the lower bound must be strictly below the upper bound."""
        with pytest.raises(ValueError, match="lower_bound < upper_bound"):
            self.uniform_family(lower_bound=lower_bound, upper_bound=upper_bound)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-2.0, -1.0, 0.0, 2.5, 3.0, 4.0], uniform.pdf),
            (CharacteristicName.CDF, [-2.0, -1.0, 0.0, 2.5, 3.0, 4.0], uniform.cdf),
            (CharacteristicName.PPF, [0.0, 0.25, 0.5, 0.75, 1.0], uniform.ppf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        """Test pdf, cdf and ppf against scipy."""
        input_array = np.array(test_data)
        result = self.uniform_dist_example.query_method(char_name)(input_array)

        self.assert_arrays_almost_equal(result, scipy_func(input_array, loc=-1.0, scale=4.0))

    def test_ppf_rejects_invalid_probability(self):
        """Test ppf bounds checking."""
        ppf = self.uniform_dist_example.query_method(CharacteristicName.PPF)
        with pytest.raises(ValueError, match="Probability must be in"):
            ppf(np.array([-0.5]))

    def test_support(self):
        """Test that the support is the closed interval between the bounds."""
        support = self.uniform_dist_example.support

        assert support.shape == ContinuousSupportShape1D.BOUNDED_INTERVAL
        assert -1.0 in support
        assert 3.0 in support
        assert 3.5 not in support

    def test_variate_rescales_uniform_draw(self):
        """Test that draws are rescaled into the interval."""
        source = SequenceSource(uniforms=[0.25, 0.5])
        sample = self.uniform_dist_example.sample(2, source=source)

        np.testing.assert_array_equal(sample.column(), [0.0, 1.0])

    def test_sampling_matches_distribution(self):
        """Test goodness of fit and interval bounds of seeded samples."""
        values = self.draw(self.uniform_dist_example)

        assert np.all((values > -1.0) & (values < 3.0))
        self.assert_fits(values, uniform(loc=-1.0, scale=4.0).cdf)
