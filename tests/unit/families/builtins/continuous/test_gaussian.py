"""
Tests for Gaussian Distribution Family

This module tests the functionality of the Gaussian distribution family,
including parametrization, characteristics, and sampling methods.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import norm, uniform

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.builtins.continuous import (
    GaussianSamplingMethod,
    standard_gaussian_generator,
)
from pysatl_variates.types import (
    CharacteristicName,
    ContinuousSupportShape1D,
    FamilyName,
    UnivariateContinuous,
)
from pysatl_variates.variates.paired import BoxMullerGenerator, PolarMarsagliaGenerator
from pysatl_variates.variates.rejection import RejectionLimitExceeded
from pysatl_variates.variates.sources import GeneratorSource
from tests.unit.families.builtins.base import BaseDistributionTest
from tests.utils.mocks import SequenceSource


class TestGaussianFamily(BaseDistributionTest):
    """Test suite for Gaussian distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.gaussian_family = self.family(FamilyName.GAUSSIAN)
        self.gaussian_dist_example = self.gaussian_family(mu=2.0, sigma=1.5)

    def test_family_properties(self):
        """Test basic properties of Gaussian family."""
        assert self.gaussian_family.name == FamilyName.GAUSSIAN
        assert self.gaussian_family.parametrization_names == ["meanStd"]
        assert self.gaussian_family.base_parametrization_name == "meanStd"

    def test_distribution_creation(self):
        """Test creation of distribution with mean and standard deviation."""
        dist = self.gaussian_dist_example

        assert dist.family_name == FamilyName.GAUSSIAN
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters.parameters == {"mu": 2.0, "sigma": 1.5}
        assert dist.parametrization_name == "meanStd"

    def test_default_parameters_are_standard(self):
        """Test that omitted parameters give the standard Gaussian."""
        assert self.gaussian_family().parameters.parameters == {"mu": 0.0, "sigma": 1.0}

    @pytest.mark.parametrize("sigma", [0.0, -1.0])
    def test_parametrization_constraints(self, sigma):
        """Test that sigma must be positive."""
        with pytest.raises(ValueError, match="sigma > 0"):
            self.gaussian_family(mu=0.0, sigma=sigma)

    def test_analytical_computations_availability(self):
        """Test that pdf, cdf and ppf are provided."""
        comp = self.gaussian_dist_example.analytical_computations
        assert set(comp) == {CharacteristicName.PDF, CharacteristicName.CDF, CharacteristicName.PPF}

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-3.0, 0.0, 2.0, 4.5, 9.0], norm.pdf),
            (CharacteristicName.CDF, [-3.0, 0.0, 2.0, 4.5, 9.0], norm.cdf),
            (CharacteristicName.PPF, [0.001, 0.1, 0.5, 0.9, 0.999], norm.ppf),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        """Test that characteristics support array inputs."""
        char_func = self.gaussian_dist_example.query_method(char_name)
        input_array = np.array(test_data)
        result_array = char_func(input_array)

        assert result_array.shape == input_array.shape
        self.assert_arrays_almost_equal(result_array, scipy_func(input_array, loc=2.0, scale=1.5))

    def test_ppf_boundaries_and_invalid_probabilities(self):
        """Test PPF at 0 and 1 and outside [0, 1]."""
        ppf = self.gaussian_dist_example.query_method(CharacteristicName.PPF)
        assert ppf(np.array(0.0)) == -np.inf
        assert ppf(np.array(1.0)) == np.inf
        with pytest.raises(ValueError, match="Probability"):
            ppf(np.array([0.5, 1.2]))

    def test_support(self):
        """Test that Gaussian distribution is supported on the real line."""
        support = self.gaussian_dist_example.support
        assert isinstance(support, ContinuousSupport)
        assert support.shape == ContinuousSupportShape1D.REAL_LINE

    @pytest.mark.parametrize(
        "method", [GaussianSamplingMethod.POLAR_MARSAGLIA, GaussianSamplingMethod.BOX_MULLER]
    )
    def test_sampling_matches_distribution(self, method):
        """Test that exact sampling methods follow the Gaussian law."""
        values = self.draw(self.gaussian_dist_example, method=method)
        self.assert_fits(values, norm(loc=2.0, scale=1.5).cdf)

    def test_default_method_is_polar_marsaglia(self):
        """Test that default sampling matches an explicit polar method draw."""
        default = self.draw(self.gaussian_dist_example, seed=5)
        explicit = self.draw(
            self.gaussian_dist_example, seed=5, method=GaussianSamplingMethod.POLAR_MARSAGLIA
        )
        np.testing.assert_array_equal(default, explicit)

    def test_sum_of_uniforms_is_bounded(self):
        """Test the approximate method stays within mu ± 6 sigma."""
        values = self.draw(self.gaussian_dist_example, method="sum_12_uniforms")
        assert np.all(np.abs(values - 2.0) <= 6.0 * 1.5)
        assert values.mean() == pytest.approx(2.0, abs=0.15)

    def test_paired_values_are_both_used(self):
        """Test that a scripted pair yields two consecutive sample values."""
        source = SequenceSource(uniforms=[0.75, 0.25])
        sample = self.gaussian_family().sample(2, source=source)
        first, second = sample.column()
        assert first == pytest.approx(-second)
        assert source.calls["uniform"] == 2

    def test_each_sample_call_starts_with_empty_cache(self):
        """Test that a pending cached variate does not leak into the next call."""
        source = SequenceSource(uniforms=[0.75, 0.25, 0.75, 0.25])
        dist = self.gaussian_family()
        first = dist.sample(1, source=source).column()[0]
        second = dist.sample(1, source=source).column()[0]
        assert first == second
        assert source.calls["uniform"] == 4

    def test_max_iterations_option(self):
        """Test that the rejection cap reaches the polar generator."""
        source = SequenceSource(uniforms=[0.99] * 4)
        with pytest.raises(RejectionLimitExceeded):
            self.gaussian_family().sample(1, source=source, max_iterations=2)

    def test_unknown_method(self):
        """Test that an unknown method name is rejected."""
        with pytest.raises(ValueError, match="Unknown Gaussian sampling method"):
            self.gaussian_family().sample(1, source=GeneratorSource(1), method="ziggurat")

    def test_unknown_option_warns(self):
        """Test that unsupported options are reported."""
        with pytest.warns(UserWarning, match="antithetic") as record:
            self.gaussian_family().sample(1, source=GeneratorSource(1), antithetic=True)
        assert record[0].filename == __file__


class TestStandardGaussianGenerator:
    """Test suite for the standard Gaussian generator factory."""

    def test_returns_fresh_paired_generators(self):
        source = GeneratorSource(1)
        first = standard_gaussian_generator("box_muller", source)
        second = standard_gaussian_generator("box_muller", source)
        assert isinstance(first, BoxMullerGenerator)
        assert first is not second

    def test_polar_receives_iteration_cap(self):
        generator = standard_gaussian_generator("polar_marsaglia", GeneratorSource(1), 7)
        assert isinstance(generator, PolarMarsagliaGenerator)
        assert generator.max_iterations == 7

    def test_sum_of_uniforms(self):
        generator = standard_gaussian_generator("sum_12_uniforms", SequenceSource([0.5] * 12))
        assert generator() == 0.0

    def test_sum_of_uniforms_variance(self):
        generator = standard_gaussian_generator("sum_12_uniforms", GeneratorSource(3))
        values = np.array([generator() for _ in range(4000)])
        # Sum of 12 uniforms shifted by 6 has unit variance
        assert values.var() == pytest.approx(12 * uniform.var(), abs=0.1)
