"""
Tests for Location-Scale Distribution Families

This module tests the Cauchy, Laplace, Logistic and Gumbel (maximum and
minimum) families against their scipy counterparts.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import cauchy, gumbel_l, gumbel_r, laplace, logistic

from pysatl_variates.types import (
    CharacteristicName,
    ContinuousSupportShape1D,
    FamilyName,
    UnivariateContinuous,
)
from pysatl_variates.variates.rejection import RejectionLimitExceeded
from pysatl_variates.variates.sources import GeneratorSource
from tests.unit.families.builtins.base import BaseDistributionTest
from tests.utils.mocks import SequenceSource

LOC, SCALE = -1.0, 2.5

FAMILIES = [
    (FamilyName.CAUCHY, cauchy),
    (FamilyName.LAPLACE, laplace),
    (FamilyName.LOGISTIC, logistic),
    (FamilyName.GUMBEL_MAXIMUM, gumbel_r),
    (FamilyName.GUMBEL_MINIMUM, gumbel_l),
]
FAMILY_IDS = [name.value for name, _ in FAMILIES]


@pytest.mark.parametrize("family_name, reference", FAMILIES, ids=FAMILY_IDS)
class TestLocationScaleFamilies(BaseDistributionTest):
    """Shared checks for every location-scale family."""

    def test_family_properties(self, family_name, reference):
        family = self.family(family_name)
        assert family.name == family_name
        assert family.parametrization_names == ["locScale"]

        dist = family(loc=LOC, scale=SCALE)
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters.parameters == {"loc": LOC, "scale": SCALE}
        assert dist.support.shape == ContinuousSupportShape1D.REAL_LINE

    def test_default_parameters(self, family_name, reference):
        assert self.family(family_name)().parameters.parameters == {"loc": 0.0, "scale": 1.0}

    @pytest.mark.parametrize("scale", [0.0, -2.0])
    def test_scale_constraint(self, family_name, reference, scale):
        with pytest.raises(ValueError, match="scale > 0"):
            self.family(family_name)(loc=0.0, scale=scale)

    @pytest.mark.parametrize(
        "char_name, test_data",
        [
            (CharacteristicName.PDF, [-8.0, -2.0, -1.0, 0.0, 1.5, 6.0]),
            (CharacteristicName.CDF, [-8.0, -2.0, -1.0, 0.0, 1.5, 6.0]),
            (CharacteristicName.PPF, [0.001, 0.05, 0.25, 0.5, 0.75, 0.95, 0.999]),
        ],
    )
    def test_characteristics_match_scipy(self, family_name, reference, char_name, test_data):
        dist = self.family(family_name)(loc=LOC, scale=SCALE)
        input_array = np.array(test_data)
        result = dist.query_method(char_name)(input_array)

        assert result.shape == input_array.shape
        expected = getattr(reference, char_name)(input_array, loc=LOC, scale=SCALE)
        self.assert_arrays_almost_equal(result, expected, precision=1e-9)

    def test_ppf_boundaries(self, family_name, reference):
        ppf = self.family(family_name)(loc=LOC, scale=SCALE).query_method(CharacteristicName.PPF)
        result = ppf(np.array([0.0, 1.0]))
        np.testing.assert_array_equal(result, [-np.inf, np.inf])

    def test_ppf_rejects_invalid_probability(self, family_name, reference):
        ppf = self.family(family_name)().query_method(CharacteristicName.PPF)
        with pytest.raises(ValueError, match="Probability must be in"):
            ppf(np.array([-0.1, 0.5]))

    def test_sampling_matches_distribution(self, family_name, reference):
        values = self.draw(self.family(family_name)(loc=LOC, scale=SCALE))
        self.assert_fits(values, reference(loc=LOC, scale=SCALE).cdf)

    def test_sampling_is_reproducible(self, family_name, reference):
        dist = self.family(family_name)(loc=LOC, scale=SCALE)
        np.testing.assert_array_equal(self.draw(dist, seed=3), self.draw(dist, seed=3))


class TestLocationScaleVariates(BaseDistributionTest):
    """Family-specific variate details."""

    def test_laplace_centre_draw(self):
        source = SequenceSource(uniforms=[0.5], exponentials=[4.0])
        sample = self.family(FamilyName.LAPLACE)(loc=3.0, scale=2.0).sample(1, source=source)
        assert sample.column()[0] == 3.0

    def test_logistic_median_draw(self):
        source = SequenceSource(uniforms=[0.5])
        sample = self.family(FamilyName.LOGISTIC)(loc=-4.0).sample(1, source=source)
        assert sample.column()[0] == -4.0

    def test_gumbel_maximum_and_minimum_are_mirrored(self):
        maximum = self.family(FamilyName.GUMBEL_MAXIMUM)().sample(
            1, source=SequenceSource(exponentials=[0.3])
        )
        minimum = self.family(FamilyName.GUMBEL_MINIMUM)().sample(
            1, source=SequenceSource(exponentials=[0.3])
        )
        assert maximum.column()[0] == -minimum.column()[0]

    def test_cauchy_scripted_ratio(self):
        source = SequenceSource(uniforms=[0.75, 0.625])
        sample = self.family(FamilyName.CAUCHY)(loc=1.0, scale=3.0).sample(1, source=source)
        assert sample.column()[0] == pytest.approx(7.0)

    def test_cauchy_iteration_cap(self):
        source = SequenceSource(uniforms=[0.99] * 2)
        with pytest.raises(RejectionLimitExceeded):
            self.family(FamilyName.CAUCHY)().sample(1, source=source, max_iterations=1)

    def test_cauchy_rejects_gaussian_only_option(self):
        with pytest.warns(UserWarning, match="method"):
            self.family(FamilyName.CAUCHY)().sample(1, source=GeneratorSource(1), method="x")
