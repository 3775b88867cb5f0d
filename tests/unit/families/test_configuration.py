"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_variates.families.builtins import configure_gaussian_family
from pysatl_variates.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import FamilyName, Kind


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        """Test that configure_families_register returns a ParametricFamilyRegister."""
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_singleton(self):
        """Test that configure_families_register returns the same instance."""
        registry2 = configure_families_register()
        assert self.registry is registry2

    def test_families_registered(self):
        """Test that every built-in family is registered."""
        registered_families = set(self.registry._registered_families.keys())
        assert registered_families == set(FamilyName)

    @pytest.mark.parametrize(
        "name, kind",
        [
            (FamilyName.GAUSSIAN, Kind.CONTINUOUS),
            (FamilyName.STUDENT_T2, Kind.CONTINUOUS),
            (FamilyName.POISSON, Kind.DISCRETE),
            (FamilyName.NEGATIVE_BINOMIAL, Kind.DISCRETE),
        ],
    )
    def test_family_kinds(self, name, kind):
        """Test that families are registered with the right distribution kind."""
        assert self.registry.get(name).base.__family__.name == name
        distr_type = self.registry.get(name)._distr_type(None)
        assert distr_type.kind == kind

    def test_reset_families_register(self):
        """Test that reset_families_register clears the cache."""
        registry1 = configure_families_register()
        reset_families_register()
        registry2 = configure_families_register()

        assert registry1 is not registry2
        assert set(registry2.list_registered_families()) == set(FamilyName)

    def test_configure_function_is_idempotent(self):
        """Test that configuring an already registered family is a no-op."""
        gaussian = self.registry.get(FamilyName.GAUSSIAN)
        configure_gaussian_family()
        assert self.registry.get(FamilyName.GAUSSIAN) is gaussian

    def test_registry_singleton_pattern(self):
        """Test that ParametricFamilyRegister itself follows singleton pattern."""
        registry1 = ParametricFamilyRegister()
        registry2 = ParametricFamilyRegister()
        assert registry1 is registry2

    def test_registry_get_family_method(self):
        """Test the get method of ParametricFamilyRegister."""
        gaussian_family = self.registry.get(FamilyName.GAUSSIAN)
        assert gaussian_family.name == FamilyName.GAUSSIAN

        with pytest.raises(ValueError, match="No family NonExistentFamily found"):
            self.registry.get("NonExistentFamily")

    def test_registry_rejects_duplicates(self):
        """Test that a family name can only be registered once."""
        with pytest.raises(ValueError, match="already found in register"):
            ParametricFamilyRegister.register(self.registry.get(FamilyName.POISSON))

    def test_registry_list_registered_families(self):
        """Test the list_registered_families method of ParametricFamilyRegister."""
        families_list = ParametricFamilyRegister.list_registered_families()

        assert isinstance(families_list, list)
        assert FamilyName.GAUSSIAN in families_list
        assert FamilyName.LOG_SERIES in families_list
        assert "NonExistentFamily" not in families_list
        assert ParametricFamilyRegister.contains(FamilyName.BERNOULLI)
        assert not ParametricFamilyRegister.contains("NonExistentFamily")
