"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from distfamilies.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from distfamilies.families.registry import ParametricFamilyRegister
from distfamilies.types import FamilyName, Kind


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_singleton(self):
        registry2 = configure_families_register()
        assert self.registry is registry2

    def test_all_families_registered(self):
        assert set(self.registry.names()) == {str(name) for name in FamilyName}

    @pytest.mark.parametrize(
        "name",
        [
            FamilyName.BERNOULLI,
            FamilyName.BINOMIAL,
            FamilyName.GEOMETRIC,
            FamilyName.HYPER_GEOMETRIC,
            FamilyName.NEGATIVE_BINOMIAL,
            FamilyName.POISSON,
        ],
    )
    def test_discrete_families_are_discrete(self, name):
        assert self.registry.get(name).kind is Kind.DISCRETE

    def test_remaining_families_are_continuous(self):
        discrete = {
            FamilyName.BERNOULLI,
            FamilyName.BINOMIAL,
            FamilyName.GEOMETRIC,
            FamilyName.HYPER_GEOMETRIC,
            FamilyName.NEGATIVE_BINOMIAL,
            FamilyName.POISSON,
        }
        for name in set(FamilyName) - discrete:
            assert self.registry.get(name).kind is Kind.CONTINUOUS, name

    def test_reset_families_register(self):
        registry1 = configure_families_register()
        reset_families_register()
        registry2 = configure_families_register()

        assert registry1 is not registry2
        assert registry2.contains(FamilyName.REV_WEIBULL)

    def test_registry_singleton_pattern(self):
        registry1 = ParametricFamilyRegister()
        registry2 = ParametricFamilyRegister()
        assert registry1 is registry2

    def test_registry_get_family_method(self):
        normal_family = self.registry.get(FamilyName.NORMAL)
        assert normal_family.name == FamilyName.NORMAL

        with pytest.raises(ValueError):
            self.registry.get("NonExistentFamily")

    def test_configure_functions_are_idempotent(self):
        from distfamilies.families.builtins import configure_rev_weibull_family

        family = self.registry.get(FamilyName.REV_WEIBULL)
        configure_rev_weibull_family()
        assert self.registry.get(FamilyName.REV_WEIBULL) is family
