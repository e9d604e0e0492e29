"""
Tests for Uniform Distribution Family

This module tests the functionality of the uniform distribution family,
including its closed support and the exact boundary values.
"""

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import uniform

from distfamilies import operations as ops
from distfamilies.errors import ParameterError
from distfamilies.types import ContinuousSupportShape1D, FamilyName, UnivariateContinuous

from .base import BaseDistributionTest


class TestUniformFamily(BaseDistributionTest):
    """Test suite for Uniform distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.uniform_family = self.family(FamilyName.UNIFORM)
        self.uniform_dist_example = self.uniform_family(a=2.0, b=5.0)

    def test_family_properties(self):
        assert self.uniform_family.name == FamilyName.UNIFORM
        assert self.uniform_family.parametrization_names == ["standard"]
        assert self.uniform_family.distribution_type == UnivariateContinuous

    def test_default_parameters(self):
        dist = self.uniform_family()
        assert dist.parameters.parameters == {"a": 0.0, "b": 1.0}

    @pytest.mark.parametrize("a, b", [(5.0, 2.0), (1.0, 1.0)])
    def test_parametrization_constraints(self, a, b):
        """a must be strictly less than b."""
        with pytest.raises(ParameterError, match="a < b"):
            self.uniform_family(a=a, b=b)

    def test_support_is_closed_interval(self):
        support = self.uniform_dist_example.support
        assert support.shape == ContinuousSupportShape1D.BOUNDED_INTERVAL
        assert support.left_closed and support.right_closed
        assert ops.support(self.uniform_dist_example) == (2.0, 5.0)

    @pytest.mark.parametrize(
        "operation, test_data, scipy_func",
        [
            (ops.density, [1.0, 2.0, 3.0, 4.5, 5.0, 6.0], uniform.pdf),
            (ops.cumulative, [1.0, 2.0, 3.0, 4.5, 5.0, 6.0], uniform.cdf),
            (ops.quantile, [0.0, 0.1, 0.5, 0.9, 1.0], uniform.ppf),
        ],
        ids=["density", "cumulative", "quantile"],
    )
    def test_against_scipy(self, operation, test_data, scipy_func):
        input_array = np.array(test_data)
        expected = scipy_func(input_array, loc=2.0, scale=3.0)
        self.assert_arrays_almost_equal(operation(self.uniform_dist_example, input_array), expected)

    def test_log_density(self):
        values = ops.log_density(self.uniform_dist_example, np.array([1.0, 2.0, 5.0, 5.5]))
        np.testing.assert_allclose(values[1:3], -np.log(3.0))
        assert values[0] == -np.inf
        assert values[3] == -np.inf

    def test_boundaries_are_exact(self):
        dist = self.uniform_dist_example
        assert ops.cumulative(dist, 2.0) == 0.0
        assert ops.cumulative(dist, 5.0) == 1.0
        assert ops.quantile(dist, 0.0) == 2.0
        assert ops.quantile(dist, 1.0) == 5.0

    def test_moments(self):
        assert ops.mean(self.uniform_dist_example) == pytest.approx(3.5)
        assert ops.variance(self.uniform_dist_example) == pytest.approx(0.75)
        assert ops.median(self.uniform_dist_example) == pytest.approx(3.5)

    def test_samples_stay_in_support(self):
        draws = ops.sample(self.uniform_dist_example, 1000, rng=3)
        assert np.all((draws >= 2.0) & (draws <= 5.0))
